import os
import secrets
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .rng import M, Seed

ENV_SIZE = "GLYPHMAZE_SIZE"
ENV_SEED = "GLYPHMAZE_SEED"

@dataclass(frozen=True)
class Defaults:
    size: int = 16
    tile: int = 16  # pixels per cell for PNG / viewer output

# Global defaults (can be swapped by launcher)
DEFAULTS = Defaults()

SeedSource = Callable[[], Seed]

def default_seed() -> int:
    """Fresh seed in [0, 2^31-1) from the OS entropy pool."""
    return secrets.randbelow(M)

def parse_seed(text: str) -> Seed:
    """Accept integer or real seeds; '12' stays an int, '12.5' becomes a float."""
    try:
        return int(text)
    except ValueError:
        return float(text)

def env_size(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    environ = os.environ if environ is None else environ
    raw = environ.get(ENV_SIZE)
    return int(raw) if raw else None

def env_seed(environ: Optional[Mapping[str, str]] = None) -> Optional[Seed]:
    environ = os.environ if environ is None else environ
    raw = environ.get(ENV_SEED)
    return parse_seed(raw) if raw else None
