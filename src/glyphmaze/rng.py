import math
from dataclasses import dataclass, field
from typing import Union

Seed = Union[int, float]

A = 16807
M = 0x7FFFFFFF  # 2^31-1
SPAN = M - 1    # 2147483646, the number of reachable states

def pm_next(state: Seed) -> Seed:
    return (state * A) % M

def normalize_seed(seed: Seed) -> Seed:
    """
    Fold an arbitrary real seed into 1..M-1.
    The remainder truncates toward zero (sign follows the seed), and any
    non-positive result is shifted up by M-1 so the state never sits on 0.
    """
    if isinstance(seed, bool):
        raise ValueError("seed must be a number, not a bool")
    if isinstance(seed, int):
        s = abs(seed) % M
        if seed < 0:
            s = -s
    else:
        if not math.isfinite(seed):
            raise ValueError(f"seed must be finite, got {seed!r}")
        s = math.fmod(seed, M)
    if s <= 0:
        s += SPAN
    return s

@dataclass
class PMRandom:
    """Park–Miller minimal-standard generator (A=16807, M=2^31-1)."""
    seed: Seed
    state: Seed = field(init=False)

    def __post_init__(self):
        self.state = normalize_seed(self.seed)

    def next_int(self) -> Seed:
        self.state = pm_next(self.state)
        return self.state

    def next_float(self) -> float:
        return (self.next_int() - 1) / SPAN

    def index(self, n: int) -> int:
        # floor(f*n) stays below n for integer state; clamp anyway.
        if n <= 0:
            raise ValueError("n must be positive")
        return min(math.floor(self.next_float() * n), n - 1)
