import time
from dataclasses import InitVar, dataclass, field
from typing import List, Optional

MASK64 = 0xFFFFFFFFFFFFFFFF
INT32_MAX = 0x7FFFFFFF  # 2^31-1
TWO_64 = float(1 << 64)
# largest double strictly below 1.0
BELOW_ONE = 1.0 - 2.0 ** -53


class RangeError(ValueError):
    """Bad bounds handed to one of the bounded draws."""


def splitmix64(x: int) -> int:
    z = (x + 0x9E3779B97F4A7C15) & MASK64
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & MASK64
    return z ^ (z >> 31)

def rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & MASK64

def time_seed() -> int:
    # Only used when no seed is given; runs seeded this way are not reproducible.
    return time.monotonic_ns() & MASK64


@dataclass
class ReRandom:
    """
    Seeded xoshiro256** source that remembers its seed.

    Every draw goes through next_uint64(), one state step per call, so two
    sources built from the same seed stay in lockstep forever.
    """
    seed: InitVar[Optional[int]] = None
    _first_seed: int = field(init=False)
    state: List[int] = field(init=False, repr=False)

    def __post_init__(self, seed: Optional[int]):
        if seed is None:
            seed = time_seed()
        self._first_seed = seed & MASK64
        s0 = splitmix64(self._first_seed)
        s1 = splitmix64(s0)
        s2 = splitmix64(s1)
        s3 = splitmix64(s2)
        self.state = [s0, s1, s2, s3]

    @property
    def first_seed(self) -> int:
        return self._first_seed

    def next_uint64(self) -> int:
        s0, s1, s2, s3 = self.state
        result = (rotl((s1 * 5) & MASK64, 7) * 9) & MASK64
        t = (s1 << 17) & MASK64

        s2 ^= s0
        s3 ^= s1
        s1 ^= s2
        s0 ^= s3
        s2 ^= t
        s3 = rotl(s3, 45)

        self.state = [s0, s1, s2, s3]
        return result

    def next_int(self, max_value: Optional[int] = None) -> int:
        """
        next_int()          -> 0..INT32_MAX-1
        next_int(max_value) -> 0..max_value-1, or 0 for max_value == 0 (no draw)
        """
        if max_value is None:
            return self.next_uint64() % INT32_MAX
        if max_value < 0:
            raise RangeError(f"max_value must be >= 0, got {max_value}")
        if max_value == 0:
            return 0
        return self.next_uint64() % max_value

    def next_range(self, min_value: int, max_value: int) -> int:
        """min_value..max_value-1; min_value itself when the two are equal (no draw)."""
        if min_value > max_value:
            raise RangeError(f"min_value ({min_value}) must be <= max_value ({max_value})")
        span = max_value - min_value
        if span == 0:
            return min_value
        return min_value + self.next_uint64() % span

    def next_double(self) -> float:
        value = self.next_uint64() / TWO_64
        # the very top of the u64 range rounds up to 1.0 in double precision
        return value if value < 1.0 else BELOW_ONE
