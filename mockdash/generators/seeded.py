import math
from typing import Union

Seed = Union[str, int, float]


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - 0x100000000 if n >= 0x80000000 else n


def string_to_seed(seed: str) -> int:
    """Fold a string into a signed 32-bit integer (``acc*31 + unit``).

    Works on UTF-16 code units so that characters outside the BMP
    contribute their surrogate pair.
    """
    data = seed.encode("utf-16-le")
    acc = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        acc = _to_int32(acc * 31 + unit)
    return acc


def seeded_random(seed: Seed) -> float:
    """Deterministic pseudo-random value in [0, 1) for ``seed``."""
    seed_num = string_to_seed(seed) if isinstance(seed, str) else seed
    x = math.sin(seed_num) * 10000
    return abs(x - math.floor(x))
