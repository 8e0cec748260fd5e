from __future__ import annotations
import math
import random
import struct
from typing import List

import pytest

# Import project primitives
from elparse.tables import POW10_TABLE, PowerTable


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def _random_finite_double(rng: random.Random) -> float:
    """Uniform over bit patterns, so every exponent band is hit (NaN/inf skipped)."""
    while True:
        x = struct.unpack("<d", struct.pack("<Q", rng.getrandbits(64)))[0]
        if math.isfinite(x):
            return x


#: Doubles that sit on the edges of the binary64 range or of the table.
BOUNDARY_DOUBLES: List[float] = [
    0.0,
    -0.0,
    5e-324,                   # smallest subnormal
    -5e-324,
    2.225073858507201e-308,   # largest subnormal
    2.2250738585072014e-308,  # smallest normal
    1.0,
    0.1,
    0.3,
    2.0 ** 53,
    2.0 ** 53 + 2,
    123456789012345680.0,
    1e22,
    1e23,
    1.7976931348623157e308,   # largest finite
    -1.7976931348623157e308,
]


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def pow10_table() -> PowerTable:
    return POW10_TABLE


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(0xE15E1)


@pytest.fixture()
def boundary_doubles() -> List[float]:
    return list(BOUNDARY_DOUBLES)


@pytest.fixture()
def random_doubles(rng: random.Random) -> List[float]:
    return [_random_finite_double(rng) for _ in range(3000)]
