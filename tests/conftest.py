from __future__ import annotations

import pytest

from gfecc.field.registry import binary_field, prime_field


@pytest.fixture
def gf11():
    """GF(11), primitive element 2 (the field used throughout the RS examples)."""
    return prime_field(11, 2)


@pytest.fixture
def gf929():
    """GF(929), primitive element 3 (PDF417 error correction field)."""
    return prime_field(929, 3)


@pytest.fixture
def gf8():
    """GF(2^3) with x^3 + x + 1."""
    return binary_field("1011")


@pytest.fixture
def gf256():
    """GF(2^8) with x^8 + x^4 + x^3 + x^2 + 1 (0x11D, QR codes)."""
    return binary_field("100011101")
