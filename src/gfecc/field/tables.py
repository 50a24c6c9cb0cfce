from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple
import logging

import numpy as np

from gfecc.errors import (
    InputTooSmall,
    InvalidDefiningPolynomial,
    NotPrime,
    PrimitiveElementNotFound,
    SuppliedElementNotPrimitive,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class LogExpTables:
    """
    Discrete exp/log tables for one field, base `generator`.

      exp[k] = generator^k          k in [0, order-1)
      log[v] = k such that exp[k]=v  v in [1, order); log[0] == 0 by convention

    polynomial: packed defining polynomial for binary fields, None for prime fields.
    Both arrays are read-only once built.
    """
    order: int
    generator: int
    exp: np.ndarray
    log: np.ndarray
    polynomial: Optional[int] = None


# ----------------------------
# Field parameter analysis
# ----------------------------

def analyze_defining_polynomial(bits: str) -> Tuple[int, int]:
    """
    Parse an irreducible GF(2) polynomial given MSB first, e.g. "100011101"
    for x^8 + x^4 + x^3 + x^2 + 1.

    Returns (order, polynomial) where order = 2^(len(bits)-1) and polynomial is
    the packed bit pattern including the leading term (0x11D above).
    """
    if not isinstance(bits, str):
        raise TypeError("polynomial bit field must be a str")
    if len(bits) < 3:
        raise InvalidDefiningPolynomial("polynomial bit field must have at least three elements")
    if bits[0] != "1":
        raise InvalidDefiningPolynomial("polynomial bit field must begin with a '1'")
    if any(ch not in "01" for ch in bits):
        raise InvalidDefiningPolynomial("only '1' and '0' allowed in polynomial bit field")

    order = 1 << (len(bits) - 1)
    return order, int(bits, 2)


def is_prime(n: int) -> bool:
    # Plain trial division; field orders are small.
    if n < 2:
        return False
    for i in range(2, n):
        if n % i == 0:
            return False
    return True


def analyze_prime_order(n: int) -> bool:
    if not isinstance(n, int):
        raise TypeError("prime order must be int")
    if n < 2:
        raise InputTooSmall(f"prime must be at least 2, got {n}")
    if not is_prime(n):
        raise NotPrime(f"{n} is not prime")
    return True


# ----------------------------
# Primitive elements
# ----------------------------

def is_primitive_element(order: int, candidate: int, *, polynomial: Optional[int] = None) -> bool:
    """
    True iff successive powers of `candidate` produce every nonzero residue
    exactly once before returning to 1.

    Multiplication is modulo `order` for prime fields, or carry-less modulo
    `polynomial` when one is given (binary fields).
    """
    if order < 2:
        raise InputTooSmall(f"order must be at least 2, got {order}")

    g = candidate % order
    if g == 0:
        return False

    mul = _multiplier(order, polynomial)
    seen = np.zeros(order, dtype=bool)
    value = 1
    seen[1] = True

    for _ in range(2, order):
        value = mul(value, g)
        if value == 0 or seen[value]:
            return False
        seen[value] = True

    return True


def find_primitive_element(order: int, *, polynomial: Optional[int] = None) -> int:
    for candidate in range(2, order):
        if is_primitive_element(order, candidate, polynomial=polynomial):
            return candidate
    raise PrimitiveElementNotFound(f"could not find a primitive element for {order}")


# ----------------------------
# Table construction
# ----------------------------

def build_tables(order: int, primitive_element: int, *, polynomial: Optional[int] = None) -> LogExpTables:
    """
    Build exp by repeated multiplication by the primitive element, then invert
    it into log. For binary fields with generator 2 each step is a left shift
    followed by XOR with the defining polynomial on overflow.
    """
    if order < 2:
        raise InputTooSmall(f"order must be at least 2, got {order}")

    g = primitive_element % order
    mul = _multiplier(order, polynomial)

    exp = np.zeros(order - 1, dtype=np.int64)
    exp[0] = 1
    for i in range(1, order - 1):
        exp[i] = mul(int(exp[i - 1]), g)

    if len(np.unique(exp)) != order - 1 or np.any(exp == 0):
        raise SuppliedElementNotPrimitive(
            f"{primitive_element} is not a primitive element for {order}"
        )

    logs = np.zeros(order, dtype=np.int64)
    logs[exp] = np.arange(order - 1, dtype=np.int64)

    exp.setflags(write=False)
    logs.setflags(write=False)

    log.debug("built log/exp tables for GF(%d), generator %d", order, g)
    return LogExpTables(order=order, generator=g, exp=exp, log=logs, polynomial=polynomial)


def build_prime_tables(order: int, primitive_element: Optional[int] = None) -> LogExpTables:
    analyze_prime_order(order)

    if primitive_element is None:
        primitive_element = find_primitive_element(order)
        log.debug("using %d as primitive element for GF(%d)", primitive_element, order)
    elif not is_primitive_element(order, primitive_element):
        raise SuppliedElementNotPrimitive(
            f"{primitive_element} is not a primitive element for {order}"
        )

    return build_tables(order, primitive_element)


def build_binary_tables(bits: str) -> LogExpTables:
    order, polynomial = analyze_defining_polynomial(bits)

    # Irreducible is not enough: x must generate the whole nonzero group.
    if not is_primitive_element(order, 2, polynomial=polynomial):
        raise InvalidDefiningPolynomial(
            f"2 does not generate GF({order}) modulo {bits}; polynomial must be primitive"
        )

    return build_tables(order, 2, polynomial=polynomial)


# ----------------------------
# Internal
# ----------------------------

def _multiplier(order: int, polynomial: Optional[int]) -> Callable[[int, int], int]:
    if polynomial is None:
        return lambda a, b: (a * b) % order
    return lambda a, b: _carryless_mul(a, b, polynomial, order)


def _carryless_mul(a: int, b: int, polynomial: int, order: int) -> int:
    r = 0
    while b:
        if b & 1:
            r ^= a
        a <<= 1
        if a >= order:
            a ^= polynomial
        b >>= 1
    return r
