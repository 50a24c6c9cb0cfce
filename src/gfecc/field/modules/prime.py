from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Type

from gfecc.field.element import FieldElement
from gfecc.field.tables import analyze_prime_order, build_prime_tables, find_primitive_element

# Single-character display, used for small fields (GF(11) prints 0..9, A).
_DIGITS = "0123456789ABCDEF"


@dataclass(frozen=True)
class Config:
    """
    Prime-order field GF(p), modular arithmetic.

    order: the prime p.
    primitive_element: generator for the log/exp tables.
        None -> smallest primitive root found from 2 upward.
    """
    order: int = 11
    primitive_element: Optional[int] = None


class PrimeElement(FieldElement):
    """
    Element of GF(p). add/sub/mul/neg are plain modular arithmetic; the log/exp
    tables are only consulted for div, pow, log and exp.
    """
    __slots__ = ()

    def add(self, other: Any) -> PrimeElement:
        o = self._coerce(other)
        return type(self)((self._value + o._value) % self.SIZE)

    def sub(self, other: Any) -> PrimeElement:
        o = self._coerce(other)
        return type(self)((self.SIZE + self._value - o._value) % self.SIZE)

    def mul(self, other: Any) -> PrimeElement:
        o = self._coerce(other)
        return type(self)((self._value * o._value) % self.SIZE)

    def neg(self) -> PrimeElement:
        return type(self)((self.SIZE - self._value) % self.SIZE)

    def __str__(self) -> str:
        if self.SIZE <= len(_DIGITS):
            return _DIGITS[self._value]
        return str(self._value)


def resolve(*, cfg: Any) -> Config:
    """
    Canonical Config for cfg: the order checked and the generator fixed
    (searched for when None, reduced modulo the order otherwise). Configs that
    resolve equal describe the same field with identical tables.
    """
    order = _get_order(cfg)
    primitive_element = _get_primitive_element(cfg)

    analyze_prime_order(order)
    if primitive_element is None:
        primitive_element = find_primitive_element(order)
    return Config(order=order, primitive_element=primitive_element % order)


def build(*, cfg: Any) -> Type[PrimeElement]:
    """
    Validate cfg, build the tables and return a new PrimeElement subclass
    named GF<p>. Raises before returning anything if validation fails.
    """
    order = _get_order(cfg)
    primitive_element = _get_primitive_element(cfg)

    tables = build_prime_tables(order, primitive_element)
    return type(
        f"GF{order}",
        (PrimeElement,),
        {"__slots__": (), "SIZE": order, "TABLES": tables},
    )


# ----------------------------
# Internal
# ----------------------------

def _get_order(cfg: Any) -> int:
    order = getattr(cfg, "order", None)
    if order is None:
        raise AttributeError("cfg missing required int attribute: order")
    if not isinstance(order, int) or isinstance(order, bool):
        raise TypeError("cfg.order must be int")
    return order


def _get_primitive_element(cfg: Any) -> Optional[int]:
    if not hasattr(cfg, "primitive_element"):
        raise AttributeError("cfg missing required attribute: primitive_element")
    pe = cfg.primitive_element
    if pe is None:
        return None
    if not isinstance(pe, int) or isinstance(pe, bool):
        raise TypeError("cfg.primitive_element must be int or None")
    if pe < 0:
        raise ValueError("cfg.primitive_element must be >= 0")
    return pe
