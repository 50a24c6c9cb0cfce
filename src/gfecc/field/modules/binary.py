from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Type

from gfecc.field.element import FieldElement
from gfecc.field.tables import analyze_defining_polynomial, build_binary_tables


@dataclass(frozen=True)
class Config:
    """
    Binary extension field GF(2^m), XOR arithmetic.

    polynomial: primitive defining polynomial as a bit string, MSB first.
        Default "100011101" is x^8 + x^4 + x^3 + x^2 + 1 (0x11D), GF(256).
    The primitive element is always 2 (the polynomial "x").
    """
    polynomial: str = "100011101"


class BinaryElement(FieldElement):
    """
    Element of GF(2^m). Addition and subtraction are both XOR, every element is
    its own negative, and multiplication goes through the log/exp tables.
    """
    __slots__ = ()

    def add(self, other: Any) -> BinaryElement:
        o = self._coerce(other)
        return type(self)(self._value ^ o._value)

    def sub(self, other: Any) -> BinaryElement:
        o = self._coerce(other)
        return type(self)(self._value ^ o._value)

    def mul(self, other: Any) -> BinaryElement:
        o = self._coerce(other)
        if self._value == 0 or o._value == 0:
            return type(self)(0)
        return self.exp(self.log() + o.log())

    def neg(self) -> BinaryElement:
        return type(self)(self._value)

    def __str__(self) -> str:
        return format(self._value, "X")


def resolve(*, cfg: Any) -> Config:
    polynomial = _get_polynomial(cfg)
    analyze_defining_polynomial(polynomial)
    return Config(polynomial=polynomial)


def build(*, cfg: Any) -> Type[BinaryElement]:
    polynomial = _get_polynomial(cfg)

    tables = build_binary_tables(polynomial)
    return type(
        f"GF{tables.order}",
        (BinaryElement,),
        {"__slots__": (), "SIZE": tables.order, "TABLES": tables},
    )


# ----------------------------
# Internal
# ----------------------------

def _get_polynomial(cfg: Any) -> str:
    polynomial = getattr(cfg, "polynomial", None)
    if polynomial is None:
        raise AttributeError("cfg missing required str attribute: polynomial")
    if not isinstance(polynomial, str):
        raise TypeError("cfg.polynomial must be a bit string")
    return polynomial
