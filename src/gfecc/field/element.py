from __future__ import annotations

from abc import ABC, abstractmethod
from numbers import Integral
from typing import Any, Iterator, Optional

from gfecc.field.tables import LogExpTables


class FieldElement(ABC):
    """
    One member of a finite field. Shared contract of the prime and binary
    variants.

    This class and the variant classes cannot be instantiated directly.
    Concrete field types are subclasses created by a field module's build()
    with SIZE and TABLES filled in; get them through gfecc.field.registry.

    Values are reduced into [0, SIZE) on construction and never change.
    Arithmetic returns new elements.
    """
    SIZE: int = 0
    TABLES: Optional[LogExpTables] = None

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        if self.TABLES is None:
            raise TypeError(f"{type(self).__name__} has no field parameters; build a field type first")
        if isinstance(value, FieldElement):
            value = self._coerce(value)._value
        elif not isinstance(value, Integral) or isinstance(value, bool):
            raise TypeError(f"field value must be int, got {type(value).__name__}")
        self._value = int(value) % self.SIZE

    @classmethod
    def zero(cls) -> FieldElement:
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        return cls(1)

    @classmethod
    def elements(cls) -> Iterator[FieldElement]:
        for v in range(cls.SIZE):
            yield cls(v)

    @property
    def value(self) -> int:
        return self._value

    def to_int(self) -> int:
        return self._value

    # ----------------------------
    # Variant-specific arithmetic
    # ----------------------------

    @abstractmethod
    def add(self, other: Any) -> FieldElement:
        ...

    @abstractmethod
    def sub(self, other: Any) -> FieldElement:
        ...

    @abstractmethod
    def mul(self, other: Any) -> FieldElement:
        ...

    @abstractmethod
    def neg(self) -> FieldElement:
        ...

    # ----------------------------
    # Table-driven arithmetic (both variants)
    # ----------------------------

    def div(self, other: Any) -> FieldElement:
        o = self._coerce(other)
        if o._value == 0:
            raise ZeroDivisionError("GF division by zero")
        if self._value == 0:
            return type(self)(0)
        return self.exp(self.SIZE - 1 + self.log() - o.log())

    def pow(self, power: int) -> FieldElement:
        """
        self^power. Zero to any power (including 0) is zero.
        Negative powers give inverses since exp() reduces modulo SIZE-1.
        """
        if self._value == 0:
            return type(self)(0)
        return self.exp(self.log() * power)

    def inverse(self) -> FieldElement:
        if self._value == 0:
            raise ZeroDivisionError("GF inverse of zero")
        return self.exp(self.SIZE - 1 - self.log())

    def log(self) -> int:
        """Discrete log base the field's primitive element."""
        if self._value == 0:
            raise ValueError("log of the zero element is undefined")
        return int(self.TABLES.log[self._value])

    @classmethod
    def exp(cls, power: int) -> FieldElement:
        """Primitive element raised to `power` (reduced modulo SIZE-1)."""
        return cls(int(cls.TABLES.exp[power % (cls.SIZE - 1)]))

    @classmethod
    def primitive_element(cls) -> FieldElement:
        return cls(cls.TABLES.generator)

    # ----------------------------
    # Python operators
    # ----------------------------

    def __add__(self, other: Any) -> FieldElement:
        return self.add(other)

    def __radd__(self, other: Any) -> FieldElement:
        return self._coerce(other).add(self)

    def __sub__(self, other: Any) -> FieldElement:
        return self.sub(other)

    def __rsub__(self, other: Any) -> FieldElement:
        return self._coerce(other).sub(self)

    def __mul__(self, other: Any) -> FieldElement:
        return self.mul(other)

    def __rmul__(self, other: Any) -> FieldElement:
        return self._coerce(other).mul(self)

    def __truediv__(self, other: Any) -> FieldElement:
        return self.div(other)

    def __rtruediv__(self, other: Any) -> FieldElement:
        return self._coerce(other).div(self)

    def __neg__(self) -> FieldElement:
        return self.neg()

    def __pow__(self, power: int) -> FieldElement:
        return self.pow(power)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return type(other) is type(self) and other._value == self._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.SIZE, self._value))

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    # ----------------------------
    # Internal
    # ----------------------------

    def _coerce(self, other: Any) -> FieldElement:
        if isinstance(other, FieldElement):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot combine {type(self).__name__} and {type(other).__name__} elements"
                )
            return other
        if isinstance(other, Integral) and not isinstance(other, bool):
            return type(self)(other)
        raise TypeError(f"unsupported operand type for {type(self).__name__}: {type(other).__name__}")
