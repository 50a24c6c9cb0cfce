from __future__ import annotations

from typing import Any, Iterable, List, Tuple, Type

from gfecc.field.element import FieldElement


class Polynomial:
    """
    Dense polynomial over one field type.

    Storage is ascending: self[i] is the coefficient of x^i. Constructors that
    take a sequence expect it highest exponent first, the way polynomials are
    written (and the way RS messages are laid out).

    Equality ignores high-order zero padding: [1,2,3,4] == [0,1,2,3,4].
    """

    def __init__(self, field: Type[FieldElement], num_coef: int = 1):
        if not isinstance(num_coef, int) or num_coef < 1:
            raise ValueError("num_coef must be an int >= 1")
        self.field = field
        self._coefs: List[FieldElement] = [field(0) for _ in range(num_coef)]

    @classmethod
    def from_coefficients(cls, field: Type[FieldElement], coefficients: Iterable[Any]) -> Polynomial:
        """
        Build from coefficients listed highest exponent first. Items may be
        ints (reduced into the field) or elements of `field`.
        """
        items = [field(c) for c in coefficients]
        if not items:
            raise ValueError("coefficients must not be empty")
        out = cls(field, len(items))
        out._coefs = items[::-1]
        return out

    def copy(self) -> Polynomial:
        out = Polynomial(self.field, len(self._coefs))
        out._coefs = list(self._coefs)
        return out

    # ----------------------------
    # Coefficient access
    # ----------------------------

    def __len__(self) -> int:
        return len(self._coefs)

    @property
    def num_coef(self) -> int:
        return len(self._coefs)

    def __getitem__(self, n: int) -> FieldElement:
        return self._coefs[n]

    def __setitem__(self, n: int, value: Any) -> None:
        self._coefs[n] = self.field(value)

    def coefficients(self) -> List[int]:
        """Integer coefficients, highest exponent first."""
        return [c.to_int() for c in reversed(self._coefs)]

    def degree(self) -> int:
        """Index of the highest nonzero coefficient (0 for the zero polynomial)."""
        for i in range(len(self._coefs) - 1, -1, -1):
            if self._coefs[i]:
                return i
        return 0

    # ----------------------------
    # Ring operations
    # ----------------------------

    def eval(self, x: Any) -> FieldElement:
        """
        Direct evaluation: sum of coef[i] * x^i, each power computed on its own.
        """
        x = self.field(x)
        output = self._coefs[0]
        for i in range(1, len(self._coefs)):
            output = output + self._coefs[i] * x.pow(i)
        return output

    def multiply(self, other: Polynomial) -> Polynomial:
        self._check_same_field(other)
        output = Polynomial(self.field, len(self) + len(other) - 1)
        for i, a in enumerate(self._coefs):
            for j, b in enumerate(other._coefs):
                output._coefs[i + j] = output._coefs[i + j] + a * b
        return output

    def multiply_scalar(self, value: Any) -> Polynomial:
        c = self.field(value)
        output = Polynomial(self.field, len(self))
        output._coefs = [a * c for a in self._coefs]
        return output

    def shift_left(self, n: int) -> Polynomial:
        """Multiply by x^n."""
        if n < 0:
            raise ValueError("shift must be >= 0")
        output = Polynomial(self.field, len(self) + n)
        output._coefs[n:] = self._coefs
        return output

    def add(self, other: Polynomial) -> Polynomial:
        return self._combine(other, lambda a, b: a + b)

    def subtract(self, other: Polynomial) -> Polynomial:
        return self._combine(other, lambda a, b: a - b)

    def remainder(self, other: Polynomial) -> Polynomial:
        _, rem = self.quotient_and_remainder(other)
        return rem

    def quotient_and_remainder(self, other: Polynomial) -> Tuple[Polynomial, Polynomial]:
        """
        Long division, highest-degree term first, on a working copy of self.

        The remainder keeps at least len(divisor)-1 slots (all may be zero);
        the quotient is trimmed of leading zeros.
        """
        self._check_same_field(other)

        dividend = self.copy()
        divisor = other.copy()
        divisor.trim_leading_zeros()

        divisor_coefs = len(divisor)
        dividend_coefs = len(dividend)
        lead = divisor[divisor_coefs - 1]
        if not lead:
            raise ZeroDivisionError("polynomial division by zero")

        quotient = Polynomial(self.field, max(dividend_coefs - divisor_coefs + 1, 1))

        if divisor_coefs <= dividend_coefs:
            max_shift = dividend_coefs - divisor_coefs

            for shift in range(max_shift + 1):
                factor = dividend[dividend_coefs - 1 - shift]
                if not factor:
                    continue
                factor = factor / lead
                offset = max_shift - shift
                quotient._coefs[offset] = factor

                for i in range(divisor_coefs):
                    dividend._coefs[i + offset] = dividend._coefs[i + offset] - divisor._coefs[i] * factor

        dividend.trim_leading_zeros(divisor_coefs - 1)
        quotient.trim_leading_zeros()
        return quotient, dividend

    def trim_leading_zeros(self, min_coef: int = 1) -> None:
        """
        Drop high-order zero coefficients in place, keeping at least
        max(min_coef, 1) of them.
        """
        if min_coef < 1:
            min_coef = 1

        max_nonzero = 0
        for i, c in enumerate(self._coefs):
            if c:
                max_nonzero = i

        resize_to = max(max_nonzero + 1, min_coef)
        if resize_to <= len(self._coefs):
            del self._coefs[resize_to:]
        else:
            self._coefs.extend(self.field(0) for _ in range(resize_to - len(self._coefs)))

    # ----------------------------
    # Python operators
    # ----------------------------

    def __mul__(self, other: Any) -> Polynomial:
        if isinstance(other, Polynomial):
            return self.multiply(other)
        return self.multiply_scalar(other)

    def __rmul__(self, other: Any) -> Polynomial:
        return self.multiply_scalar(other)

    def __lshift__(self, n: int) -> Polynomial:
        return self.shift_left(n)

    def __add__(self, other: Polynomial) -> Polynomial:
        return self.add(other)

    def __sub__(self, other: Polynomial) -> Polynomial:
        return self.subtract(other)

    def __mod__(self, other: Polynomial) -> Polynomial:
        return self.remainder(other)

    def __divmod__(self, other: Polynomial) -> Tuple[Polynomial, Polynomial]:
        return self.quotient_and_remainder(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        if other.field is not self.field:
            return False

        longer, shorter = self._coefs, other._coefs
        if len(longer) < len(shorter):
            longer, shorter = shorter, longer

        for i in range(len(shorter)):
            if longer[i] != shorter[i]:
                return False
        return not any(longer[len(shorter):])

    __hash__ = None

    def __repr__(self) -> str:
        return f"Polynomial({self.field.__name__}, {self.coefficients()})"

    def __str__(self) -> str:
        # 3x^2+2x+1, highest exponent first, zero terms included
        parts = []
        for exponent in range(len(self._coefs) - 1, -1, -1):
            term = str(self._coefs[exponent])
            if exponent >= 1:
                term += "x"
                if exponent >= 2:
                    term += f"^{exponent}"
            parts.append(term)
        return "+".join(parts)

    # ----------------------------
    # Internal
    # ----------------------------

    def _combine(self, other: Polynomial, op) -> Polynomial:
        self._check_same_field(other)
        zero = self.field(0)
        n = max(len(self), len(other))
        output = Polynomial(self.field, n)
        for i in range(n):
            a = self._coefs[i] if i < len(self._coefs) else zero
            b = other._coefs[i] if i < len(other._coefs) else zero
            output._coefs[i] = op(a, b)
        return output

    def _check_same_field(self, other: Any) -> None:
        if not isinstance(other, Polynomial):
            raise TypeError(f"expected Polynomial, got {type(other).__name__}")
        if other.field is not self.field:
            raise TypeError(
                f"cannot combine polynomials over {self.field.__name__} and {other.field.__name__}"
            )
