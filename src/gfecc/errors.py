from __future__ import annotations


class FieldConfigurationError(ValueError):
    """
    Base for failures detected while validating field parameters or building
    log/exp tables. Subclasses ValueError so callers can keep catching that.
    """


class InvalidDefiningPolynomial(FieldConfigurationError):
    """Bit string is too short, does not start with '1', or has non 0/1 chars."""


class InputTooSmall(FieldConfigurationError):
    """Prime-field order below 2."""


class NotPrime(FieldConfigurationError):
    """Prime-field order is composite."""


class PrimitiveElementNotFound(FieldConfigurationError):
    """No candidate in [2, order) generates the multiplicative group."""


class SuppliedElementNotPrimitive(FieldConfigurationError):
    """Caller-specified primitive element fails the primitivity test."""
