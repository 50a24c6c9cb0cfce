from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Any, List, Optional, Sequence, Type

from gfecc.errors import SuppliedElementNotPrimitive
from gfecc.field.element import FieldElement
from gfecc.field.registry import Config as FieldConfig, field_type
from gfecc.field.tables import is_primitive_element
from gfecc.poly.polynomial import Polynomial


# ----------------------------
# Core construction
# ----------------------------

def generator_polynomial(
    field: Type[FieldElement],
    parity_count: int,
    primitive_element: Any = 2,
    *,
    first_root: int = 0,
) -> Polynomial:
    """
    g(x) = prod_{i=first_root}^{first_root+parity_count-1} (x - alpha^i)

    Each factor is stored ascending as [-alpha^i, 1]. Result has
    parity_count + 1 coefficients, leading coefficient 1.

    alpha must generate the whole multiplicative group, otherwise the roots
    repeat; SuppliedElementNotPrimitive is raised for anything else.
    """
    if parity_count < 0:
        raise ValueError("parity_count must be >= 0")

    alpha = _check_primitive(field, primitive_element)
    generator = Polynomial(field, 1)
    generator[0] = 1

    for i in range(first_root, first_root + parity_count):
        root = Polynomial(field, 2)
        root[0] = -alpha.pow(i)
        root[1] = 1
        generator = generator * root

    return generator


def encode_systematic(
    message: Polynomial,
    parity_count: int,
    primitive_element: Any = 2,
    *,
    first_root: int = 0,
) -> Polynomial:
    """
    Systematic RS codeword: c(x) = m(x)*x^k - (m(x)*x^k mod g(x)).

    The top len(message) coefficients of the result are the message symbols;
    the low k hold parity. c(alpha^i) == 0 for every generator root.
    """
    if parity_count <= 0:
        raise ValueError("parity_count must be > 0")

    generator = generator_polynomial(
        message.field, parity_count, primitive_element, first_root=first_root
    )
    shifted = message << parity_count
    return shifted - shifted % generator


# ----------------------------
# Integer/byte surface
# ----------------------------

@dataclass(frozen=True)
class Config:
    """
    Systematic Reed-Solomon encoder.

    field: field selector (default GF(256) with 0x11D).
    nsym: parity symbols per codeword.
    primitive_element: alpha for the generator roots; None -> the field's
        table generator.
    first_root: roots are alpha^first_root .. alpha^(first_root+nsym-1).
    pad: symbol used to fill the final partial block in encode_bytes().
    """
    field: FieldConfig = dc_field(default_factory=FieldConfig)
    nsym: int = 10
    primitive_element: Optional[int] = None
    first_root: int = 0
    pad: int = 0x00


def encode(symbols: Sequence[int], *, cfg: Any) -> List[int]:
    """
    Encode one message (integer symbols, first symbol = highest exponent).
    Returns the codeword symbols in the same order: message then parity.
    """
    gf = _get_field(cfg)
    nsym = _get_nsym(cfg, gf)

    if len(symbols) == 0:
        raise ValueError("message must not be empty")
    if len(symbols) + nsym > gf.SIZE - 1:
        raise ValueError(f"len(message) + nsym must be <= {gf.SIZE - 1}")

    message = Polynomial.from_coefficients(gf, symbols)
    codeword = encode_systematic(
        message, nsym, _get_primitive_element(cfg, gf), first_root=_get_first_root(cfg)
    )
    return codeword.coefficients()


def encode_bytes(data: bytes, *, cfg: Any) -> bytes:
    """
    Encode arbitrary-length data over a GF(256) field into concatenated
    codewords of 255 bytes: (255 - nsym) data + nsym parity.
    The last block is padded with cfg.pad.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("encode_bytes: data must be bytes-like")

    gf = _get_field(cfg)
    if gf.SIZE != 256:
        raise ValueError(f"encode_bytes requires a field of order 256, got {gf.SIZE}")
    nsym = _get_nsym(cfg, gf)
    pad = _get_pad(cfg)
    k = 255 - nsym

    b = bytes(data)
    if len(b) == 0:
        return b

    out = bytearray()
    for i in range(0, len(b), k):
        block = b[i:i + k]
        if len(block) < k:
            block = block + bytes([pad]) * (k - len(block))
        out += bytes(encode(list(block), cfg=cfg))
    return bytes(out)


# ----------------------------
# Internal
# ----------------------------

def _check_primitive(field: Type[FieldElement], primitive_element: Any) -> FieldElement:
    alpha = field(primitive_element)
    if not is_primitive_element(field.SIZE, alpha.to_int(), polynomial=field.TABLES.polynomial):
        raise SuppliedElementNotPrimitive(
            f"{alpha.to_int()} is not a primitive element for {field.SIZE}"
        )
    return alpha


def _get_field(cfg: Any) -> Type[FieldElement]:
    field_cfg = getattr(cfg, "field", None)
    if field_cfg is None:
        raise AttributeError("cfg missing required attribute: field")
    if not isinstance(field_cfg, FieldConfig):
        raise TypeError("cfg.field must be a gfecc.field.registry.Config")
    return field_type(field_cfg)


def _get_nsym(cfg: Any, gf: Type[FieldElement]) -> int:
    nsym = getattr(cfg, "nsym", None)
    if nsym is None:
        raise AttributeError("cfg missing required int attribute: nsym")
    if not isinstance(nsym, int):
        raise TypeError("cfg.nsym must be int")
    if not (1 <= nsym <= gf.SIZE - 2):
        raise ValueError(f"cfg.nsym must be in [1,{gf.SIZE - 2}]")
    return nsym


def _get_primitive_element(cfg: Any, gf: Type[FieldElement]) -> int:
    pe = getattr(cfg, "primitive_element", None)
    if pe is None:
        return gf.TABLES.generator
    if not isinstance(pe, int) or isinstance(pe, bool):
        raise TypeError("cfg.primitive_element must be int or None")
    return _check_primitive(gf, pe).to_int()


def _get_first_root(cfg: Any) -> int:
    first_root = getattr(cfg, "first_root", 0)
    if not isinstance(first_root, int):
        raise TypeError("cfg.first_root must be int")
    if first_root < 0:
        raise ValueError("cfg.first_root must be >= 0")
    return first_root


def _get_pad(cfg: Any) -> int:
    pad = getattr(cfg, "pad", None)
    if pad is None:
        raise AttributeError("cfg missing required int attribute: pad")
    if not isinstance(pad, int):
        raise TypeError("cfg.pad must be int")
    if not (0 <= pad <= 255):
        raise ValueError("cfg.pad must be in [0,255]")
    return pad
