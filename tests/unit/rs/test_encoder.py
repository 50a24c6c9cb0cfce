import random

import pytest

from gfecc.errors import SuppliedElementNotPrimitive
from gfecc.field.modules.prime import Config as PrimeConfig
from gfecc.field.registry import Config as FieldConfig
from gfecc.poly.polynomial import Polynomial
from gfecc.rs.encoder import Config, encode, encode_bytes, encode_systematic, generator_polynomial

MESSAGE = [8, 6, 7, 5, 3, 0, 9]

# 16-byte QR "hello world" message and its 10 parity bytes (0x11D, roots 2^0..2^9)
QR_MESSAGE = [0x40, 0xD2, 0x75, 0x47, 0x76, 0x17, 0x32, 0x06, 0x27, 0x26, 0x96, 0xC6, 0xC6, 0x96, 0x70, 0xEC]
QR_PARITY = [0xBC, 0x2A, 0x90, 0x13, 0x6B, 0xAF, 0xEF, 0xFD, 0x4B, 0xE0]


def _gf11_cfg(**kw) -> Config:
    field = FieldConfig(module="prime", module_cfg=PrimeConfig(order=11, primitive_element=2))
    return Config(field=field, **kw)


def test_generator_polynomial_gf11(gf11):
    g = generator_polynomial(gf11, 2, 2)
    assert g.coefficients() == [1, 8, 2]  # (x - 1)(x - 2)

    g = generator_polynomial(gf11, 2, 2, first_root=1)
    assert g.coefficients() == [1, 5, 8]  # (x - 2)(x - 4)


def test_generator_polynomial_roots(gf256):
    g = generator_polynomial(gf256, 10, 2)
    assert len(g) == 11
    assert g[10] == gf256(1)
    for i in range(10):
        assert g.eval(gf256(2).pow(i)) == gf256(0)


def test_generator_polynomial_zero_parity_is_one(gf11):
    assert generator_polynomial(gf11, 0).coefficients() == [1]


def test_systematic_encoding_gf11(gf11):
    message = Polynomial.from_coefficients(gf11, MESSAGE)
    codeword = encode_systematic(message, 2, gf11(2))

    assert codeword.coefficients() == [8, 6, 7, 5, 3, 0, 9, 6, 0]
    assert codeword.eval(gf11(2).pow(0)) == gf11(0)
    assert codeword.eval(gf11(2).pow(1)) == gf11(0)
    assert codeword.coefficients()[:7] == MESSAGE


def test_systematic_encoding_gf11_first_root_1(gf11):
    message = Polynomial.from_coefficients(gf11, MESSAGE)
    codeword = encode_systematic(message, 2, 2, first_root=1)

    assert codeword.coefficients() == [8, 6, 7, 5, 3, 0, 9, 4, 4]
    assert codeword.eval(2) == gf11(0)
    assert codeword.eval(gf11(2).pow(2)) == gf11(0)


def test_systematic_encoding_gf929(gf929):
    message = Polynomial.from_coefficients(gf929, [5, 453, 178, 121, 239])
    codeword = encode_systematic(message, 4, 3, first_root=1)

    assert len(codeword) == 9
    assert codeword.coefficients()[:5] == [5, 453, 178, 121, 239]
    for i in range(1, 5):
        assert codeword.eval(gf929(3).pow(i)) == gf929(0)


def test_systematic_encoding_gf256_known_vector(gf256):
    message = Polynomial.from_coefficients(gf256, QR_MESSAGE)
    codeword = encode_systematic(message, 10, 2)
    assert codeword.coefficients() == QR_MESSAGE + QR_PARITY


def test_systematic_encoding_gf256_roots(gf256):
    data = [0x10, 0x20, 0x0C, 0x56, 0x61, 0x80, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11, 0xEC, 0x11]
    codeword = encode_systematic(Polynomial.from_coefficients(gf256, data), 10)

    assert codeword.coefficients()[:16] == data
    for i in range(10):
        assert codeword.eval(gf256(2).pow(i)) == gf256(0)


def test_codeword_is_divisible_by_generator(gf256):
    rng = random.Random(2025)
    for nsym in (1, 4, 16):
        message = Polynomial.from_coefficients(gf256, [rng.randrange(256) for _ in range(30)])
        codeword = encode_systematic(message, nsym)
        assert codeword % generator_polynomial(gf256, nsym) == Polynomial(gf256)


def test_encode_systematic_rejects_zero_parity(gf11):
    with pytest.raises(ValueError):
        encode_systematic(Polynomial.from_coefficients(gf11, MESSAGE), 0)


@pytest.mark.parametrize("alpha", [0, 1, 3, 11, 12])
def test_non_primitive_alpha_is_rejected(gf11, alpha):
    message = Polynomial.from_coefficients(gf11, MESSAGE)
    with pytest.raises(SuppliedElementNotPrimitive):
        encode_systematic(message, 2, alpha)
    with pytest.raises(SuppliedElementNotPrimitive):
        generator_polynomial(gf11, 2, gf11(alpha))
    with pytest.raises(SuppliedElementNotPrimitive):
        encode(MESSAGE, cfg=_gf11_cfg(nsym=2, primitive_element=alpha))


def test_non_primitive_alpha_is_rejected_gf256(gf256):
    # 2^3 has order 85; 2^7 generates (gcd(7, 255) == 1)
    with pytest.raises(SuppliedElementNotPrimitive):
        generator_polynomial(gf256, 4, gf256(2).pow(3))
    assert len(generator_polynomial(gf256, 4, gf256(2).pow(7))) == 5


def test_encode_with_cfg_defaults_to_gf256():
    assert encode(QR_MESSAGE, cfg=Config(nsym=10)) == QR_MESSAGE + QR_PARITY


def test_encode_with_cfg_gf11():
    assert encode(MESSAGE, cfg=_gf11_cfg(nsym=2)) == [8, 6, 7, 5, 3, 0, 9, 6, 0]
    assert encode(MESSAGE, cfg=_gf11_cfg(nsym=2, first_root=1)) == [8, 6, 7, 5, 3, 0, 9, 4, 4]


def test_encode_keeps_leading_zero_symbols():
    out = encode([0, 0, 5], cfg=Config(nsym=4))
    assert len(out) == 7
    assert out[:3] == [0, 0, 5]


def test_encode_rejects_bad_cfg():
    with pytest.raises(ValueError):
        encode(MESSAGE, cfg=_gf11_cfg(nsym=0))
    with pytest.raises(TypeError):
        encode(MESSAGE, cfg=_gf11_cfg(nsym="2"))
    with pytest.raises(ValueError):
        encode(MESSAGE, cfg=_gf11_cfg(nsym=2, first_root=-1))
    with pytest.raises(AttributeError):
        encode(MESSAGE, cfg=object())


def test_encode_rejects_too_long_message():
    # GF(11): at most 10 symbols per codeword
    with pytest.raises(ValueError):
        encode(MESSAGE + [1, 2], cfg=_gf11_cfg(nsym=2))
    with pytest.raises(ValueError):
        encode([], cfg=_gf11_cfg(nsym=2))


def test_encode_bytes_roundtrip_shape():
    cfg = Config(nsym=32, pad=0xAA)
    k = 255 - cfg.nsym
    payload = b"hello" * 100

    enc = encode_bytes(payload, cfg=cfg)
    assert len(enc) % 255 == 0
    assert len(enc) == 255 * -(-len(payload) // k)

    data = b"".join(enc[i:i + k] for i in range(0, len(enc), 255))
    assert data[:len(payload)] == payload
    assert set(data[len(payload):]) == {0xAA}


def test_encode_bytes_blocks_are_codewords(gf256):
    cfg = Config(nsym=8)
    enc = encode_bytes(bytes(range(256)) * 2, cfg=cfg)
    for i in range(0, len(enc), 255):
        cw = Polynomial.from_coefficients(gf256, enc[i:i + 255])
        for j in range(8):
            assert cw.eval(gf256(2).pow(j)) == gf256(0)


def test_encode_bytes_empty_and_type_checks():
    assert encode_bytes(b"", cfg=Config()) == b""
    with pytest.raises(TypeError):
        encode_bytes("text", cfg=Config())
    with pytest.raises(ValueError):
        encode_bytes(b"abc", cfg=_gf11_cfg(nsym=2))
    with pytest.raises(ValueError):
        encode_bytes(b"abc", cfg=Config(pad=300))
