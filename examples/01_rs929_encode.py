from gfecc.field.registry import prime_field
from gfecc.poly.polynomial import Polynomial
from gfecc.rs.encoder import encode_systematic, generator_polynomial


if __name__ == "__main__":
    gf929 = prime_field(929, 3)
    message = Polynomial.from_coefficients(gf929, [5, 453, 178, 121, 239])
    print(f"Message polynomial: {message}")

    generator = generator_polynomial(gf929, 4, 3, first_root=1)
    print(f"Generator polynomial: {generator}")
    print(f"Remainder: {(message << 4) % generator}")

    result = encode_systematic(message, 4, 3, first_root=1)
    print(f"Result: {result}")
    for i in range(1, 5):
        print(f"At 3^{i}: {result.eval(gf929(3).pow(i))}")
