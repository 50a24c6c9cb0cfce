from gfecc.field.registry import prime_field
from gfecc.poly.polynomial import Polynomial


if __name__ == "__main__":
    gf11 = prime_field(11, 2)
    message = Polynomial.from_coefficients(gf11, [8, 6, 7, 5, 3, 0, 9])
    print(f"Message polynomial: {message}")

    root1 = Polynomial.from_coefficients(gf11, [1, -gf11(2)])
    root2 = Polynomial.from_coefficients(gf11, [1, -gf11(2).pow(2)])
    print(f"Root polynomial 1: {root1}")
    print(f"Root polynomial 2: {root2}")

    generator = root1 * root2
    print(f"Generator polynomial: {generator}")

    # long division by hand, one leading term at a time
    work = message << 2
    print(f"Work: {work}")
    while len(work) >= len(generator):
        factor = work[len(work) - 1]
        print(f"Factor: {factor}")
        subtract = (generator << (len(work) - len(generator))) * factor
        print(f"Subtract: {subtract}")
        work = work - subtract
        work.trim_leading_zeros()
        print(f"Work: {work}")

    result = (message << (len(generator) - 1)) - work
    print(f"Result: {result}")
    print(f"At 2: {result.eval(gf11(2))}")
    print(f"At 2^2: {result.eval(gf11(2).pow(2))}")
