from __future__ import annotations

from typing import Optional, Sequence, TextIO
import argparse
import logging
import sys

from gfecc.errors import FieldConfigurationError
from gfecc.field.tables import (
    LogExpTables,
    analyze_prime_order,
    build_binary_tables,
    build_prime_tables,
    find_primitive_element,
)

log = logging.getLogger(__name__)


def dump_table(name: str, table: Sequence[int], out: TextIO) -> None:
    """
    Write `table` as an array initializer, 8 values per line:

        EXP_TABLE[] = {
            1, 2, 4, 8, ...
        };
    """
    out.write(f"{name}[] = {{\n\t")
    for i, v in enumerate(table):
        out.write(f"{int(v)}, ")
        if i % 8 == 7:
            out.write("\n\t")
    out.write("\n};\n\n")


def dump_tables(tables: LogExpTables, out: TextIO) -> None:
    dump_table("EXP_TABLE", tables.exp, out)
    dump_table("LOG_TABLE", tables.log, out)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gfecc-tables",
        description="Generate log/exp tables for a Galois field.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="kind", required=True)

    b = sub.add_parser("binary", help="GF(2^m) from a primitive polynomial bit field")
    b.add_argument("polynomial", help="bit field, MSB first (e.g. 100011101)")

    pr = sub.add_parser("prime", help="GF(p) for a prime p")
    pr.add_argument("prime", type=int)
    pr.add_argument("primitive_element", type=int, nargs="?", default=None)

    return p


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.kind == "binary":
            tables = build_binary_tables(args.polynomial)
            out.write(f"GF({tables.order}) with prime polynomial {args.polynomial}\n\n")
        else:
            tables = _prime_tables(args.prime, args.primitive_element, out)
    except FieldConfigurationError as e:
        log.debug("table generation failed", exc_info=True)
        err.write(f"{e}\n")
        return 1

    dump_tables(tables, out)
    return 0


# ----------------------------
# Internal
# ----------------------------

def _prime_tables(prime: int, primitive_element: Optional[int], out: TextIO) -> LogExpTables:
    if primitive_element is None:
        analyze_prime_order(prime)
        primitive_element = find_primitive_element(prime)
        out.write(f"Using {primitive_element} as primitive element\n\n")
    return build_prime_tables(prime, primitive_element)


if __name__ == "__main__":
    raise SystemExit(main())
