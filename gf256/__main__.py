"""Print tables of GF(2^8) as CSV.

To print the two GF(2^8) tables found on pages 191-193 of "W. H. Bussey,
Tables of Galois fields of order less than 1,000. Bulletin of the American
Mathematical Society, 16(4):188-206, 1910", run:

    python -m gf256

Each row lists an exponent λ with the bit pattern of the generator raised
to the power λ, followed by the same kind of pair taken from the table sorted
by bit pattern. Use options -p and -g to select another irreducible polynomial
and generator, e.g., python -m gf256 -p 0x11b -g 0x03 for the AES field.
"""

import argparse
import csv
import logging
import sys
from gf256 import get_arg_parser
from gf256.field import Field, GROUP_ORDER

HEADER = ('λ', 'αβγδεζηθ', 'λ', 'αβγδεζηθ')


def tables(field):
    """Return rows (λ, bit pattern, λ, bit pattern) of both tables for given field."""
    by_exponent = [(i, str(field.exp(i))) for i in range(1, GROUP_ORDER + 1)]
    by_pattern = sorted(by_exponent, key=lambda e: (len(e[1]), e[1]))  # stable sort
    return [e + f for e, f in zip(by_exponent, by_pattern)]


def main(argv=None):
    parser = argparse.ArgumentParser(prog='python -m gf256', parents=[get_arg_parser()],
                                     description='Print tables of GF(2^8) as CSV.')
    parser.add_argument('-p', '--polynomial', type=lambda s: int(s, 0), metavar='P',
                        help='irreducible polynomial P of degree 8 (default 0x11d)')
    parser.add_argument('-g', '--generator', type=lambda s: int(s, 0), metavar='G',
                        help='generator G of the field (default 0x02)')
    parser.set_defaults(polynomial=0x11d, generator=0x02)
    args = parser.parse_args(argv)

    try:
        field = Field(args.polynomial, args.generator)
    except ValueError as exc:
        parser.error(str(exc))

    logging.debug(f'Print tables for {field!r}')
    writer = csv.writer(sys.stdout, lineterminator='\n')
    writer.writerow(HEADER)
    writer.writerows(tables(field))


if __name__ == '__main__':
    main()
