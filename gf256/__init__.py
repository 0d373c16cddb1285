"""gf256 is a Python package for arithmetic over the finite field GF(2^8).

The field GF(2^8) is constructed as the ring of polynomials over GF(2)
modulo an irreducible polynomial of degree 8. A generator of the multiplicative
group of the field is used to build exponent and logarithm tables, such that
multiplication, division and inversion of field elements reduce to table lookups.

Polynomials with coefficients in GF(2^8) are supported as well, including
evaluation, addition, multiplication and long division with remainder, as
needed for Reed-Solomon codes and other byte-oriented algebraic codecs.

Modules: gf2x (polynomials over GF(2) as integers), field (the field GF(2^8)),
polynomial (polynomials over GF(2^8)), errors (exceptions raised by gf256).
Run python -m gf256 to print the tables of GF(2^8) as CSV.
"""

__version__ = '0.1.0'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments used to configure gf256."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('gf256 configuration')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level='info')
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            # Switch to debug mode, just like asyncio does in development mode.
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level
    del options
