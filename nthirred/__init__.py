"""nthirred is a Python package for computing the n-th irreducible binary polynomial.

Binary polynomials (polynomials over GF(2)) are represented as nonnegative integers,
and are ordered by their numeric value. The first irreducible polynomials in this
order are x, x+1, x^2+x+1, x^3+x+1, x^3+x^2+1, x^4+x+1, and so on.

The n-th irreducible polynomial is found without enumerating all its predecessors.
First, a dynamic programming algorithm counts the irreducibles of the target degree
per residue modulo x^k, which fixes the k leading bits of the result. Subsequently,
a sieve restricted to polynomials with these leading bits picks the right one.
Choosing k about a third of the degree balances the cost of both steps.

Modules: gf2x (polynomial primitives), counting (irreducibles per residue),
sieve (block sieve), and irreds (degree/remainder locator, function nth_irreducible).
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import sys
import argparse
import logging


class InputFormatError(ValueError):
    """Index is not a valid integer literal."""


class RangeExceeded(ValueError):
    """Index is beyond the irreducibles of degree below 64."""


class InternalInconsistency(RuntimeError):
    """Counting and sieving disagree, which indicates a defect."""


def get_arg_parser():
    """Return parser for command line arguments passed to nthirred."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('nthirred help')
    group.add_argument('-V', '--VERSION', action='store_true',
                       help='print nthirred version number and exit')

    group = parser.add_argument_group('nthirred parameters')
    group.add_argument('-K', '--prefix-length', type=int, metavar='k',
                       help='number k of leading bits determined by counting')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(log_level='info')
    return parser


options = get_arg_parser().parse_known_args()[0]
if options.VERSION:
    options.no_log = True

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
        level = logging.DEBUG
    logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
    logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
    del ch, level

del options
