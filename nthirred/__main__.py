"""Compute the n-th irreducible binary polynomial from the command line.

To compute the irreducible polynomial with index n (x has index 0), run:

    python -m nthirred n

where n is a base 10 integer literal, possibly with underscores, like 1_000_000.
The polynomial is printed as a sum of powers of x and as an integer, followed
by the computation time. The time spent on counting and sieving, respectively,
is shown for log level debug:

    python -m nthirred 1_000_000 --log-level debug

Option -K sets the number of leading bits determined by counting, otherwise
about a third of the degree.
"""

import time
import argparse
import nthirred
from nthirred import InputFormatError
from nthirred import gf2x
from nthirred.irreds import nth_irreducible


def parse_index(s):
    """Return integer value of base 10 literal s, ignoring underscores."""
    try:
        return int(s.replace('_', ''), 10)
    except ValueError as exc:
        raise InputFormatError(f'invalid numeric literal {s!r}') from exc


def main(args=None):
    parser = argparse.ArgumentParser(prog='python -m nthirred',
                                     parents=[nthirred.get_arg_parser()],
                                     description='Compute the n-th irreducible binary polynomial.')
    parser.add_argument('n', nargs='?', help='index n of the irreducible, x having index 0')
    args = parser.parse_args(args)

    if args.VERSION:
        print(f'nthirred {nthirred.__version__}')
        return

    if args.n is None:
        parser.print_usage()
        return

    start = time.process_time()
    try:
        n = parse_index(args.n)
        f = nth_irreducible(n, args.prefix_length)
    except ValueError as exc:  # NB: includes InputFormatError and RangeExceeded
        parser.error(str(exc))
    comp_time = time.process_time() - start

    print(f'nth-irreducible (string): {gf2x.to_terms(f)}.')
    print(f'nth-irreducible (numeric): {f}')
    print(f'Computation time: {comp_time} seconds')


if __name__ == '__main__':
    main()
