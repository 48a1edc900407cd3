"""
Rounder CLI

Usage:
    rounder [flags] VALUE [ERROR ...]
    rounder [flags] -            one measurement per line of standard input

Errors written with an explicit sign ("+0.3 -0.2") are asymmetric upper/lower
pairs, unsigned ones are symmetric.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import sys
import warnings
from typing import IO, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import RounderError
from .measurement import format_measurement
from .options import FormatOptions, OutputMode, RoundAlgorithm

# Precision targets of -e, -c and -w, the last one given wins
TOTAL_ERROR = "total"
LARGER_ERROR = "larger"


# Classes --------------------------------------------------------------------------------------------------------------

class _CombinedAction(argparse.Action):
    """-c: two significant digits with the precision of the total error."""

    def __init__(self, option_strings, dest, **kwargs):
        super().__init__(option_strings, dest, nargs=0, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        namespace.algorithm = RoundAlgorithm.TWO_DIGIT
        namespace.precision = TOTAL_ERROR


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Argument parser mapping single-letter flags onto FormatOptions."""
    parser = argparse.ArgumentParser(
        prog="rounder",
        description="Round and format a measurement and its uncertainties in publication style.",
    )
    parser.add_argument("numbers", nargs="*", metavar="NUMBER",
                        help="central value followed by its errors, or '-' to read from standard input")
    parser.add_argument("-c", action=_CombinedAction, dest="precision",
                        help="two significant digits, rounded to the total error")
    parser.add_argument("-e", action="store_const", dest="precision", const=TOTAL_ERROR,
                        help="round to the total error (quadrature sum, errors assumed uncorrelated)")
    parser.add_argument("-w", action="store_const", dest="precision", const=LARGER_ERROR,
                        help="round to the larger error (default)")
    parser.add_argument("-p", action="store_const", dest="algorithm", const=RoundAlgorithm.PDG,
                        help="PDG rounding (default)")
    parser.add_argument("-t", action="store_const", dest="algorithm", const=RoundAlgorithm.TWO_DIGIT,
                        help="round to two significant digits")
    parser.add_argument("-s", action="store_true", dest="symmetrize",
                        help="symmetrize errors differing by less than 10%%")
    parser.add_argument("-D", action="store_true", dest="cdot",
                        help="multiply with a dot instead of a cross")
    parser.add_argument("-F", action="store_true", dest="factorize",
                        help="factorize powers of ten")
    parser.add_argument("-G", action="store_const", dest="mode", const=OutputMode.GNUPLOT,
                        help="gnuplot output")
    parser.add_argument("-T", action="store_const", dest="mode", const=OutputMode.TYPST,
                        help="typst output")
    parser.add_argument("-X", action="store_const", dest="mode", const=OutputMode.LATEX,
                        help="LaTeX output")
    parser.add_argument("-U", action="store_true", dest="ascii_only",
                        help="no UTF-8 characters")
    parser.add_argument("-L", dest="labels", type=parse_list, default=(), metavar="LABELS",
                        help="comma-separated labels, one per symmetric error or asymmetric pair")
    parser.add_argument("-N", action="store_false", dest="trailing_newline",
                        help="no trailing newline")
    parser.set_defaults(algorithm=RoundAlgorithm.PDG, mode=OutputMode.TERMINAL, precision=LARGER_ERROR)
    return parser


def parse_list(text: str) -> tuple[str, ...]:
    """
    Split a comma-separated list, dropping blank items.

    Examples:
        >>> parse_list(" stat, syst ,,lumi")
        ('stat', 'syst', 'lumi')
    """
    return tuple(item.strip() for item in text.split(",") if item.strip())


def options_from_args(args: argparse.Namespace) -> FormatOptions:
    """FormatOptions of parsed command line arguments."""
    return FormatOptions(
        mode=args.mode,
        algorithm=args.algorithm,
        symmetrize_errors=args.symmetrize,
        round_to_total_error=args.precision == TOTAL_ERROR,
        round_to_larger_error=args.precision == LARGER_ERROR,
        factorize_powers=args.factorize,
        ascii_only=args.ascii_only,
        cdot=args.cdot,
        trailing_newline=args.trailing_newline,
        labels=args.labels,
    )


def main(argv: Sequence[str] | None = None, *, stdin: IO[str] | None = None,
         stdout: IO[str] | None = None, stderr: IO[str] | None = None) -> int:
    """
    Run the command line tool.

    Returns:
        Exit status: 0 on success, 1 if a number can not be parsed or rounded.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    options = options_from_args(args)

    if args.numbers == ["-"]:
        measurements = [line.split() for line in stdin if line.strip()]
    elif args.numbers:
        measurements = [args.numbers]
    else:
        parser.error("a central value is required")

    status = 0
    for numbers in measurements:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            try:
                text = format_measurement(numbers[0], numbers[1:], options)
            except RounderError as e:
                print(f"# error: {e}", file=stderr)
                status = 1
                continue
            finally:
                for w in caught:
                    print(f"# warning: {w.message}", file=stderr)
        stdout.write(text)
    return status
