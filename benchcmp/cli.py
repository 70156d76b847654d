"""Command line front end: compare Rust micro-benchmark results."""

import argparse
import sys

from . import __version__
from .errors import BenchcmpError, ReadError
from .filtering import FilterConfig, Verdict
from .labels import column_labels
from .pipeline import Options, compare_files, compare_prefixes

DESCRIPTION = """\
Compares Rust micro-benchmark results.

With two arguments, <old> and <new> are benchmark output files and their
common benchmarks are compared.

With three arguments, <old> and <new> are benchmark name prefixes and <file>
is one benchmark output file ('-' for stdin). Benchmarks are compared by
their names with the prefixes stripped; benchmarks matching neither prefix
are ignored.
"""

BOLD = '\033[1m'
GREEN = '\033[32m'
RED = '\033[31m'
RESET = '\033[0m'

COLORS = {
    Verdict.IMPROVEMENT: GREEN,
    Verdict.REGRESSION: RED,
}


def non_negative_float(text):
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid number: {text!r}')
    if value < 0:
        raise argparse.ArgumentTypeError(f'must be non-negative: {text!r}')
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog='benchcmp',
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('old', help='Old benchmark output file, or prefix of the old benchmarks')
    parser.add_argument('new', help='New benchmark output file, or prefix of the new benchmarks')
    parser.add_argument('file', nargs='?', help='Benchmark output file holding both prefixes')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        '--include-missing',
        action='store_true',
        help='Show all benchmarks even if they were not in both inputs. '
        'A warning lists the missing ones otherwise.',
    )
    parser.add_argument(
        '--threshold',
        type=non_negative_float,
        metavar='N',
        help='Show only comparisons with a percentage change of at least N',
    )
    parser.add_argument('--variance', action='store_true', help='Show the variance of each benchmark')
    parser.add_argument('--improvements', action='store_true', help='Show only improvements')
    parser.add_argument('--regressions', action='store_true', help='Show only regressions')
    parser.add_argument(
        '--color',
        choices=['auto', 'always', 'never'],
        default='auto',
        help='Color improvements and regressions (default: auto)',
    )
    return parser


def read_input(path, stdin=None):
    """Read a whole input file as UTF-8; '-' reads stdin."""
    if path == '-':
        return (stdin or sys.stdin).read()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as err:
        raise ReadError(path, err) from err


def use_color(when, stream):
    if when == 'always':
        return True
    if when == 'never':
        return False
    return stream.isatty()


def colorize(line, verdict, header=False):
    if header:
        return f'{BOLD}{line}{RESET}'
    color = COLORS.get(verdict)
    if color is None:
        return line
    return f'{color}{line}{RESET}'


def run(args, stdout=None, stderr=None, stdin=None):
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    filters = FilterConfig(
        improvements_only=args.improvements,
        regressions_only=args.regressions,
        threshold_percent=args.threshold,
    )
    # Conflicting flags are reported before any input is read.
    filters.validate()
    options = Options(
        labels=column_labels(args.old, args.new),
        filters=filters,
        variance=args.variance,
        include_missing=args.include_missing,
    )

    if args.file is not None:
        source = 'stdin' if args.file == '-' else args.file
        rendered = compare_prefixes(read_input(args.file, stdin), args.old, args.new, options, source=source)
    else:
        rendered = compare_files(
            read_input(args.old), read_input(args.new), options, sources=(args.old, args.new)
        )

    color = use_color(args.color, stdout)
    for i, (line, verdict) in enumerate(zip(rendered.lines, rendered.verdicts)):
        print(colorize(line, verdict, header=i == 0) if color else line, file=stdout)
    for warning in rendered.warnings:
        print(warning, file=stderr)


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except BenchcmpError as e:
        print(f'error: {e}', file=sys.stderr)
        return 1
    return 0
