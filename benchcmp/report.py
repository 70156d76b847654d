"""Extraction of all benchmark results from captured benchmark output."""

from .measurement import parse_line


def parse_report(text):
    """Parse a whole report into a dict of name -> Measurement.

    The dict keeps the order in which names first appear. Lines that aren't
    benchmark results are skipped, and when a name shows up more than once
    only its first result is kept.
    """
    report = {}
    for line in text.splitlines():
        measurement = parse_line(line)
        if measurement is not None:
            report.setdefault(measurement.name, measurement)
    return report
