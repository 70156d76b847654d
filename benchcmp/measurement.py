"""Parsing of single benchmark result lines.

Three line shapes are understood, tried in this order:

    test mod::name ... bench:       1,234 ns/iter (+/- 56)
    mod::name    1,234 ns/iter (512 MB/s)
    mod::name    1,234 ns/iter

The first is libtest's classic output; it may carry a variance group, a
parenthesised throughput group, or the old ``= 512 MB/s`` suffix. The other
two may be prefixed with ``test`` or ``bench``.
"""

import dataclasses
import re
from typing import Optional

# 1,234 or 1,234.56 (newer libtest prints fractional nanoseconds)
NUMBER = r'\d[\d,]*(?:\.\d+)?'

# A name is any non-whitespace run that isn't itself a number.
NAME = r'(?![\d,.]+\s)\S+'

LEGACY_RE = re.compile(
    rf'''
    ^test\s+(?P<name>\S+)
    \s+\.\.\.\s+bench:\s+(?P<value>{NUMBER})\s+ns/iter
    (?:\s+\(
        (?:\+/-\s+(?P<variance>{NUMBER})
          |(?P<paren_throughput>{NUMBER})\s+MB/s)
    \))?
    (?:\s+=\s+(?P<throughput>{NUMBER})\s+MB/s)?
    $''',
    re.VERBOSE,
)

ANNOTATED_RE = re.compile(
    rf'''
    ^(?:(?:test|bench)\s+)?(?P<name>{NAME})
    \s+(?P<value>{NUMBER})\s+ns/iter
    \s+\((?P<throughput>{NUMBER})\s+MB/s\)
    $''',
    re.VERBOSE,
)

PLAIN_RE = re.compile(
    rf'''
    ^(?:(?:test|bench)\s+)?(?P<name>{NAME})
    \s+(?P<value>{NUMBER})\s+ns/iter
    $''',
    re.VERBOSE,
)


@dataclasses.dataclass(frozen=True)
class Measurement:
    """One benchmark result. ``value`` is in nanoseconds per iteration."""

    name: str
    value: int
    throughput: Optional[int] = None
    variance: Optional[int] = None

    def renamed(self, name):
        return dataclasses.replace(self, name=name)


def parse_number(text):
    """Parse '1,234,567' (or '1,234.5') into an int, rounding fractions."""
    text = text.replace(',', '')
    if '.' in text:
        return round(float(text))
    return int(text)


def format_number(n):
    """Format an int with comma thousands separators, e.g. -1234 -> '-1,234'."""
    return f'{n:,}'


def _optional_number(text):
    if text is None:
        return None
    return parse_number(text)


def parse_legacy(line):
    match = LEGACY_RE.match(line)
    if not match:
        return None
    throughput = match.group('paren_throughput') or match.group('throughput')
    return Measurement(
        name=match.group('name'),
        value=parse_number(match.group('value')),
        throughput=_optional_number(throughput),
        variance=_optional_number(match.group('variance')),
    )


def parse_annotated(line):
    match = ANNOTATED_RE.match(line)
    if not match:
        return None
    return Measurement(
        name=match.group('name'),
        value=parse_number(match.group('value')),
        throughput=parse_number(match.group('throughput')),
    )


def parse_plain(line):
    match = PLAIN_RE.match(line)
    if not match:
        return None
    return Measurement(name=match.group('name'), value=parse_number(match.group('value')))


# Order matters: a line with 'bench:' is always legacy, and a throughput
# group must be claimed before the plain shape rejects the whole line.
RECOGNIZERS = (parse_legacy, parse_annotated, parse_plain)


def parse_line(line):
    """Return the Measurement on this line, or None if it isn't a result line."""
    line = line.strip()
    if not line:
        return None
    for recognize in RECOGNIZERS:
        measurement = recognize(line)
        if measurement is not None:
            return measurement
    return None
