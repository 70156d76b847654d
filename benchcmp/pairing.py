"""Matching of old and new benchmark results.

Both ways of invoking the tool end up as two reports (dicts of name ->
Measurement): ``split_files`` parses two separate outputs, ``split_prefixes``
carves one output into two sides by name prefix. ``pair`` then matches the
two reports the same way in either case.
"""

import dataclasses
from typing import List, Tuple

from .measurement import Measurement
from .report import parse_report


@dataclasses.dataclass(frozen=True)
class Pairing:
    pairs: List[Tuple[Measurement, Measurement]]
    missing_old: List[Measurement]
    missing_new: List[Measurement]


def split_files(old_text, new_text):
    return parse_report(old_text), parse_report(new_text)


def split_prefixes(text, old_prefix, new_prefix):
    """Split one report into (old, new) by benchmark name prefix.

    Names starting with ``old_prefix`` go to the old side, otherwise names
    starting with ``new_prefix`` go to the new side, each with the prefix
    removed. Everything else is ignored, including a name that is exactly
    one of the prefixes.
    """
    old, new = {}, {}
    for name, measurement in parse_report(text).items():
        if name.startswith(old_prefix):
            side, base = old, name[len(old_prefix):]
        elif name.startswith(new_prefix):
            side, base = new, name[len(new_prefix):]
        else:
            continue
        if base:
            side.setdefault(base, measurement.renamed(base))
    return old, new


def pair(old, new):
    """Match two reports by name, in the old report's order."""
    pairs = [(measurement, new[name]) for name, measurement in old.items() if name in new]
    missing_old = [measurement for name, measurement in old.items() if name not in new]
    missing_new = [measurement for name, measurement in new.items() if name not in old]
    return Pairing(pairs=pairs, missing_old=missing_old, missing_new=missing_new)
