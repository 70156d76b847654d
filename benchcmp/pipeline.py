"""End-to-end comparison: reports in, table lines and warnings out."""

import dataclasses
from typing import List, Optional, Tuple

from . import table
from .comparison import compare_all
from .errors import EmptyReportError
from .filtering import FilterConfig, Verdict, apply_filters, classify
from .pairing import pair, split_files, split_prefixes


@dataclasses.dataclass(frozen=True)
class Options:
    labels: Tuple[str, str] = ('old', 'new')
    filters: FilterConfig = dataclasses.field(default_factory=FilterConfig)
    variance: bool = False
    include_missing: bool = False


@dataclasses.dataclass(frozen=True)
class Rendered:
    # lines[0] is the header; verdicts[i] belongs to lines[i].
    lines: List[str]
    verdicts: List[Optional[Verdict]]
    warnings: List[str]


def _check_not_empty(old, new, sources):
    if not old:
        raise EmptyReportError('old', sources[0])
    if not new:
        raise EmptyReportError('new', sources[1])


def _missing_warning(side, other, measurements):
    names = ', '.join(m.name for m in measurements)
    return f'WARNING: benchmarks in {side} but not in {other}: {names}'


def render(pairing, options):
    """Turn a Pairing into table lines, honouring options."""
    comparisons = apply_filters(compare_all(pairing.pairs), options.filters)
    rows = [table.header(*options.labels)]
    verdicts = [None]
    for c in comparisons:
        rows.append(table.comparison_cells(c, options.variance))
        verdicts.append(classify(c))

    warnings = []
    if options.include_missing:
        for m in pairing.missing_old:
            rows.append(table.missing_cells(old=m, variance=options.variance))
            verdicts.append(None)
        for m in pairing.missing_new:
            rows.append(table.missing_cells(new=m, variance=options.variance))
            verdicts.append(None)

    # Without any common benchmark there is no table at all, only the
    # missing-name warnings below.
    if not pairing.pairs:
        lines, verdicts = [], []
    elif len(rows) == 1:
        warnings.append('WARNING: nothing to output')
        lines, verdicts = [], []
    else:
        lines = table.render_table(rows)

    if not options.include_missing:
        if pairing.missing_old:
            warnings.append(_missing_warning('old', 'new', pairing.missing_old))
        if pairing.missing_new:
            warnings.append(_missing_warning('new', 'old', pairing.missing_new))
    return Rendered(lines=lines, verdicts=verdicts, warnings=warnings)


def compare_files(old_text, new_text, options=Options(), sources=('old', 'new')):
    """Compare two separate benchmark outputs.

    ``sources`` names the inputs in error messages.
    """
    options.filters.validate()
    old, new = split_files(old_text, new_text)
    _check_not_empty(old, new, sources)
    return render(pair(old, new), options)


def compare_prefixes(text, old_prefix, new_prefix, options=Options(), source='input'):
    """Compare two families of benchmarks found in one output."""
    options.filters.validate()
    old, new = split_prefixes(text, old_prefix, new_prefix)
    _check_not_empty(old, new, (f'{source}, prefix {old_prefix!r}', f'{source}, prefix {new_prefix!r}'))
    return render(pair(old, new), options)
