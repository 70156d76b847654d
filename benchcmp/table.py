"""Formatting of comparisons into an aligned text table."""

from .measurement import format_number

LEFT = '<'
RIGHT = '>'

ALIGNS = (LEFT, LEFT, LEFT, RIGHT, RIGHT, RIGHT)

GAP = '  '

NOT_AVAILABLE = 'n/a'


def header(old_label, new_label):
    return ['name', f'{old_label} ns/iter', f'{new_label} ns/iter', 'diff ns/iter', 'diff %', 'speedup']


def format_timing(measurement, variance=False):
    """Format a timing cell like '1,234 (+/- 5) (512 MB/s)'."""
    cell = format_number(measurement.value)
    if variance and measurement.variance is not None:
        cell += f' (+/- {format_number(measurement.variance)})'
    if measurement.throughput is not None:
        cell += f' ({format_number(measurement.throughput)} MB/s)'
    return cell


def format_percent(percent):
    if percent is None:
        return NOT_AVAILABLE
    if round(percent, 2) == 0:
        return '0.00%'
    return f'{percent:+.2f}%'


def format_speedup(speedup):
    if speedup is None:
        return NOT_AVAILABLE
    return f'x {speedup:.2f}'


def comparison_cells(comparison, variance=False):
    return [
        comparison.name,
        format_timing(comparison.old, variance),
        format_timing(comparison.new, variance),
        format_number(comparison.diff_value),
        format_percent(comparison.diff_percent),
        format_speedup(comparison.speedup),
    ]


def missing_cells(old=None, new=None, variance=False):
    """Cells for a benchmark present on only one side."""
    present = old if old is not None else new
    return [
        present.name,
        format_timing(old, variance) if old is not None else NOT_AVAILABLE,
        format_timing(new, variance) if new is not None else NOT_AVAILABLE,
        NOT_AVAILABLE,
        NOT_AVAILABLE,
        NOT_AVAILABLE,
    ]


def render_table(rows, aligns=ALIGNS):
    """Pad every cell to its column's widest cell and join with GAP."""
    if not rows:
        return []
    widths = [max(len(row[i]) for row in rows) for i in range(len(aligns))]
    lines = []
    for row in rows:
        cells = [f'{cell:{align}{width}}' for cell, align, width in zip(row, aligns, widths)]
        lines.append(GAP.join(cells).rstrip())
    return lines
