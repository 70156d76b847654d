"""Column labels for the two sides of a comparison."""

from pathlib import PurePath


def column_labels(old, new):
    """Return the labels to print for the old and new columns.

    Empty arguments fall back to 'old' and 'new'. When both arguments are
    paths with more than one component, the labels are the shortest path
    suffixes that tell them apart: 'a/x/out.txt' and 'b/x/out.txt' become
    'a/x/out.txt' and 'b/x/out.txt', 'x/a.txt' and 'x/b.txt' become 'a.txt'
    and 'b.txt'.
    """
    old = old or 'old'
    new = new or 'new'
    old_parts = PurePath(old).parts
    new_parts = PurePath(new).parts
    if len(old_parts) <= 1 or len(new_parts) <= 1:
        return old, new

    old_suffix, new_suffix = [], []
    for o, n in zip(reversed(old_parts), reversed(new_parts)):
        old_suffix.append(o)
        new_suffix.append(n)
        if o != n:
            break
    return str(PurePath(*reversed(old_suffix))), str(PurePath(*reversed(new_suffix)))
