"""Fill-rule evaluation for a single scan row.

Given the row's crossings as ``(x, contribution)`` pairs, a left-to-right
pass accumulates the contributions and reports where the rule's predicate
switches between outside and inside. Span boundaries map to columns with
``ceil``, so a crossing exactly on an integer column belongs to the pixel
on its right and columns ``[ceil(low), ceil(high))`` are filled.
"""

from collections.abc import Iterable
from operator import itemgetter

from scanfill.core.numeric import ceil_to_int
from scanfill.domain import FillRule


def _clamp(column: int, width: int) -> int:
    return min(max(column, 0), width)


def interior_spans(
    crossings: Iterable[tuple[float, int]],
    rule: FillRule,
    width: int,
) -> list[tuple[int, int]]:
    """Compute the interior column ranges of one row.

    Crossings sharing an x are applied together before the predicate is
    tested, so coincident crossings never produce a zero-width flicker.
    Only transitions matter: consecutive positions with the same status
    collapse. A span still open after the last crossing runs to ``width``.

    Args:
        crossings: ``(x, contribution)`` pairs in any order
        rule: Fill rule whose predicate decides insideness
        width: Canvas width; columns are clamped into ``[0, width]``

    Returns:
        Non-empty, non-overlapping ``(low, high)`` column ranges, left to right

    Examples:
        >>> interior_spans([(7.5, 1), (1.2, -1)], FillRule.NON_ZERO, 10)
        [(2, 8)]
        >>> interior_spans([(1, 1), (3, 1), (5, 1), (7, 1)], FillRule.EVEN_ODD, 10)
        [(1, 3), (5, 7)]
    """
    ordered = sorted(crossings, key=itemgetter(0))
    spans: list[tuple[int, int]] = []

    total = 0
    inside = False
    low = 0
    i = 0
    while i < len(ordered):
        x = ordered[i][0]
        while i < len(ordered) and ordered[i][0] == x:
            total += ordered[i][1]
            i += 1

        now_inside = rule.is_inside(total)
        if now_inside == inside:
            continue
        if now_inside:
            low = _clamp(ceil_to_int(x), width)
        else:
            high = _clamp(ceil_to_int(x), width)
            if high > low:
                spans.append((low, high))
        inside = now_inside

    if inside and width > low:
        spans.append((low, width))

    return spans
