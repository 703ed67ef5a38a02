"""Small layout helpers for splitting terminal areas."""

from __future__ import annotations

from .events import Rect


def split_percentages(start: int, length: int, percents) -> list[tuple[int, int]]:
    """Split a span into consecutive (start, size) segments.

    Each segment takes its percentage of the length, rounded down; the last
    segment stretches to fill what is left.
    """
    percents = list(percents)
    for percent in percents:
        if not 0 <= percent <= 100:
            raise ValueError(f"percentage out of range: {percent}")
    end = start + length
    segments = []
    pos = start
    for index, percent in enumerate(percents):
        remaining = end - pos
        size = remaining if index == len(percents) - 1 else length * percent // 100
        size = max(0, min(size, remaining))
        segments.append((pos, size))
        pos += size
    return segments


def split_ratio(area: Rect, count: int) -> list[Rect]:
    """Split an area horizontally into ``count`` equal columns."""
    if count < 1:
        raise ValueError("count must be at least 1")
    bounds = [area.x + area.width * i // count for i in range(count + 1)]
    return [
        Rect(left, area.y, right - left, area.height)
        for left, right in zip(bounds, bounds[1:])
    ]


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Return a rectangle of the given size percentages centred in ``area``."""
    margin_y = (100 - percent_y) // 2
    margin_x = (100 - percent_x) // 2
    y, height = split_percentages(area.y, area.height, (margin_y, percent_y, margin_y))[1]
    x, width = split_percentages(area.x, area.width, (margin_x, percent_x, margin_x))[1]
    return Rect(x, y, width, height)