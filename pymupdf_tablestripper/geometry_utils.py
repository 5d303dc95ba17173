"""Geometry utilities for glyph boxes, hitboxes and axis intervals."""

from typing import Any, Dict, Iterable, List, Tuple, Union

# the below ignores are due to `numba` constraints
# pyright: reportUnknownMemberType=false
# pyright: reportUntypedFunctionDecorator=false
import numba  # type: ignore
import pymupdf  # type: ignore

RectTuple = Tuple[float, float, float, float]
RectLike = Union["pymupdf.Rect", Dict[str, Any], Tuple[float, ...], List[float]]


# Numba-optimized geometric operations
@numba.jit(nopython=True, cache=True)
def rect_intersects_numba(
    x0_1: float,
    y0_1: float,
    x1_1: float,
    y1_1: float,
    x0_2: float,
    y0_2: float,
    x1_2: float,
    y1_2: float,
) -> bool:  # type: ignore
    """Check if two rectangles intersect (open interiors, touching is not enough)."""
    return not (x1_1 <= x0_2 or x1_2 <= x0_1 or y1_1 <= y0_2 or y1_2 <= y0_1)


@numba.jit(nopython=True, cache=True)
def rect_contains_point_numba(
    x0: float, y0: float, x1: float, y1: float, px: float, py: float
) -> bool:  # type: ignore
    """Half-open containment: left and top edges are inside, right and bottom are not."""
    return x0 <= px and y0 <= py and px < x1 and py < y1


@numba.jit(nopython=True, cache=True)
def intervals_overlap_numba(lo: float, hi: float, start: float, end: float) -> bool:  # type: ignore
    """Check if ``[start, end]`` touches ``[lo, hi]``; shared endpoints count."""
    return start <= hi and end >= lo


@numba.jit(nopython=True, cache=True)
def rect_union_numba(
    x0_1: float,
    y0_1: float,
    x1_1: float,
    y1_1: float,
    x0_2: float,
    y0_2: float,
    x1_2: float,
    y1_2: float,
) -> Tuple[float, float, float, float]:  # type: ignore
    """Calculate union of two rectangles and return as separate values."""
    x0 = min(x0_1, x0_2)
    y0 = min(y0_1, y0_2)
    x1 = max(x1_1, x1_2)
    y1 = max(y1_1, y1_2)
    return x0, y0, x1, y1


def rect_to_tuple(rect: RectLike) -> RectTuple:
    """Convert any rect-like value to a tuple of four floats.

    Accepts ``pymupdf.Rect`` objects, dictionaries with a ``bbox`` key or
    ``x0``/``y0``/``x1``/``y1`` keys, and tuples/lists of 4 numbers.

    Raises:
        TypeError: If ``rect`` cannot be interpreted as a rectangle.
    """
    if isinstance(rect, pymupdf.Rect):
        return (float(rect.x0), float(rect.y0), float(rect.x1), float(rect.y1))
    if isinstance(rect, dict):
        if "bbox" in rect:
            return rect_to_tuple(tuple(rect["bbox"]))
        if all(k in rect for k in ("x0", "y0", "x1", "y1")):
            return (
                float(rect["x0"]),
                float(rect["y0"]),
                float(rect["x1"]),
                float(rect["y1"]),
            )
    elif isinstance(rect, (tuple, list)) and len(rect) == 4:  # type: ignore
        x0, y0, x1, y1 = rect
        return (float(x0), float(y0), float(x1), float(y1))
    raise TypeError(f"Cannot convert {rect!r} to a rectangle")


def tuple_to_pymupdf_rect(rect_tuple: RectTuple) -> "pymupdf.Rect":
    """Convert tuple back to PyMuPDF Rect."""
    return pymupdf.Rect(*rect_tuple)  # type: ignore[attr-defined]


def ensure_rect(rect: RectLike) -> "pymupdf.Rect":
    """Return ``rect`` as a ``pymupdf.Rect``."""
    return tuple_to_pymupdf_rect(rect_to_tuple(rect))


def ensure_rects(rects: Iterable[RectLike]) -> List["pymupdf.Rect"]:
    """Convert a sequence of rect-like values into ``pymupdf.Rect`` objects."""
    return [ensure_rect(r) for r in rects]


def pad_rect(rect: RectTuple, dx: float, dy: float) -> RectTuple:
    """Grow ``rect`` by ``dx`` on the left/right and ``dy`` on the top/bottom."""
    x0, y0, x1, y1 = rect
    return (x0 - dx, y0 - dy, x1 + dx, y1 + dy)


def rects_intersect(a: RectTuple, b: RectTuple) -> bool:
    """Tuple front-end for :func:`rect_intersects_numba`."""
    return bool(rect_intersects_numba(*a, *b))


def union_rects(a: RectTuple, b: RectTuple) -> RectTuple:
    """Tuple front-end for :func:`rect_union_numba`."""
    x0, y0, x1, y1 = rect_union_numba(*a, *b)
    return (float(x0), float(y0), float(x1), float(y1))


def contains_point(rect: RectTuple, x: float, y: float) -> bool:
    """Tuple front-end for :func:`rect_contains_point_numba`."""
    return bool(rect_contains_point_numba(*rect, float(x), float(y)))
