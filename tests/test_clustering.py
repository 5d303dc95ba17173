"""Tests for incremental glyph box clustering."""

from __future__ import annotations

import random

import pymupdf
import pytest

from pymupdf_tablestripper.clustering import BoxCluster
from pymupdf_tablestripper.grid import GridBuilder


def as_tuples(cluster: BoxCluster):
    return sorted(tuple(box) for box in cluster.boxes)


def union_of(rects):
    return (
        min(r[0] for r in rects),
        min(r[1] for r in rects),
        max(r[2] for r in rects),
        max(r[3] for r in rects),
    )


def inside(inner, outer) -> bool:
    return (
        outer[0] <= inner[0]
        and outer[1] <= inner[1]
        and inner[2] <= outer[2]
        and inner[3] <= outer[3]
    )


@pytest.mark.smoke
def test_glyphs_within_padding_merge():
    cluster = BoxCluster(dx=1, dy=0)
    cluster.add_box((0, 0, 5, 10))
    merged = cluster.add_box((5.5, 0, 10, 10))

    assert len(cluster) == 1
    assert tuple(merged) == (0, 0, 10, 10)


def test_gap_wider_than_padding_keeps_boxes_apart():
    cluster = BoxCluster(dx=1, dy=0)
    cluster.add_boxes([(0, 0, 5, 10), (6.5, 0, 10, 10)])

    assert as_tuples(cluster) == [(0, 0, 5, 10), (6.5, 0, 10, 10)]


def test_rows_that_only_touch_stay_apart_without_vertical_padding():
    cluster = BoxCluster(dx=1, dy=0)
    cluster.add_boxes([(0, 0, 5, 10), (0, 10, 5, 20)])
    assert len(cluster) == 2

    padded = BoxCluster(dx=1, dy=0.5)
    padded.add_boxes([(0, 0, 5, 10), (0, 10, 5, 20)])
    assert as_tuples(padded) == [(0, 0, 5, 20)]


def test_new_box_bridging_two_boxes_merges_all():
    cluster = BoxCluster(dx=1, dy=0)
    cluster.add_boxes([(0, 0, 4, 10), (10, 0, 14, 10)])
    assert len(cluster) == 2

    cluster.add_box((4.5, 0, 9.5, 10))

    assert as_tuples(cluster) == [(0, 0, 14, 10)]


def test_accepts_pymupdf_rects_and_dicts():
    cluster = BoxCluster()
    cluster.add_box(pymupdf.Rect(0, 0, 5, 5))
    cluster.add_box({"bbox": (100, 0, 105, 5)})
    cluster.add_box({"x0": 200, "y0": 0, "x1": 205, "y1": 5})

    assert len(cluster) == 3
    assert all(isinstance(box, pymupdf.Rect) for box in cluster)


def test_rejects_non_rect_input():
    with pytest.raises(TypeError):
        BoxCluster().add_box("not a rect")  # type: ignore[arg-type]


def test_negative_padding_rejected():
    with pytest.raises(ValueError):
        BoxCluster(dx=-1)


def test_degenerate_boxes_are_stored_as_is():
    cluster = BoxCluster(dx=1, dy=0)
    cluster.add_box((5, 5, 5, 5))
    cluster.add_box((50, 5, 60, 5))

    assert as_tuples(cluster) == [(5, 5, 5, 5), (50, 5, 60, 5)]


def test_every_box_is_exact_union_of_inputs():
    rng = random.Random(1234)
    inputs = []
    for _ in range(200):
        x = rng.uniform(0, 300)
        y = rng.uniform(0, 300)
        inputs.append((x, y, x + rng.uniform(0, 8), y + rng.uniform(0, 12)))

    cluster = BoxCluster(dx=1, dy=0)
    cluster.add_boxes(inputs)

    for box in cluster.bounds():
        members = [r for r in inputs if inside(r, box)]
        assert members
        assert union_of(members) == box


# One insertion can grow a union over a box its hitbox never touched.
RESIDUAL_CASE = [
    (0, 0, 10, 2),
    (5, 5, 6, 6),
    (9, 1, 11, 10),
]


def test_single_pass_can_leave_overlapping_boxes():
    cluster = BoxCluster(dx=1, dy=0, until_stable=False)
    cluster.add_boxes(RESIDUAL_CASE)

    assert as_tuples(cluster) == [(0, 0, 11, 10), (5, 5, 6, 6)]


def test_until_stable_reaches_fixpoint():
    cluster = BoxCluster(dx=1, dy=0, until_stable=True)
    cluster.add_boxes(RESIDUAL_CASE)

    assert as_tuples(cluster) == [(0, 0, 11, 10)]


def test_grid_absorbs_residual_overlap():
    cluster = BoxCluster(dx=1, dy=0, until_stable=False)
    cluster.add_boxes(RESIDUAL_CASE)

    grid = GridBuilder().build(cluster)

    assert grid.column_intervals.bounds() == [(0, 11)]
    assert grid.row_intervals.bounds() == [(0, 10)]
    assert (grid.row_count, grid.column_count) == (1, 1)


def test_default_merge_reaches_fixpoint():
    cluster = BoxCluster(dx=1, dy=0)
    cluster.add_boxes(RESIDUAL_CASE)

    assert cluster.until_stable is True
    assert as_tuples(cluster) == [(0, 0, 11, 10)]
