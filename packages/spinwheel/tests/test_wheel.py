"""Tests for SegmentWheel layout, resolution and drawing."""
from __future__ import annotations

import math
import random

import pytest
from spinwheel import TAU, Entry, SegmentWheel
from spinwheel.wheel import POINTER_ANGLE


def _entries(*weights: float) -> list[Entry]:
    return [Entry(name=f"e{i}", weight=w) for i, w in enumerate(weights)]


class TestRebuild:
    def test_empty_wheel(self) -> None:
        wheel = SegmentWheel()
        assert wheel.has_segments is False
        wheel.rebuild([])
        assert wheel.has_segments is False
        assert wheel.segments == ()

    def test_segments_partition_circle(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 2, 3, 0.5))
        segs = wheel.segments
        assert segs[0].start == 0.0
        assert segs[-1].end == TAU
        for a, b in zip(segs, segs[1:]):
            assert a.end == b.start
        assert sum(s.span for s in segs) == pytest.approx(TAU)

    def test_spans_proportional_to_weight(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 3))
        spans = [s.span for s in wheel.segments]
        assert spans[0] == pytest.approx(TAU / 4)
        assert spans[1] == pytest.approx(3 * TAU / 4)

    def test_random_weights_partition(self) -> None:
        rng = random.Random(3)
        for _ in range(50):
            weights = [rng.uniform(0.1, 10) for _ in range(rng.randint(1, 30))]
            wheel = SegmentWheel()
            wheel.rebuild(_entries(*weights))
            segs = wheel.segments
            assert len(segs) == len(weights)
            assert sum(s.span for s in segs) == pytest.approx(TAU)
            assert all(s.span > 0 for s in segs)
            assert [s.index for s in segs] == list(range(len(weights)))

    def test_order_preserved(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild([Entry("c"), Entry("a"), Entry("b")])
        assert [s.entry.name for s in wheel.segments] == ["c", "a", "b"]

    def test_weights_clamped(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild([Entry("low", 0.0), Entry("high", 50.0)])
        assert [s.entry.weight for s in wheel.segments] == [0.1, 10.0]

    def test_blank_names_skipped(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild([Entry("  "), Entry(" a "), Entry("")])
        assert [s.entry.name for s in wheel.segments] == ["a"]

    def test_source_list_untouched(self) -> None:
        entries = [Entry("a", 20.0)]
        wheel = SegmentWheel()
        wheel.rebuild(entries)
        assert entries == [Entry("a", 20.0)]

    def test_rebuild_resets_rotation(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 1))
        wheel.rotation = 4.2
        wheel.rebuild(_entries(1, 1, 1))
        assert wheel.rotation == 0.0
        assert len(wheel.segments) == 3

    def test_rebuild_ignored_when_locked(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 1))
        wheel.rotation = 1.0
        wheel.lock()
        wheel.rebuild(_entries(1, 1, 1))
        assert len(wheel.segments) == 2
        assert wheel.rotation == 1.0
        wheel.unlock()
        wheel.rebuild(_entries(1, 1, 1))
        assert len(wheel.segments) == 3


class TestResolveAngle:
    def test_empty_returns_none(self) -> None:
        assert SegmentWheel().resolve_angle(1.0) is None

    def test_boundary_belongs_to_starting_segment(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 1, 1, 1))
        for seg in wheel.segments:
            assert wheel.resolve_angle(seg.start).index == seg.index

    def test_zero_and_full_turn(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 1, 1, 1))
        assert wheel.resolve_angle(0.0).index == 0
        assert wheel.resolve_angle(TAU).index == 0
        assert wheel.resolve_angle(TAU - 1e-9).index == 3

    def test_negative_and_large_angles(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 1, 1, 1))
        assert wheel.resolve_angle(-0.1).index == 3
        assert wheel.resolve_angle(5 * TAU + math.pi / 4).index == 0
        assert wheel.resolve_angle(-1e-20).index == 0

    def test_total_function(self) -> None:
        """Every sampled angle resolves to exactly one containing segment."""
        wheel = SegmentWheel()
        wheel.rebuild(_entries(0.3, 2, 7, 1, 0.1))
        for i in range(1000):
            theta = -20 + i * 0.0437
            seg = wheel.resolve_angle(theta)
            a = theta % TAU
            if a >= TAU:
                a = 0.0
            assert seg.contains(a)
            hits = [s for s in wheel.segments if s.contains(a)]
            assert hits == [seg]

    def test_current_entry_follows_rotation(self) -> None:
        wheel = SegmentWheel()
        assert wheel.current_entry is None
        wheel.rebuild(_entries(1, 1))
        assert wheel.current_entry.name == "e0"
        wheel.rotation = math.pi + 0.1
        assert wheel.current_entry.name == "e1"


class TestResizeAndDraw:
    def test_resize_updates_layout(self) -> None:
        wheel = SegmentWheel(width=200, height=100)
        layout = wheel.resize(width=300, height=300, pixel_ratio=2.0)
        assert layout.center_x == 300.0
        assert layout.center_y == 300.0
        assert layout.radius == pytest.approx(300 * 0.96)
        assert wheel.layout is layout

    def test_resize_keeps_omitted_values(self) -> None:
        wheel = SegmentWheel(width=200, height=100, pixel_ratio=1.5)
        layout = wheel.resize(width=400)
        assert (layout.width, layout.height, layout.pixel_ratio) == (400, 100, 1.5)

    def test_resize_leaves_segments_and_rotation(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 2))
        wheel.rotation = 2.0
        before = wheel.segments
        wheel.resize(width=800, height=600)
        assert wheel.segments == before
        assert wheel.rotation == 2.0

    def test_draw_empty(self) -> None:
        assert SegmentWheel().draw() == []

    def test_draw_is_pure(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 2, 3))
        wheel.rotation = 1.3
        first = wheel.draw()
        second = wheel.draw()
        assert first == second
        assert wheel.rotation == 1.3

    def test_draw_places_current_entry_under_pointer(self) -> None:
        wheel = SegmentWheel()
        wheel.rebuild(_entries(1, 2, 3))
        wheel.rotation = 2.5
        current = wheel.resolve_angle(wheel.rotation)
        arc = next(a for a in wheel.draw() if a.index == current.index)
        assert arc.start <= POINTER_ANGLE < arc.end

    def test_draw_label_inside_radius(self) -> None:
        wheel = SegmentWheel(width=400, height=400)
        wheel.rebuild(_entries(1, 1))
        for arc in wheel.draw():
            dx = arc.label_pos[0] - arc.center[0]
            dy = arc.label_pos[1] - arc.center[1]
            assert math.hypot(dx, dy) < arc.radius
