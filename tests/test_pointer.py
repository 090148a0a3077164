"""
Unit tests for sketch_core/pointer.py driving a SketchCanvas.

Tests cover state transitions, client-to-local conversion, hover moves
and per-segment style reads.
"""

import pytest

from sketch_core import (
    BoundingRect,
    DrawingState,
    PointerEvent,
    PointerEventType,
    PointerInputStateMachine,
    StrokeStyle,
)

DOWN, MOVE, UP, LEAVE = PointerEventType.DOWN, PointerEventType.MOVE, PointerEventType.UP, PointerEventType.LEAVE


@pytest.fixture
def machine(sketch, black_pen):
    return PointerInputStateMachine(sketch, lambda: black_pen)


class TestTransitions:
    def test_starts_idle(self, machine):
        assert machine.state is DrawingState.IDLE

    def test_down_then_move_draws(self, sketch, machine):
        machine.handle(PointerEvent(DOWN, 10, 10))
        assert machine.state is DrawingState.DRAWING

        assert machine.handle(PointerEvent(MOVE, 50, 50)) is True
        for k in (10, 30, 50):
            assert sketch.visible.pixels[k, k].tolist() == [0, 0, 0]

    def test_move_while_idle_is_ignored(self, sketch, machine):
        before = sketch.visible.pixels.copy()
        renders = sketch.render_count

        assert machine.handle(PointerEvent(MOVE, 50, 50)) is False
        assert machine.state is DrawingState.IDLE
        assert (sketch.visible.pixels == before).all()
        assert sketch.render_count == renders

    @pytest.mark.parametrize("end", [UP, LEAVE])
    def test_up_or_leave_ends_session(self, sketch, machine, end):
        machine.handle(PointerEvent(DOWN, 10, 10))
        machine.handle(PointerEvent(end, 10, 10))
        assert machine.state is DrawingState.IDLE

        before = sketch.visible.pixels.copy()
        machine.handle(PointerEvent(MOVE, 200, 200))
        assert (sketch.visible.pixels == before).all()

    def test_up_while_idle_is_ignored(self, machine):
        machine.handle(PointerEvent(UP))
        assert machine.state is DrawingState.IDLE

    def test_second_down_restarts_path(self, sketch, machine):
        machine.handle(PointerEvent(DOWN, 10, 10))
        machine.handle(PointerEvent(DOWN, 300, 300))
        machine.handle(PointerEvent(MOVE, 300, 350))
        # No segment bridges the two down points
        assert sketch.visible.pixels[150, 150].tolist() == [255, 255, 255]
        assert sketch.visible.pixels[325, 300].tolist() == [0, 0, 0]

    def test_every_move_recomposites(self, sketch, machine):
        machine.handle(PointerEvent(DOWN, 10, 10))
        renders = sketch.render_count
        machine.handle(PointerEvent(MOVE, 20, 20))
        machine.handle(PointerEvent(MOVE, 30, 30))
        assert sketch.render_count == renders + 2


class TestCoordinates:
    def test_client_to_local(self, sketch, machine):
        rect = BoundingRect(left=100, top=40)
        machine.handle(PointerEvent(DOWN, 110, 50), rect)
        machine.handle(PointerEvent(MOVE, 150, 90), rect)
        assert sketch.visible.pixels[30, 30].tolist() == [0, 0, 0]
        assert sketch.visible.pixels[70, 130].tolist() == [255, 255, 255]

    def test_bounding_rect_to_local(self):
        assert BoundingRect(8, 16).to_local(10, 20) == (2, 4)


class TestStyleReads:
    def test_style_read_per_segment(self, sketch):
        styles = iter([StrokeStyle("#FF0000", 3), StrokeStyle("#0000FF", 3)])
        machine = PointerInputStateMachine(sketch, lambda: next(styles))

        machine.handle(PointerEvent(DOWN, 10, 10))
        machine.handle(PointerEvent(MOVE, 50, 10))
        machine.handle(PointerEvent(MOVE, 90, 10))

        assert sketch.visible.pixels[10, 30].tolist() == [255, 0, 0]
        assert sketch.visible.pixels[10, 70].tolist() == [0, 0, 255]

    def test_style_not_read_when_idle(self, sketch):
        calls = []
        machine = PointerInputStateMachine(sketch, lambda: calls.append(1))
        machine.handle(PointerEvent(MOVE, 10, 10))
        assert calls == []


class TestFeed:
    def test_feed_counts_segments(self, machine):
        events = [
            PointerEvent(MOVE, 1, 1),
            PointerEvent(DOWN, 10, 10),
            PointerEvent(MOVE, 20, 20),
            PointerEvent(MOVE, 30, 30),
            PointerEvent(UP, 30, 30),
            PointerEvent(MOVE, 40, 40),
        ]
        assert machine.feed(events) == 2
        assert machine.state is DrawingState.IDLE

    def test_repeat_sequence_is_deterministic(self, black_pen):
        from sketch_core import SketchCanvas

        outputs = []
        for _ in range(2):
            canvas = SketchCanvas()
            PointerInputStateMachine(canvas, lambda: black_pen).feed([
                PointerEvent(DOWN, 5, 5),
                PointerEvent(MOVE, 400, 60),
                PointerEvent(MOVE, 120, 480),
                PointerEvent(LEAVE, 120, 480),
            ])
            outputs.append(canvas.visible.pixels.tobytes())
        assert outputs[0] == outputs[1]
