"""Tests for turtle state, geometry primitives and the interpreter."""

import math

import pytest
from pydantic import ValidationError

from lsystem3d.core.errors import StackUnderflowError
from lsystem3d.core.turtle import TurtleInterpreter, TurtleState
from lsystem3d.models import (
    Bounds, GenerationResult, Point3D, Quaternion, ResultStats, Y_AXIS,
)


def _end(result, index=-1):
    return pytest.approx(result.segments[index].end.as_tuple(), abs=1e-9)


class TestGeometry:
    def test_identity_keeps_vectors(self):
        v = Point3D(x=1, y=2, z=3)
        assert Quaternion.identity().rotate(v).as_tuple() == pytest.approx((1, 2, 3))

    def test_yaw_turns_forward_to_x(self):
        q = Quaternion.from_axis_angle(Y_AXIS, 90)
        assert q.rotate(Point3D.forward()).as_tuple() == pytest.approx((1, 0, 0), abs=1e-9)

    def test_composition_is_local(self):
        a = Quaternion.from_axis_angle(Y_AXIS, 30)
        b = Quaternion.from_axis_angle(Y_AXIS, 60)
        v = (a * b).rotate(Point3D.forward())
        assert v.as_tuple() == pytest.approx((1, 0, 0), abs=1e-9)

    def test_zero_quaternion(self):
        assert Quaternion(x=0, y=0, z=0, w=0).is_zero
        assert not Quaternion.identity().is_zero

    def test_bounds_encapsulate(self):
        b = Bounds()
        assert b.is_empty
        b = b.encapsulate(Point3D(x=1, y=-1, z=0)).encapsulate(Point3D(x=-2, y=3, z=1))
        assert b.min.as_tuple() == (-2, -1, 0)
        assert b.max.as_tuple() == (1, 3, 1)
        assert b.size.as_tuple() == (3, 4, 1)
        assert b.contains(Point3D(x=0, y=0, z=0.5))
        assert not b.contains(Point3D(x=0, y=0, z=2))

    def test_bounds_from_points_matches_encapsulate(self):
        points = [Point3D(x=1, y=2, z=3), Point3D(x=-1, y=0, z=5)]
        b = Bounds()
        for p in points:
            b = b.encapsulate(p)
        assert Bounds.from_points(points) == b
        assert Bounds.from_points([]).is_empty


class TestTurtleState:
    def test_transitions_are_pure(self):
        start = TurtleState.initial()
        moved = start.after_move(2)
        assert start.position == Point3D.origin()
        assert moved.position.as_tuple() == pytest.approx((0, 0, 2))

    def test_zero_rotation_means_identity(self):
        state = TurtleState.initial(Quaternion(x=0, y=0, z=0, w=0))
        assert state.rotation == Quaternion.identity()

    def test_rotation_is_normalised(self):
        state = TurtleState.initial(Quaternion(x=0, y=0, z=0, w=2))
        assert state.rotation.w == pytest.approx(1.0)

    def test_yaw_pitch_roll(self):
        start = TurtleState.initial()
        assert start.after_rotate_yaw(90).heading.as_tuple() == pytest.approx((1, 0, 0), abs=1e-9)
        assert start.after_rotate_pitch(90).heading.as_tuple() == pytest.approx((0, -1, 0), abs=1e-9)
        assert start.after_rotate_roll(90).heading.as_tuple() == pytest.approx((0, 0, 1), abs=1e-9)


class TestInterpreter:
    def test_single_move(self):
        result = TurtleInterpreter().run("M")
        assert len(result.segments) == 1
        assert result.segments[0].start == Point3D.origin()
        assert result.segments[0].end.as_tuple() == pytest.approx((0, 0, 1))

    def test_invisible_move(self):
        result = TurtleInterpreter(default_move=2).run("NM")
        assert len(result.segments) == 1
        assert result.segments[0].start.as_tuple() == pytest.approx((0, 0, 2))
        assert _end(result) == (0, 0, 4)

    @pytest.mark.parametrize("symbols, expected", [
        ("+M", (1, 0, 0)),
        ("-M", (-1, 0, 0)),
        ("^M", (0, -1, 0)),
        ("vM", (0, 1, 0)),
        (">+M", (0, 1, 0)),
        ("<+M", (0, -1, 0)),
    ])
    def test_rotations(self, symbols, expected):
        result = TurtleInterpreter(default_rotation=90).run(symbols)
        assert _end(result) == expected

    def test_bound_parameter(self):
        result = TurtleInterpreter().run("+(a)M(b)", {"a": 90, "b": 3})
        assert _end(result) == (3, 0, 0)

    def test_unbound_parameter_uses_default_and_is_skipped(self):
        # `(v)` must not be read as a pitch command.
        result = TurtleInterpreter(default_rotation=30).run("+(v)M")
        expected = (math.sin(math.radians(30)), 0, math.cos(math.radians(30)))
        assert result.segments[-1].end.as_tuple() == pytest.approx(expected)

    def test_parameter_on_placeholder_is_skipped(self):
        result = TurtleInterpreter().run("A(v)M", {"v": 45})
        assert _end(result) == (0, 0, 1)

    def test_branches_restore_state(self):
        result = TurtleInterpreter(default_rotation=90).run("[+M]-M")
        assert len(result.segments) == 2
        assert result.segments[0].start == result.segments[1].start == Point3D.origin()
        assert _end(result, 0) == (1, 0, 0)
        assert _end(result, 1) == (-1, 0, 0)
        assert result.stats.max_branch_depth == 1

    def test_nested_branches(self):
        result = TurtleInterpreter().run("M[M[M]L]L")
        assert result.stats.max_branch_depth == 2
        assert [p.as_tuple() for p in result.leaves] == [
            pytest.approx((0, 0, 2)),
            pytest.approx((0, 0, 1)),
        ]

    def test_unmatched_close_bracket(self):
        with pytest.raises(StackUnderflowError) as exc:
            TurtleInterpreter().run("M[M]]M")
        assert exc.value.index == 4

    def test_leftover_saved_states_are_ignored(self):
        result = TurtleInterpreter().run("[[M")
        assert len(result.segments) == 1

    def test_leaves_and_bounds(self):
        result = TurtleInterpreter().run("ML")
        assert result.leaves[0].as_tuple() == pytest.approx((0, 0, 1))
        assert result.bounds.min.as_tuple() == pytest.approx((0, 0, 0))
        assert result.bounds.max.as_tuple() == pytest.approx((0, 0, 1))

    def test_leaf_only_bounds(self):
        result = TurtleInterpreter().run("NNL")
        assert result.segments == ()
        assert result.bounds.min == result.bounds.max
        assert result.bounds.min.as_tuple() == pytest.approx((0, 0, 2))

    def test_nothing_emitted(self):
        result = TurtleInterpreter().run("ABC+-N")
        assert result.segments == ()
        assert result.leaves == ()
        assert result.bounds.is_empty
        assert result.stats.symbols == 6

    def test_initial_state(self):
        start = Point3D(x=5, y=5, z=5)
        rotation = Quaternion.from_axis_angle(Y_AXIS, 90)
        result = TurtleInterpreter().run("M", initial_rotation=rotation, initial_position=start)
        assert result.segments[0].start == start
        assert _end(result) == (6, 5, 5)
        # The origin is not part of the box unless something was drawn there.
        assert not result.bounds.contains(Point3D.origin())

    def test_stats(self):
        result = TurtleInterpreter(default_move=0.5).run("MMNL")
        assert result.stats.segments == 2
        assert result.stats.leaves == 1
        assert result.stats.total_length == pytest.approx(1.0)

    def test_result_is_frozen_and_needs_stats(self):
        result = TurtleInterpreter().run("M")
        with pytest.raises(ValidationError):
            result.stats = ResultStats()
        with pytest.raises(ValidationError):
            GenerationResult(segments=result.segments)
