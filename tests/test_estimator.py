"""Tests for missing-marker estimation."""

from __future__ import annotations

import pytest

from mocap_engine.core.types import Joint, Topology
from mocap_engine.processing.estimator import ESTIMATED_CONFIDENCE, fill_missing


@pytest.fixture
def arm_topology() -> Topology:
    """A-B of length 10 followed by A-C of length 5."""
    return Topology([Joint("A", "B", 10.0, "A to B"), Joint("A", "C", 5.0, "A to C")])


class TestFillMissing:
    """Tests for fill_missing()."""

    def test_places_missing_marker_along_anchor_direction(
        self, make_frame, arm_topology: Topology
    ) -> None:
        """Missing B lands at the joint length from A, towards C."""
        frame = make_frame({"A": (0.0, 0.0), "B": (50.0, 50.0, 0.9, False), "C": (3.0, 4.0)})

        result = fill_missing(frame, arm_topology)
        b = result.markers["B"]

        assert b.x == pytest.approx(6.0)
        assert b.y == pytest.approx(8.0)
        assert b.confidence == ESTIMATED_CONFIDENCE == 0.5
        assert b.is_visible
        assert b.position.distance_to(result.markers["A"].position) == pytest.approx(10.0)

    def test_absent_marker_is_added(self, make_frame, arm_topology: Topology) -> None:
        """A marker missing from the frame entirely is added."""
        frame = make_frame({"A": (1.0, 1.0), "C": (1.0, 6.0)})

        result = fill_missing(frame, arm_topology)

        assert set(result.markers) == {"A", "B", "C"}
        assert result.markers["B"].x == pytest.approx(1.0)
        assert result.markers["B"].y == pytest.approx(11.0)
        assert "B" not in frame

    def test_missing_start_endpoint(self, make_frame) -> None:
        """Estimation works when the joint's start marker is the missing one."""
        topology = Topology([Joint("B", "A", 4.0), Joint("C", "A", 1.0)])
        frame = make_frame({"A": (0.0, 0.0), "C": (-2.0, 0.0)})

        result = fill_missing(frame, topology)

        assert result.markers["B"].x == pytest.approx(-4.0)
        assert result.markers["B"].y == pytest.approx(0.0)

    def test_no_anchor_leaves_marker_absent(self, make_frame) -> None:
        """Without another joint on the known endpoint nothing is added."""
        topology = Topology([Joint("A", "B", 10.0)])
        frame = make_frame({"A": (0.0, 0.0)})

        result = fill_missing(frame, topology)

        assert "B" not in result
        assert result == frame

    def test_invisible_anchor_gives_no_estimate(self, make_frame, arm_topology: Topology) -> None:
        """The first anchor must be visible; later joints are not tried."""
        topology = Topology(list(arm_topology) + [Joint("A", "D", 2.0)])
        frame = make_frame({"A": (0.0, 0.0), "C": (3.0, 4.0, 1.0, False), "D": (0.0, 2.0)})

        result = fill_missing(frame, topology)

        assert "B" not in result

    def test_unconstrained_joints_are_not_anchors(self, make_frame) -> None:
        """Zero-length joints are skipped when searching for an anchor."""
        topology = Topology(
            [Joint("A", "B", 10.0), Joint("A", "D", 0.0), Joint("A", "C", 5.0)]
        )
        frame = make_frame({"A": (0.0, 0.0), "C": (0.0, -3.0), "D": (1.0, 0.0)})

        result = fill_missing(frame, topology)

        assert result.markers["B"].x == pytest.approx(0.0)
        assert result.markers["B"].y == pytest.approx(-10.0)

    def test_first_anchor_in_topology_order_wins(self, make_frame) -> None:
        """When several joints touch the known endpoint the first is used."""
        topology = Topology(
            [Joint("A", "B", 10.0), Joint("A", "C", 5.0), Joint("A", "D", 5.0)]
        )
        frame = make_frame({"A": (0.0, 0.0), "C": (3.0, 4.0), "D": (0.0, 7.0)})

        result = fill_missing(frame, topology)

        assert result.markers["B"].x == pytest.approx(6.0)
        assert result.markers["B"].y == pytest.approx(8.0)

    def test_unconstrained_missing_joint_is_ignored(self, make_frame) -> None:
        """A joint without a target length never synthesizes a marker."""
        topology = Topology([Joint("A", "B", 0.0), Joint("A", "C", 5.0)])
        frame = make_frame({"A": (0.0, 0.0), "C": (3.0, 4.0)})

        assert "B" not in fill_missing(frame, topology)

    def test_both_endpoints_missing_unresolved(self, make_frame) -> None:
        """Joints with both endpoints missing are left alone."""
        topology = Topology([Joint("B", "C", 3.0), Joint("A", "X", 1.0)])
        frame = make_frame({"A": (0.0, 0.0), "X": (1.0, 0.0)})

        result = fill_missing(frame, topology)

        assert set(result.markers) == {"A", "X"}

    def test_coincident_anchor_gives_no_estimate(self, make_frame, arm_topology: Topology) -> None:
        """An anchor on top of the known endpoint has no direction."""
        frame = make_frame({"A": (2.0, 2.0), "C": (2.0, 2.0)})

        assert "B" not in fill_missing(frame, arm_topology)

    def test_no_propagation_within_one_call(self, make_frame) -> None:
        """Synthesized markers only become anchors on the next call."""
        topology = Topology(
            [Joint("A", "X", 1.0), Joint("A", "B", 2.0), Joint("B", "C", 3.0)]
        )
        frame = make_frame({"A": (0.0, 0.0), "X": (1.0, 0.0)})

        first = fill_missing(frame, topology)

        assert first.markers["B"].x == pytest.approx(2.0)
        assert first.markers["B"].y == pytest.approx(0.0)
        assert "C" not in first

        second = fill_missing(first, topology)

        assert second.markers["C"].x == pytest.approx(-1.0)
        assert second.markers["C"].y == pytest.approx(0.0)
        assert second.markers["C"].confidence == 0.5

    def test_visible_markers_untouched(self, make_frame, arm_topology: Topology) -> None:
        """Markers that were already visible keep their samples."""
        frame = make_frame({"A": (0.0, 0.0, 0.8), "C": (3.0, 4.0, 0.6)})

        result = fill_missing(frame, arm_topology)

        assert result.markers["A"] == frame.markers["A"]
        assert result.markers["C"] == frame.markers["C"]
