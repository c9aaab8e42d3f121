"""Tests for Room and DungeonGraph."""

import pytest
from pydantic import ValidationError

from adventure.core.rooms import UNASSIGNED_TAG, DungeonGraph, Room, RoomType
from adventure.errors import DungeonLoadError
from tests.conftest import SMALL_LAYOUT, make_graph


class TestRoom:
    def test_degree(self):
        room = Room(name="FOYER", room_type=RoomType.MID, connections=("A", "B"))
        assert room.degree == 2

    def test_type_tag(self):
        assert Room(name="X", room_type=RoomType.START).type_tag == "START_ROOM"
        assert Room(name="X", room_type=RoomType.END).type_tag == "END_ROOM"
        assert Room(name="X").type_tag == UNASSIGNED_TAG

    def test_frozen(self):
        room = Room(name="X", room_type=RoomType.MID)
        with pytest.raises(ValidationError):
            room.name = "Y"


class TestDungeonGraphLookups:
    def test_get_and_contains(self, small_graph):
        assert small_graph.get("KITCHEN").room_type is RoomType.MID
        assert "KITCHEN" in small_graph
        assert "ATTIC" not in small_graph

    def test_get_unknown_raises(self, small_graph):
        with pytest.raises(KeyError):
            small_graph.get("ATTIC")

    def test_names_and_len(self, small_graph):
        assert small_graph.names == list(SMALL_LAYOUT)
        assert len(small_graph) == 5

    def test_start_and_end(self, small_graph):
        assert small_graph.start_room.name == "FOYER"
        assert small_graph.end_room.name == "DUNGEON"

    def test_missing_start_raises(self):
        graph = make_graph({
            "A": (RoomType.MID, ["B"]),
            "B": (RoomType.END, ["A"]),
        })
        with pytest.raises(DungeonLoadError):
            graph.start_room

    def test_two_ends_raises(self):
        graph = make_graph({
            "A": (RoomType.END, ["B"]),
            "B": (RoomType.END, ["A"]),
        })
        with pytest.raises(DungeonLoadError):
            graph.end_room

    def test_is_connected_either_direction(self):
        graph = make_graph({
            "A": (RoomType.START, ["B"]),
            "B": (RoomType.END, []),
        })
        assert graph.is_connected("A", "B")
        assert graph.is_connected("B", "A")

    def test_degree(self, small_graph):
        assert small_graph.degree("BASEMENT") == 4


class TestReachability:
    def test_reachable(self, small_graph):
        assert small_graph.is_reachable("FOYER", "DUNGEON")
        assert small_graph.is_reachable("DARK_ROOM", "KITCHEN")

    def test_unreachable(self):
        graph = make_graph({
            "A": (RoomType.START, ["B"]),
            "B": (RoomType.MID, ["A"]),
            "C": (RoomType.END, []),
        })
        assert not graph.is_reachable("A", "C")

    def test_self_is_reachable(self, small_graph):
        assert small_graph.is_reachable("FOYER", "FOYER")


class TestInvariants:
    def test_small_graph_within_bounds(self, small_graph):
        assert small_graph.check_invariants(2, 4) == []

    def test_degree_out_of_bounds(self, small_graph):
        problems = small_graph.check_invariants(3, 3)
        assert any("BASEMENT has degree 4" in p for p in problems)
        assert any("DARK_ROOM has degree 2" in p for p in problems)

    def test_asymmetric_edge(self):
        graph = make_graph({
            "A": (RoomType.START, ["B"]),
            "B": (RoomType.END, []),
        })
        problems = graph.check_invariants(0, 1)
        assert any("no matching reverse edge" in p for p in problems)

    def test_self_loop_and_duplicate(self):
        graph = make_graph({
            "A": (RoomType.START, ["A", "B", "B"]),
            "B": (RoomType.END, ["A"]),
        })
        problems = graph.check_invariants(0, 3)
        assert any("connects to itself" in p for p in problems)
        assert any("lists a connection twice" in p for p in problems)

    def test_unknown_connection(self):
        graph = make_graph({
            "A": (RoomType.START, ["Z"]),
            "B": (RoomType.END, []),
        })
        assert any("unknown Z" in p for p in graph.check_invariants(0, 1))

    def test_type_counts(self):
        graph = make_graph({
            "A": (RoomType.MID, []),
            "B": (None, []),
        })
        problems = graph.check_invariants(0, 1)
        assert "0 rooms of type START_ROOM" in problems
        assert "0 rooms of type END_ROOM" in problems
        assert any("without a type: B" in p for p in problems)

    def test_duplicate_names(self):
        graph = DungeonGraph(rooms=(
            Room(name="A", room_type=RoomType.START),
            Room(name="A", room_type=RoomType.END),
        ))
        assert "Duplicate room names" in graph.check_invariants(0, 1)
