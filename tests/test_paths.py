"""
Tests for Path Finder
"""

import pytest

from src.models.entities import ConnectionStrength
from src.models.graph import build_network_graph
from src.models.paths import (
    PathFinder,
    build_adjacency,
    calculate_path_strength,
    find_all_paths,
    find_shortest_path,
    get_strength_value,
)


@pytest.fixture
def parallel_contacts(contact_factory):
    """Two 2-hop routes from s to t: a weak one found first, a strong one second."""
    return [
        contact_factory("s", connections=[("x", "weak"), ("y", "strong")]),
        contact_factory("x", connections=[("t", "weak")]),
        contact_factory("y", connections=[("t", "strong")]),
        contact_factory("t"),
    ]


class TestStrengthValues:
    """Tests for strength weights and path scoring."""

    def test_default_values(self):
        """Test the default strength weights."""
        assert get_strength_value(ConnectionStrength.STRONG) == 3
        assert get_strength_value("medium") == 2
        assert get_strength_value("weak") == 1

    def test_unknown_strength(self):
        """Test that an unknown strength weighs 1."""
        assert get_strength_value("legendary") == 1

    def test_path_strength(self, sample_contacts):
        """Test summing edge weights along a path."""
        graph = build_network_graph(sample_contacts)

        assert calculate_path_strength(["bob", "alice", "carol", "dave"], graph) == 7
        assert calculate_path_strength(["dave", "carol", "alice", "bob"], graph) == 7

    def test_path_strength_missing_edge(self, sample_contacts):
        """Test that a pair with no edge contributes nothing."""
        graph = build_network_graph(sample_contacts)
        assert calculate_path_strength(["gina", "alice", "bob"], graph) == 3

    def test_single_node_path(self, sample_contacts):
        """Test that a one-node path has no strength."""
        graph = build_network_graph(sample_contacts)
        assert calculate_path_strength(["alice"], graph) == 0


class TestAdjacency:
    """Tests for the undirected adjacency."""

    def test_adjacency_is_undirected(self, one_way_contacts):
        """Test that a one-sided record is traversable both ways."""
        adjacency = build_adjacency(build_network_graph(one_way_contacts))

        assert adjacency["A"] == ["B"]
        assert adjacency["B"] == ["A"]
        assert adjacency["C"] == []

    def test_adjacency_follows_edge_order(self, sample_contacts):
        """Test neighbor order follows edge construction order."""
        adjacency = build_adjacency(build_network_graph(sample_contacts))

        assert adjacency["alice"] == ["bob", "carol", "dave", "erin"]
        assert adjacency["dave"] == ["alice", "carol"]
        assert "ghost" not in adjacency["frank"]


class TestShortestPath:
    """Tests for BFS shortest path."""

    def test_direct_connection(self, one_way_contacts):
        """Test a one-hop path."""
        path = find_shortest_path(one_way_contacts, "A", "B")

        assert path.path == ["A", "B"]
        assert path.steps == 1
        assert path.total_strength == 3
        assert [c.id for c in path.contacts] == ["A", "B"]

    def test_reverse_of_one_sided_connection(self, one_way_contacts):
        """Test that traversal ignores which side recorded the connection."""
        path = find_shortest_path(one_way_contacts, "B", "A")
        assert path.path == ["B", "A"]

    def test_unreachable(self, one_way_contacts):
        """Test that an unreachable target returns None."""
        assert find_shortest_path(one_way_contacts, "A", "C") is None

    def test_unknown_ids(self, sample_contacts):
        """Test that unknown IDs return None."""
        assert find_shortest_path(sample_contacts, "alice", "nobody") is None
        assert find_shortest_path(sample_contacts, "nobody", "alice") is None
        assert find_shortest_path(sample_contacts, "frank", "ghost") is None

    def test_empty_snapshot(self):
        """Test searching an empty snapshot."""
        assert find_shortest_path([], "a", "b") is None

    def test_same_endpoints(self, sample_contacts):
        """Test that identical endpoints give a trivial 0-step path."""
        path = find_shortest_path(sample_contacts, "gina", "gina")

        assert path.path == ["gina"]
        assert path.steps == 0
        assert path.total_strength == 0

    def test_multi_hop(self, sample_contacts):
        """Test a path through intermediaries."""
        path = find_shortest_path(sample_contacts, "frank", "dave")

        assert path.path == ["frank", "bob", "alice", "dave"]
        assert path.steps == 3
        assert path.total_strength == 1 + 3 + 1

    def test_tie_follows_traversal_order(self, parallel_contacts):
        """Test that equal-length paths resolve by adjacency order."""
        path = find_shortest_path(parallel_contacts, "s", "t")
        assert path.path == ["s", "x", "t"]

    def test_repeated_calls_agree(self, sample_contacts):
        """Test that results do not depend on call history."""
        first = find_shortest_path(sample_contacts, "bob", "dave")
        find_shortest_path(sample_contacts, "gina", "alice")
        second = find_shortest_path(sample_contacts, "bob", "dave")

        assert first.model_dump() == second.model_dump()


class TestAllPaths:
    """Tests for DFS all-paths enumeration."""

    def test_sorted_by_steps(self, sample_contacts):
        """Test that shorter paths come first."""
        paths = find_all_paths(sample_contacts, "bob", "dave")

        assert [p.path for p in paths] == [
            ["bob", "alice", "dave"],
            ["bob", "alice", "carol", "dave"],
        ]
        assert [p.total_strength for p in paths] == [4, 7]

    def test_stronger_first_within_same_length(self, parallel_contacts):
        """Test that equal-length paths are ordered by strength."""
        paths = find_all_paths(parallel_contacts, "s", "t")

        assert [p.path for p in paths] == [["s", "y", "t"], ["s", "x", "t"]]
        assert paths[0].total_strength == 6
        assert paths[1].total_strength == 2

    def test_max_depth(self, sample_contacts):
        """Test that paths longer than max_depth are excluded."""
        assert len(find_all_paths(sample_contacts, "bob", "dave", max_depth=2)) == 1
        assert find_all_paths(sample_contacts, "bob", "dave", max_depth=1) == []

    def test_depth_limit_is_inclusive(self, sample_contacts):
        """Test that a path of exactly max_depth hops is kept."""
        paths = find_all_paths(sample_contacts, "frank", "dave", max_depth=3)
        assert [p.path for p in paths] == [["frank", "bob", "alice", "dave"]]

    def test_simple_paths_only(self, sample_contacts):
        """Test that no path repeats a contact."""
        for p in find_all_paths(sample_contacts, "carol", "bob", max_depth=5):
            assert len(p.path) == len(set(p.path))

    def test_no_path(self, one_way_contacts):
        """Test that unconnected contacts give no paths."""
        assert find_all_paths(one_way_contacts, "A", "C") == []
        assert find_all_paths(one_way_contacts, "C", "A") == []

    def test_unknown_ids(self, sample_contacts):
        """Test that unknown IDs give no paths."""
        assert find_all_paths(sample_contacts, "alice", "nobody") == []

    def test_same_endpoints(self, sample_contacts):
        """Test that identical endpoints give no paths."""
        assert find_all_paths(sample_contacts, "alice", "alice") == []

    def test_shortest_never_longer_than_all_paths(self, sample_contacts):
        """Test shortest hop count against every enumerated path."""
        ids = [c.id for c in sample_contacts]
        for source in ids:
            for target in ids:
                if source == target:
                    continue
                shortest = find_shortest_path(sample_contacts, source, target)
                paths = find_all_paths(sample_contacts, source, target, max_depth=6)
                if shortest is None:
                    assert paths == []
                else:
                    assert all(shortest.steps <= p.steps for p in paths)
                    assert paths[0].steps == shortest.steps

    def test_long_chain(self, contact_factory):
        """Test a chain deeper than the interpreter's recursion limit."""
        size = 1500
        contacts = [
            contact_factory(f"n{i}", connections=[(f"n{i + 1}", "weak")])
            for i in range(size - 1)
        ]
        contacts.append(contact_factory(f"n{size - 1}"))

        paths = find_all_paths(contacts, "n0", f"n{size - 1}", max_depth=size)

        assert len(paths) == 1
        assert paths[0].steps == size - 1
        assert paths[0].total_strength == size - 1
        assert find_shortest_path(contacts, "n0", f"n{size - 1}").steps == size - 1


class TestPathFinderConfig:
    """Tests for PathFinder configuration."""

    def test_custom_strength_values(self, one_way_contacts):
        """Test overriding strength weights."""
        finder = PathFinder(strength_values={"strong": 10, "bogus": 5})

        path = finder.find_shortest_path(one_way_contacts, "A", "B")

        assert path.total_strength == 10
        assert finder.strength_values[ConnectionStrength.WEAK] == 1

    def test_default_depth(self, sample_contacts):
        """Test that the finder's max_depth applies when none is given."""
        finder = PathFinder(max_depth=2)
        assert len(finder.find_all_paths(sample_contacts, "bob", "dave")) == 1

    def test_visit_budget(self, sample_contacts):
        """Test that the visit budget stops the search early."""
        unlimited = PathFinder().find_all_paths(sample_contacts, "bob", "dave")
        limited = PathFinder(max_visits=1).find_all_paths(sample_contacts, "bob", "dave")

        assert len(limited) < len(unlimited)
