"""
Path Finder

Unweighted shortest-path search and bounded all-paths enumeration between
two contacts, with path strength scoring.
"""

import logging
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Optional, Union

from src.models.entities import (
    ConnectionStrength,
    Contact,
    NetworkEdge,
    NetworkGraph,
    NetworkPath,
    edge_key,
)
from src.models.graph import ContactInput, NetworkGraphBuilder, coerce_contacts

logger = logging.getLogger(__name__)


DEFAULT_STRENGTH_VALUES = {
    ConnectionStrength.STRONG: 3,
    ConnectionStrength.MEDIUM: 2,
    ConnectionStrength.WEAK: 1,
}


def get_strength_value(
    strength: Union[ConnectionStrength, str],
    strength_values: Optional[dict[ConnectionStrength, int]] = None,
) -> int:
    """Convert a connection strength to its numeric weight (unknown = 1)."""
    values = strength_values or DEFAULT_STRENGTH_VALUES
    try:
        strength = ConnectionStrength(strength)
    except ValueError:
        return 1
    return values.get(strength, 1)


def calculate_path_strength(
    path: list[str],
    edges: Union[NetworkGraph, dict[tuple[str, str], NetworkEdge]],
    strength_values: Optional[dict[ConnectionStrength, int]] = None,
) -> float:
    """Sum edge weights along consecutive pairs of a path.

    An edge matches in either direction. Pairs with no edge add nothing.
    """
    edge_index = edges.edge_index() if isinstance(edges, NetworkGraph) else edges

    total = 0
    for current_id, next_id in zip(path, path[1:]):
        edge = edge_index.get(edge_key(current_id, next_id))
        if edge is not None:
            total += get_strength_value(edge.strength, strength_values)
    return float(total)


def build_adjacency(graph: NetworkGraph) -> dict[str, list[str]]:
    """Undirected adjacency in edge order."""
    adjacency: dict[str, list[str]] = {node.id: [] for node in graph.nodes}
    for edge in graph.edges:
        adjacency.setdefault(edge.source, []).append(edge.target)
        if edge.source != edge.target:
            adjacency.setdefault(edge.target, []).append(edge.source)
    return adjacency


class PathFinder:
    """Finds paths between contacts over the undirected contact graph.

    Absence of a path is an ordinary outcome: unknown IDs and unreachable
    targets return None or an empty list.
    """

    def __init__(
        self,
        max_depth: int = 3,
        strength_values: Optional[dict] = None,
        max_visits: int = 0,
        graph_builder: Optional[NetworkGraphBuilder] = None,
    ):
        """Initialize path finder.

        Args:
            max_depth: Default maximum hop count for all-paths enumeration
            strength_values: Custom weights per connection strength
            max_visits: Node expansion budget for all-paths (0 = unlimited)
            graph_builder: Builder used to derive the graph
        """
        self.max_depth = max_depth
        self.max_visits = max_visits
        self.graph_builder = graph_builder or NetworkGraphBuilder()

        self.strength_values = DEFAULT_STRENGTH_VALUES.copy()
        if strength_values:
            for key, value in strength_values.items():
                try:
                    self.strength_values[ConnectionStrength(key)] = value
                except ValueError:
                    logger.warning(f"Unknown connection strength: {key}")

    def _prepare(
        self,
        contacts: Optional[Iterable[ContactInput]],
    ) -> tuple[NetworkGraph, dict[str, list[str]], dict[str, Contact]]:
        contacts = coerce_contacts(contacts)
        graph = self.graph_builder.build(contacts)

        contacts_by_id: dict[str, Contact] = {}
        for contact in contacts:
            contacts_by_id.setdefault(contact.id, contact)

        return graph, build_adjacency(graph), contacts_by_id

    def _to_network_path(
        self,
        path: list[str],
        edge_index: dict[tuple[str, str], NetworkEdge],
        contacts_by_id: dict[str, Contact],
    ) -> NetworkPath:
        return NetworkPath(
            path=path,
            contacts=[contacts_by_id[contact_id] for contact_id in path if contact_id in contacts_by_id],
            total_strength=calculate_path_strength(path, edge_index, self.strength_values),
            steps=len(path) - 1,
        )

    def find_shortest_path(
        self,
        contacts: Optional[Iterable[ContactInput]],
        source_id: str,
        target_id: str,
    ) -> Optional[NetworkPath]:
        """Find the minimum-hop path between two contacts using BFS.

        Ties between equal-length paths follow adjacency order. Identical
        endpoints yield a trivial 0-step path.

        Args:
            contacts: Contact snapshot
            source_id: Starting contact ID
            target_id: Destination contact ID

        Returns:
            NetworkPath, or None if either ID is unknown or no path exists
        """
        graph, adjacency, contacts_by_id = self._prepare(contacts)

        if source_id not in contacts_by_id or target_id not in contacts_by_id:
            logger.debug(f"Unknown endpoint in shortest path: {source_id} -> {target_id}")
            return None

        edge_index = graph.edge_index()

        if source_id == target_id:
            return self._to_network_path([source_id], edge_index, contacts_by_id)

        queue = deque([[source_id]])
        visited = {source_id}

        while queue:
            path = queue.popleft()
            for neighbor_id in adjacency.get(path[-1], []):
                if neighbor_id in visited:
                    continue
                next_path = path + [neighbor_id]
                if neighbor_id == target_id:
                    return self._to_network_path(next_path, edge_index, contacts_by_id)
                visited.add(neighbor_id)
                queue.append(next_path)

        return None

    def find_all_paths(
        self,
        contacts: Optional[Iterable[ContactInput]],
        source_id: str,
        target_id: str,
        max_depth: Optional[int] = None,
    ) -> list[NetworkPath]:
        """Enumerate simple paths between two contacts using DFS.

        Args:
            contacts: Contact snapshot
            source_id: Starting contact ID
            target_id: Destination contact ID
            max_depth: Maximum hop count (default: finder's max_depth)

        Returns:
            Paths sorted by hop count ascending, then strength descending
        """
        depth_limit = self.max_depth if max_depth is None else max_depth
        graph, adjacency, contacts_by_id = self._prepare(contacts)

        if source_id not in contacts_by_id or target_id not in contacts_by_id:
            return []
        if source_id == target_id:
            return []

        edge_index = graph.edge_index()
        paths: list[NetworkPath] = []
        visits = 0
        exhausted = False

        def expand(current_id: str, path: list[str]) -> Optional[Iterator[str]]:
            nonlocal visits, exhausted

            if len(path) - 1 >= depth_limit:
                return None

            visits += 1
            if self.max_visits and visits > self.max_visits:
                exhausted = True
                return None

            return iter(adjacency.get(current_id, []))

        # Frames of (node, path, remaining neighbors); no recursion limit.
        on_path = {source_id}
        root = expand(source_id, [source_id])
        stack = [] if root is None else [(source_id, [source_id], root)]

        while stack and not exhausted:
            current_id, path, neighbors = stack[-1]
            neighbor_id = next((n for n in neighbors if n not in on_path), None)
            if neighbor_id is None:
                stack.pop()
                on_path.discard(current_id)
                continue

            next_path = path + [neighbor_id]
            if neighbor_id == target_id:
                paths.append(self._to_network_path(next_path, edge_index, contacts_by_id))
                continue

            children = expand(neighbor_id, next_path)
            if children is not None:
                on_path.add(neighbor_id)
                stack.append((neighbor_id, next_path, children))

        if exhausted:
            logger.warning(
                f"Path search {source_id} -> {target_id} stopped after "
                f"{self.max_visits} node visits; returning {len(paths)} paths"
            )

        paths.sort(key=lambda p: (p.steps, -p.total_strength))
        return paths


def find_shortest_path(
    contacts: Optional[Iterable[ContactInput]],
    source_id: str,
    target_id: str,
) -> Optional[NetworkPath]:
    """Convenience function for a default PathFinder shortest path."""
    return PathFinder().find_shortest_path(contacts, source_id, target_id)


def find_all_paths(
    contacts: Optional[Iterable[ContactInput]],
    source_id: str,
    target_id: str,
    max_depth: int = 3,
) -> list[NetworkPath]:
    """Convenience function for a default PathFinder all-paths search."""
    return PathFinder().find_all_paths(contacts, source_id, target_id, max_depth=max_depth)
