"""
Network Graph Builder

Converts a flat contact snapshot into deduplicated nodes and edges.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from pydantic import ValidationError

from src.models.entities import (
    Contact,
    NetworkEdge,
    NetworkGraph,
    NetworkNode,
    edge_key,
)

logger = logging.getLogger(__name__)

ContactInput = Union[Contact, Mapping[str, Any]]


class InvalidContactError(ValueError):
    """Raised when a contact record cannot be used as a graph node."""


def coerce_contacts(contacts: Optional[Iterable[ContactInput]]) -> list[Contact]:
    """Validate a snapshot into Contact models.

    Contacts that are already models pass through untouched; mappings are
    validated. A record without an identifier fails fast.

    Raises:
        InvalidContactError: If a record is missing its ID or is malformed
    """
    resolved: list[Contact] = []

    for index, item in enumerate(contacts or []):
        if isinstance(item, Contact):
            resolved.append(item)
            continue

        if not isinstance(item, Mapping):
            raise InvalidContactError(
                f"Contact at index {index} must be a Contact or mapping, "
                f"got {type(item).__name__}"
            )

        if not item.get("id"):
            raise InvalidContactError(
                f"Contact at index {index} is missing required field 'id'"
            )

        try:
            resolved.append(Contact.model_validate(item))
        except ValidationError as e:
            raise InvalidContactError(
                f"Contact {item['id']!r} at index {index} is invalid: {e}"
            ) from e

    return resolved


class NetworkGraphBuilder:
    """Builds a NetworkGraph from one contact snapshot.

    Edges are keyed by the unordered pair of endpoints. The first connection
    record seen for a pair sets the edge's direction, strength and type; a
    record in the opposite direction only marks it bidirectional.
    """

    def __init__(self, hub_multiplier: float = 1.5):
        """Initialize builder.

        Args:
            hub_multiplier: A node is a hub if its degree exceeds the average
                degree times this factor
        """
        self.hub_multiplier = hub_multiplier

    def build(self, contacts: Optional[Iterable[ContactInput]]) -> NetworkGraph:
        """Build nodes and edges for a snapshot.

        Args:
            contacts: Contacts (models or mappings) with their connection lists

        Returns:
            NetworkGraph with hub flags set
        """
        contacts = coerce_contacts(contacts)

        known_ids: set[str] = set()
        for contact in contacts:
            if contact.id in known_ids:
                logger.warning(f"Duplicate contact ID in snapshot: {contact.id}")
            known_ids.add(contact.id)

        nodes = [
            NetworkNode(
                id=contact.id,
                contact=contact,
                connections=[c.contact_id for c in contact.connections],
                degree=contact.connection_count,
            )
            for contact in contacts
        ]

        edges: list[NetworkEdge] = []
        edge_map: dict[tuple[str, str], NetworkEdge] = {}
        directions: set[tuple[str, str]] = set()

        for contact in contacts:
            for connection in contact.connections:
                directions.add((contact.id, connection.contact_id))

                key = edge_key(contact.id, connection.contact_id)
                if key in edge_map:
                    continue

                if connection.contact_id not in known_ids:
                    logger.debug(
                        f"Dropping connection {contact.id} -> {connection.contact_id}: "
                        f"unknown contact"
                    )
                    continue

                edge = NetworkEdge(
                    source=contact.id,
                    target=connection.contact_id,
                    strength=connection.strength,
                    type=connection.type,
                )
                edges.append(edge)
                edge_map[key] = edge

        for edge in edges:
            if (edge.target, edge.source) in directions:
                edge.bidirectional = True

        average_degree = (
            sum(node.degree for node in nodes) / len(nodes) if nodes else 0.0
        )
        for node in nodes:
            node.is_hub = node.degree > average_degree * self.hub_multiplier

        logger.debug(
            f"Built network graph: {len(nodes)} nodes, {len(edges)} edges, "
            f"average degree {average_degree:.2f}"
        )

        return NetworkGraph(nodes=nodes, edges=edges, average_degree=average_degree)


def build_network_graph(
    contacts: Optional[Iterable[ContactInput]],
    hub_multiplier: float = 1.5,
) -> NetworkGraph:
    """Convenience function to build a graph with default settings."""
    return NetworkGraphBuilder(hub_multiplier=hub_multiplier).build(contacts)
