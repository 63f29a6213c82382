"""
Network Statistics

Scalar metrics over a contact snapshot. Counts here are taken from raw
one-sided connection records, not deduplicated edges.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from src.models.entities import ConnectionStrength, Contact, NetworkStatistics
from src.models.graph import ContactInput, coerce_contacts

logger = logging.getLogger(__name__)


def network_density(node_count: int, edge_count: int) -> float:
    """Ratio of edges to all possible unordered pairs (0 for fewer than 2 nodes)."""
    if node_count < 2:
        return 0.0
    max_possible = node_count * (node_count - 1) / 2
    return edge_count / max_possible


def get_network_statistics(
    contacts: Optional[Iterable[ContactInput]],
) -> NetworkStatistics:
    """Calculate network-wide statistics.

    The strength distribution tallies every connection record, so a
    relationship recorded by both contacts is counted twice.

    Args:
        contacts: Contact snapshot

    Returns:
        NetworkStatistics for the snapshot
    """
    contacts = coerce_contacts(contacts)

    distribution = {strength.value: 0 for strength in ConnectionStrength}
    total_connections = 0
    most_connected: Optional[Contact] = None

    for contact in contacts:
        total_connections += contact.connection_count

        if most_connected is None or contact.connection_count > most_connected.connection_count:
            most_connected = contact

        for connection in contact.connections:
            distribution[connection.strength.value] += 1

    average = total_connections / len(contacts) if contacts else 0.0

    return NetworkStatistics(
        total_connections=total_connections,
        average_connections_per_contact=average,
        most_connected_contact=most_connected,
        connection_strength_distribution=distribution,
    )
