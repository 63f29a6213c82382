"""
Network Insights

Composes the graph and statistics into a ranked insight report: hubs,
isolated contacts, strongest edges and suggested new connections.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional

from src.models.entities import (
    ConnectionStrength,
    Contact,
    NetworkGraph,
    NetworkInsights,
    SuggestedConnection,
    edge_key,
)
from src.models.graph import ContactInput, NetworkGraphBuilder, coerce_contacts
from src.models.paths import get_strength_value
from src.models.statistics import network_density

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionRule:
    """A named predicate contributing an optional reason clause for a pair."""
    name: str
    check: Callable[[Contact, Contact], Optional[str]]


def _common_interests(first: Contact, second: Contact) -> Optional[str]:
    shared = [interest for interest in first.interests if interest in second.interests]
    if shared:
        return f"Common interests: {', '.join(shared)}"
    return None


def _same_location(first: Contact, second: Contact) -> Optional[str]:
    if first.location and first.location == second.location:
        return f"Same location: {first.location}"
    return None


def _same_tier(first: Contact, second: Contact) -> Optional[str]:
    if first.tier == second.tier:
        return f"Same tier: {first.tier.value}"
    return None


DEFAULT_SUGGESTION_RULES = (
    SuggestionRule("common_interests", _common_interests),
    SuggestionRule("same_location", _same_location),
    SuggestionRule("same_tier", _same_tier),
)

REASON_SEPARATOR = "; "


class InsightsGenerator:
    """Generates network insights from a contact snapshot.

    Suggestions come from a full pairwise scan, O(n^2) in the number of
    contacts. Set max_pairs to bound the scan for very large snapshots.
    """

    def __init__(
        self,
        max_hubs: int = 5,
        max_strongest: int = 10,
        max_suggestions: int = 10,
        max_pairs: int = 0,
        rules: Optional[Iterable[SuggestionRule]] = None,
        graph_builder: Optional[NetworkGraphBuilder] = None,
    ):
        """Initialize generator.

        Args:
            max_hubs: Maximum hubs to report
            max_strongest: Maximum strong edges to report
            max_suggestions: Maximum suggested connections to report
            max_pairs: Pair budget for the suggestion scan (0 = unlimited)
            rules: Ordered suggestion rules (default: interests, location, tier)
            graph_builder: Builder used to derive the graph
        """
        self.max_hubs = max_hubs
        self.max_strongest = max_strongest
        self.max_suggestions = max_suggestions
        self.max_pairs = max_pairs
        self.rules = tuple(rules) if rules is not None else DEFAULT_SUGGESTION_RULES
        self.graph_builder = graph_builder or NetworkGraphBuilder()

    def suggestion_reason(self, first: Contact, second: Contact) -> Optional[str]:
        """Join the clauses of every matching rule, or None if none match."""
        clauses = [clause for clause in (rule.check(first, second) for rule in self.rules) if clause]
        return REASON_SEPARATOR.join(clauses) if clauses else None

    def suggest_connections(
        self,
        contacts: list[Contact],
        graph: NetworkGraph,
    ) -> list[SuggestedConnection]:
        """Suggest connections between contacts with no edge between them.

        Results keep pair-scan order.
        """
        connected = {edge.key for edge in graph.edges}
        suggestions: list[SuggestedConnection] = []
        pairs_checked = 0

        for i, first in enumerate(contacts):
            for second in contacts[i + 1:]:
                if len(suggestions) >= self.max_suggestions:
                    return suggestions

                pairs_checked += 1
                if self.max_pairs and pairs_checked > self.max_pairs:
                    logger.warning(
                        f"Suggestion scan stopped after {self.max_pairs} pairs "
                        f"with {len(suggestions)} suggestions"
                    )
                    return suggestions

                if first.id == second.id or edge_key(first.id, second.id) in connected:
                    continue

                reason = self.suggestion_reason(first, second)
                if reason:
                    suggestions.append(
                        SuggestedConnection(contact1=first, contact2=second, reason=reason)
                    )

        return suggestions

    def generate(self, contacts: Optional[Iterable[ContactInput]]) -> NetworkInsights:
        """Generate the insight report.

        Args:
            contacts: Contact snapshot

        Returns:
            NetworkInsights for the snapshot
        """
        contacts = coerce_contacts(contacts)
        graph = self.graph_builder.build(contacts)

        hub_nodes = sorted(graph.hubs, key=lambda n: n.degree, reverse=True)
        hubs = [node.contact for node in hub_nodes[:self.max_hubs]]

        isolated = [contact for contact in contacts if contact.connection_count == 0]

        strongest = sorted(
            (edge for edge in graph.edges if edge.strength == ConnectionStrength.STRONG),
            key=lambda e: get_strength_value(e.strength),
            reverse=True,
        )[:self.max_strongest]

        suggestions = self.suggest_connections(contacts, graph)

        logger.info(
            f"Generated insights for {len(contacts)} contacts: {len(hubs)} hubs, "
            f"{len(isolated)} isolated, {len(suggestions)} suggestions"
        )

        return NetworkInsights(
            total_contacts=len(contacts),
            total_connections=len(graph.edges),
            network_density=network_density(len(contacts), len(graph.edges)),
            average_degree=graph.average_degree,
            hubs=hubs,
            isolated_contacts=isolated,
            strongest_connections=strongest,
            suggested_connections=suggestions,
        )


def generate_network_insights(
    contacts: Optional[Iterable[ContactInput]],
) -> NetworkInsights:
    """Convenience function to generate insights with default settings."""
    return InsightsGenerator().generate(contacts)
