"""
Core Data Models

Pydantic models for contacts, their one-sided connection records, and the
derived graph structures and reports computed from a contact snapshot.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Tier(str, Enum):
    """Ordinal contact tiers."""
    TIER1 = "tier1"
    TIER2 = "tier2"
    TIER3 = "tier3"


class ConnectionStrength(str, Enum):
    """Recorded quality of a relationship between two contacts."""
    STRONG = "strong"
    MEDIUM = "medium"
    WEAK = "weak"


class Connection(BaseModel):
    """A one-sided connection record stored on the owning contact."""
    model_config = ConfigDict(populate_by_name=True)

    contact_id: str = Field(alias="contactId", description="ID of the connected contact")
    strength: ConnectionStrength
    type: str = Field(default="business", description="Categorical label, passed through")
    notes: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")


class Contact(BaseModel):
    """A contact as supplied by the contact store."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1, description="Unique contact identifier")
    name: str = ""
    tier: Tier
    location: Optional[str] = None
    interests: list[str] = Field(default_factory=list)
    relationship_label: str = Field(
        default="",
        alias="relationshipLabel",
        description="How the contact relates to the network owner",
    )
    notes: Optional[str] = None
    connections: list[Connection] = Field(default_factory=list)

    @field_validator("interests", "connections", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        """Treat null/absent lists as empty."""
        return [] if value is None else value

    @property
    def connection_count(self) -> int:
        """Number of raw outgoing connection records."""
        return len(self.connections)


class NetworkNode(BaseModel):
    """A contact as a graph node."""
    id: str
    contact: Contact
    connections: list[str] = Field(default_factory=list)
    degree: int = 0
    is_hub: bool = False


class NetworkEdge(BaseModel):
    """A deduplicated relationship between two contacts."""
    source: str
    target: str
    strength: ConnectionStrength
    type: str
    bidirectional: bool = False

    @property
    def key(self) -> tuple[str, str]:
        """Unordered identity of the edge."""
        return edge_key(self.source, self.target)


class NetworkGraph(BaseModel):
    """Nodes and edges derived from one contact snapshot."""
    nodes: list[NetworkNode] = Field(default_factory=list)
    edges: list[NetworkEdge] = Field(default_factory=list)
    average_degree: float = 0.0

    def get_node(self, contact_id: str) -> Optional[NetworkNode]:
        """Get the first node with the given ID."""
        for node in self.nodes:
            if node.id == contact_id:
                return node
        return None

    def get_edge(self, first_id: str, second_id: str) -> Optional[NetworkEdge]:
        """Get the edge between two contacts, in either direction."""
        return self.edge_index().get(edge_key(first_id, second_id))

    def edge_index(self) -> dict[tuple[str, str], NetworkEdge]:
        """Map unordered endpoint pairs to edges."""
        return {edge.key: edge for edge in self.edges}

    @property
    def hubs(self) -> list[NetworkNode]:
        return [node for node in self.nodes if node.is_hub]


class NetworkPath(BaseModel):
    """An ordered path between two contacts."""
    path: list[str]
    contacts: list[Contact] = Field(default_factory=list)
    total_strength: float = 0.0
    steps: int = 0


class SuggestedConnection(BaseModel):
    """A pair of unconnected contacts with something in common."""
    contact1: Contact
    contact2: Contact
    reason: str


class NetworkInsights(BaseModel):
    """Ranked insight report for a contact snapshot."""
    total_contacts: int = 0
    total_connections: int = Field(default=0, description="Deduplicated edge count")
    network_density: float = 0.0
    average_degree: float = 0.0
    hubs: list[Contact] = Field(default_factory=list)
    isolated_contacts: list[Contact] = Field(default_factory=list)
    strongest_connections: list[NetworkEdge] = Field(default_factory=list)
    suggested_connections: list[SuggestedConnection] = Field(default_factory=list)


class NetworkStatistics(BaseModel):
    """Aggregate metrics over raw connection records."""
    total_connections: int = Field(default=0, description="Raw one-sided record count")
    average_connections_per_contact: float = 0.0
    most_connected_contact: Optional[Contact] = None
    connection_strength_distribution: dict[str, int] = Field(
        default_factory=lambda: {strength.value: 0 for strength in ConnectionStrength}
    )


class IntroductionPath(BaseModel):
    """A chain of intermediaries who could make an introduction."""
    path: list[Contact] = Field(default_factory=list)
    introducers: list[Contact] = Field(default_factory=list)
    total_steps: int = 0
    strength: float = 0.0
    notes: list[str] = Field(default_factory=list)


def edge_key(first_id: str, second_id: str) -> tuple[str, str]:
    """Unordered pair key for two contact IDs."""
    return (first_id, second_id) if first_id <= second_id else (second_id, first_id)
