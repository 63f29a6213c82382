"""
Pytest Configuration and Shared Fixtures
"""

import json
import pytest
from pathlib import Path
from typing import Optional

from src.models.entities import (
    Connection,
    ConnectionStrength,
    Contact,
    Tier,
)


def make_contact(
    contact_id: str,
    tier: Tier = Tier.TIER1,
    connections: Optional[list[tuple[str, str]]] = None,
    name: Optional[str] = None,
    location: Optional[str] = None,
    interests: Optional[list[str]] = None,
    relationship_label: str = "",
) -> Contact:
    """Create a contact with (target_id, strength) connection pairs."""
    return Contact(
        id=contact_id,
        name=name or contact_id,
        tier=tier,
        location=location,
        interests=interests or [],
        relationship_label=relationship_label,
        connections=[
            Connection(contact_id=target, strength=ConnectionStrength(strength))
            for target, strength in (connections or [])
        ],
    )


@pytest.fixture
def sample_contacts() -> list[Contact]:
    """A small network with a hub, a dangling reference and isolated contacts.

    Edges (first-seen direction):
        alice-bob strong (mutual), alice-carol medium, alice-dave weak,
        alice-erin strong, bob-frank weak, carol-dave medium
    frank -> ghost points at an unknown contact.
    """
    return [
        make_contact(
            "alice", Tier.TIER1,
            [("bob", "strong"), ("carol", "medium"), ("dave", "weak"), ("erin", "strong")],
            name="Alice", location="New York", interests=["wine", "tech"],
            relationship_label="Business partner",
        ),
        make_contact(
            "bob", Tier.TIER2,
            [("alice", "strong"), ("frank", "weak")],
            name="Bob", location="Los Angeles", interests=["wine"],
            relationship_label="College friend",
        ),
        make_contact(
            "carol", Tier.TIER2,
            [("dave", "medium")],
            name="Carol", location="New York", interests=["art"],
            relationship_label="Neighbor",
        ),
        make_contact(
            "dave", Tier.TIER3,
            name="Dave", location="Chicago", interests=["tech"],
            relationship_label="Investor",
        ),
        make_contact(
            "erin", Tier.TIER3,
            name="Erin", relationship_label="Mentor",
        ),
        make_contact(
            "frank", Tier.TIER1,
            [("ghost", "weak")],
            name="Frank", location="Los Angeles", interests=["golf"],
            relationship_label="Client",
        ),
        make_contact(
            "gina", Tier.TIER3,
            name="Gina", location="Boston", relationship_label="Cousin",
        ),
    ]


@pytest.fixture
def one_way_contacts() -> list[Contact]:
    """A records B; neither B nor C records anything."""
    return [
        make_contact("A", connections=[("B", "strong")]),
        make_contact("B"),
        make_contact("C"),
    ]


@pytest.fixture
def snapshot_file(tmp_path, sample_contacts) -> Path:
    """Write the sample contacts to a JSON snapshot."""
    path = tmp_path / "contacts.json"
    data = {"contacts": [c.model_dump(mode="json", by_alias=True) for c in sample_contacts]}
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def contact_factory():
    """Factory for contacts with (target_id, strength) connection pairs."""
    return make_contact
