"""
Introduction Paths

Turns alternative paths between two contacts into chains of intermediaries
who could make an introduction.
"""

import logging
from collections.abc import Iterable
from typing import Optional

from src.models.entities import Contact, IntroductionPath
from src.models.graph import ContactInput
from src.models.paths import PathFinder

logger = logging.getLogger(__name__)


def describe_introducer(step: int, contact: Contact) -> str:
    """Human-readable note for one intermediary."""
    return f"Step {step}: {contact.name} ({contact.tier.value}) - {contact.relationship_label}"


def generate_introduction_paths(
    contacts: Optional[Iterable[ContactInput]],
    source_id: str,
    target_id: str,
    max_depth: int = 3,
    path_finder: Optional[PathFinder] = None,
) -> list[IntroductionPath]:
    """Generate introduction chains from source to target.

    Args:
        contacts: Contact snapshot
        source_id: Contact seeking the introduction
        target_id: Contact to be introduced to
        max_depth: Maximum hop count
        path_finder: Pre-configured path finder

    Returns:
        Introduction paths in the path finder's order (fewest hops, strongest first)
    """
    finder = path_finder or PathFinder()
    paths = finder.find_all_paths(contacts, source_id, target_id, max_depth=max_depth)

    introductions = []
    for network_path in paths:
        introducers = network_path.contacts[1:-1]
        introductions.append(
            IntroductionPath(
                path=network_path.contacts,
                introducers=introducers,
                total_steps=network_path.steps,
                strength=network_path.total_strength,
                notes=[describe_introducer(i, c) for i, c in enumerate(introducers, 1)],
            )
        )

    logger.debug(f"Found {len(introductions)} introduction paths from {source_id} to {target_id}")
    return introductions
