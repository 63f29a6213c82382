"""
Contact Snapshot Ingestion

Loads and validates a contact snapshot exported by the contact store.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from src.models.entities import Contact
from src.models.graph import coerce_contacts

logger = logging.getLogger(__name__)


class ContactSnapshot(BaseModel):
    """A point-in-time list of contacts."""
    contacts: list[Contact] = Field(default_factory=list)

    # Metadata
    source_file: Optional[str] = None
    loaded_at: datetime = Field(default_factory=datetime.now)

    @property
    def has_contacts(self) -> bool:
        return len(self.contacts) > 0

    @property
    def connection_record_count(self) -> int:
        return sum(c.connection_count for c in self.contacts)

    def get_contact(self, contact_id: str) -> Optional[Contact]:
        """Get a contact by ID."""
        for contact in self.contacts:
            if contact.id == contact_id:
                return contact
        return None


def load_contact_snapshot(path: str | Path) -> ContactSnapshot:
    """Load a contact snapshot from a JSON file.

    The file holds either a list of contacts or an object with a
    "contacts" list.

    Args:
        path: Path to the snapshot file

    Returns:
        ContactSnapshot with validated contacts

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON or has the wrong shape
        InvalidContactError: If a contact record is malformed
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Snapshot not found: {path}")

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in snapshot {path}: {e}") from e

    if isinstance(data, dict):
        records = data.get("contacts")
    else:
        records = data

    if not isinstance(records, list):
        raise ValueError(
            f"Snapshot {path} must be a list of contacts or an object with a 'contacts' list"
        )

    snapshot = ContactSnapshot(
        contacts=coerce_contacts(records),
        source_file=str(path),
    )

    if not snapshot.has_contacts:
        logger.warning(f"Snapshot {path.name} contains no contacts")

    logger.info(
        f"Contact snapshot loaded: {len(snapshot.contacts)} contacts, "
        f"{snapshot.connection_record_count} connection records"
    )

    return snapshot
