"""
Data Processing Pipeline

Components for loading contact snapshots and writing analytics reports.
"""

from src.pipeline.ingest import load_contact_snapshot, ContactSnapshot
from src.pipeline.outputs import generate_outputs, OutputGenerator

__all__ = [
    "load_contact_snapshot",
    "ContactSnapshot",
    "generate_outputs",
    "OutputGenerator",
]
