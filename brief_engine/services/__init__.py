"""
Brief Engine Services

Collaborators consumed by the core:
- Platform dimensions lookup (read-only tables)
- LiveBrief store (abstract interface + in-memory backend)
"""

from brief_engine.services.dimensions import DimensionsLookup, PlatformDimensionsTable, PLATFORM_DIMENSIONS
from brief_engine.services.brief_store import BriefStore, InMemoryBriefStore

__all__ = [
    "DimensionsLookup",
    "PlatformDimensionsTable",
    "PLATFORM_DIMENSIONS",
    "BriefStore",
    "InMemoryBriefStore",
]
