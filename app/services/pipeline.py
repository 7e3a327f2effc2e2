# ============================================================================
# FILE: app/services/pipeline.py
# ============================================================================
"""
Client-side sort and join stages applied after documents are fetched.

Storage only filters; ordering and playlist-name enrichment happen here so
they behave the same regardless of what the backend can index.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping

from app.db.store import Document

UNKNOWN_PLAYLIST = "Unknown"

# Records without a usable timestamp sort as the earliest possible value
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

def timestamp_of(data: Mapping[str, Any], field: str = "created_at") -> datetime:
    value = data.get(field)
    if not isinstance(value, datetime):
        return EPOCH
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

def sort_by_created(docs: Iterable[Document], descending: bool = False) -> List[Document]:
    """Stable sort on created_at; ties keep storage order"""
    return sorted(docs, key=lambda d: timestamp_of(d.data), reverse=descending)

def playlist_names(playlists: Iterable[Document]) -> Dict[str, str]:
    return {p.id: p.data.get("name", UNKNOWN_PLAYLIST) for p in playlists}

def annotate_playlist_names(items: Iterable[Document], names: Mapping[str, str]) -> List[Dict[str, Any]]:
    """Flatten item documents and attach the owning playlist's name"""
    annotated = []
    for item in items:
        record = item.to_dict()
        record["playlist_name"] = names.get(item.data.get("playlist_id"), UNKNOWN_PLAYLIST)
        annotated.append(record)
    return annotated

def chunked(values: List[Any], size: int) -> List[List[Any]]:
    if size < 1:
        raise ValueError("chunk size must be positive")
    return [values[i:i + size] for i in range(0, len(values), size)]
