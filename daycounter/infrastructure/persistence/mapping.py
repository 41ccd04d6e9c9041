"""Event ↔ storage record mapping shared by the durable adapters.

Records are flat: id, name, date (ISO calendar date) and created_at
(ISO 8601 timestamp with offset).
"""

from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from daycounter.domain.countdown.core.entities.event import Event


def datetime_to_iso(dt: datetime) -> str:
    """
    Convert datetime to ISO string for storage.

    Raises:
        ValueError: If dt is naive
    """
    if dt.tzinfo is None:
        raise ValueError("Datetime must be timezone-aware")
    return dt.isoformat()


def iso_to_datetime(iso_str: str) -> datetime:
    """Parse an ISO timestamp; naive values are assumed UTC."""
    if iso_str.endswith("Z"):
        iso_str = iso_str[:-1] + "+00:00"
    dt = datetime.fromisoformat(iso_str)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def event_to_record(event: Event) -> Dict[str, Any]:
    return {
        "id": event.id,
        "name": event.name,
        "date": event.date,
        "created_at": datetime_to_iso(event.created_at),
    }


def record_to_event(record: Mapping[str, Any]) -> Event:
    """
    Build an Event from a stored record.

    Raises:
        ValueError: If the record is missing fields or violates Event invariants
    """
    try:
        return Event(
            id=record["id"],
            name=record["name"],
            date=record["date"],
            created_at=iso_to_datetime(record["created_at"]),
        )
    except KeyError as e:
        raise ValueError(f"Missing required field in stored event: {e}") from e
    except (TypeError, AttributeError) as e:
        raise ValueError(f"Malformed stored event: {e}") from e
