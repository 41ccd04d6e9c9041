"""EventId value object.

Opaque identifier for Event entities. New identifiers are random 128-bit
UUIDs rendered as 32 hex characters; identifiers read back from storage
are accepted as-is, whatever scheme produced them.
"""

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class EventId:
    """Value object for Event ID.

    Examples:
        >>> event_id = EventId.generate()
        >>> len(str(event_id))
        32

        >>> EventId.from_string("kx3f9a0b2c") == EventId("kx3f9a0b2c")
        True
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("EventId cannot be empty")

    @classmethod
    def generate(cls) -> "EventId":
        """Generate a new collision-resistant event ID."""
        return cls(uuid4().hex)

    @classmethod
    def from_string(cls, id_str: str) -> "EventId":
        """Wrap an existing identifier.

        Raises:
            ValueError: If id_str is empty.
        """
        return cls(id_str)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EventId({self.value})"
