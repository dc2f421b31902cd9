"""Data models for TinyLink."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional


def _as_utc(value: Optional[Any]) -> Optional[datetime]:
    """Coerce a stored timestamp (datetime or ISO string) to aware UTC."""
    if value is None or value == "":
        return None
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class Link:
    """Represents a short link in the store."""

    code: str
    target: str
    created_at: datetime
    clicks: int = 0
    last_clicked: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "target": self.target,
            "clicks": self.clicks,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "last_clicked": self.last_clicked.isoformat() if self.last_clicked else None,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Link":
        """Create from a store row (asyncpg Record, redis hash or dict)."""
        return cls(
            code=row["code"],
            target=row["target"],
            created_at=_as_utc(row["created_at"]),
            clicks=int(row.get("clicks") or 0),
            last_clicked=_as_utc(row.get("last_clicked")),
        )
