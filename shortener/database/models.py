"""Data models for URL shortener."""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _parse_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return _as_utc(value)
    return _as_utc(datetime.fromisoformat(value))


@dataclass
class URLRecord:
    """Represents a stored URL mapping."""

    original_url: str
    short_code: str
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None
    access_count: int = 0
    id: Optional[str] = None

    def __post_init__(self):
        self.created_at = _as_utc(self.created_at)
        self.updated_at = _as_utc(self.updated_at) if self.updated_at else self.created_at

        if self.access_count < 0:
            raise ValueError("access_count must be non-negative")
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not precede created_at")

    def with_original_url(self, original_url: str, now: Optional[datetime] = None) -> "URLRecord":
        """Copy of this record pointing at a new URL, with updated_at bumped."""
        now = _as_utc(now or utcnow())
        return replace(
            self,
            original_url=original_url,
            updated_at=max(now, self.created_at),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "original_url": self.original_url,
            "short_code": self.short_code,
            "access_count": self.access_count,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "URLRecord":
        """Create from dictionary."""
        record_id = data.get("id")
        return cls(
            id=str(record_id) if record_id is not None else None,
            original_url=data["original_url"],
            short_code=data["short_code"],
            access_count=data.get("access_count", 0),
            created_at=_parse_datetime(data["created_at"]),
            updated_at=_parse_datetime(data["updated_at"]) if data.get("updated_at") else None,
        )
