"""
Holdings data models — Holding, RateChangeEvent

Uses dataclasses for zero-dependency type safety.
Serialized field names follow the stored record shape:
    {id, ticker, name, quantity, dividendPerShare, createdAt, updatedAt,
     history: [{date, dividend}, ...]}
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List


def now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-01T09:30:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


# ---------------------------------------------------------------------------
# Rate Change Event
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RateChangeEvent:
    """Payout rate in effect from `timestamp` until superseded by a later event."""

    timestamp: str
    rate: float

    def to_dict(self) -> dict:
        return {"date": self.timestamp, "dividend": self.rate}

    @classmethod
    def from_dict(cls, data: dict) -> "RateChangeEvent":
        return cls(
            timestamp=data.get("date", ""),
            rate=float(data.get("dividend", 0.0)),
        )


# ---------------------------------------------------------------------------
# Holding
# ---------------------------------------------------------------------------

@dataclass
class Holding:
    """A tracked equity position with its per-share payout rate and change log."""

    # Identity
    id: str
    ticker: str
    display_name: str = ""

    # Position
    quantity: float = 0.0
    current_rate: float = 0.0      # payout per share

    # Timestamps (ISO-8601 UTC, millisecond precision)
    created_at: str = ""
    updated_at: str = ""

    # Append-only rate change log, insertion order
    history: List[RateChangeEvent] = field(default_factory=list)

    def __post_init__(self):
        if not self.display_name:
            self.display_name = self.ticker

    @property
    def income(self) -> float:
        """Expected payout at the current rate."""
        return self.quantity * self.current_rate

    def record_rate(self, rate: float, timestamp: str) -> bool:
        """
        Append a RateChangeEvent if `rate` differs from the current rate.

        Returns True when an event was appended. Past events are never edited.
        """
        if rate == self.current_rate:
            return False
        self.history.append(RateChangeEvent(timestamp=timestamp, rate=rate))
        self.current_rate = rate
        return True

    def to_dict(self) -> dict:
        """Serialize to JSON-friendly dict."""
        return {
            "id": self.id,
            "ticker": self.ticker,
            "name": self.display_name,
            "quantity": self.quantity,
            "dividendPerShare": self.current_rate,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "history": [e.to_dict() for e in self.history],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Holding":
        """Deserialize from dict. Missing history loads as empty."""
        ticker = str(data.get("ticker", "")).strip().upper()
        return cls(
            id=str(data.get("id", "")),
            ticker=ticker,
            display_name=data.get("name") or ticker,
            quantity=float(data.get("quantity", 0.0)),
            current_rate=float(data.get("dividendPerShare", 0.0)),
            created_at=data.get("createdAt", ""),
            updated_at=data.get("updatedAt", ""),
            history=[RateChangeEvent.from_dict(h) for h in data.get("history") or []],
        )
