"""
Income snapshots — portfolio-wide payout totals reconstructed from each
holding's rate change log.

One snapshot per distinct event timestamp across all holdings. At each
timestamp a holding contributes quantity * (latest rate recorded at or before
that timestamp), falling back to its current rate when nothing qualifies yet.
That fallback overstates early points for holdings added later; it is kept
as-is.

Events sharing an identical timestamp resolve last-inserted-wins.
"""
import math
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Sequence

import pandas as pd

from config.settings import TREND_DATE_FORMAT
from portfolio.holdings.schema import Holding, now_iso


@dataclass(frozen=True)
class Snapshot:
    """One point of the income trend."""

    timestamp: str
    total: int
    label: str

    def to_dict(self) -> dict:
        return {"timestamp": self.timestamp, "label": self.label, "total": self.total}


def round_half_up(value: float) -> int:
    """Nearest whole unit, halves rounded up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def date_label(timestamp: str) -> str:
    """YYYY/MM/DD label for an ISO-8601 timestamp."""
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp[:10].replace("-", "/")
    return dt.strftime(TREND_DATE_FORMAT)


def effective_rate(holding: Holding, timestamp: str) -> float:
    """Rate of the latest event at or before `timestamp`, else the current rate."""
    best = None
    for event in holding.history:
        if event.timestamp <= timestamp and (best is None or event.timestamp >= best.timestamp):
            best = event
    return best.rate if best is not None else holding.current_rate


def assemble_snapshots(holdings: Sequence[Holding], now: Optional[str] = None) -> List[Snapshot]:
    """
    Rebuild the full income trend from the holdings' histories.

    Args:
        holdings: current holdings (read only)
        now: timestamp used for the single synthetic point when holdings
             exist but none has any history; defaults to the current time

    Returns:
        Snapshots in ascending timestamp order. Empty when there are no holdings.
    """
    if not holdings:
        return []

    timestamps = sorted({e.timestamp for h in holdings for e in h.history})
    if not timestamps:
        timestamps = [now or now_iso()]

    # Each history sorted once (stable, so ties keep insertion order), then a
    # forward-only cursor per holding across the global timestamp list.
    ordered = [sorted(h.history, key=lambda e: e.timestamp) for h in holdings]
    cursors = [0] * len(holdings)
    in_force: List[Optional[float]] = [None] * len(holdings)

    snapshots = []
    for ts in timestamps:
        total = 0.0
        for i, holding in enumerate(holdings):
            events = ordered[i]
            while cursors[i] < len(events) and events[cursors[i]].timestamp <= ts:
                in_force[i] = events[cursors[i]].rate
                cursors[i] += 1
            rate = in_force[i] if in_force[i] is not None else holding.current_rate
            total += holding.quantity * rate
        snapshots.append(Snapshot(timestamp=ts, total=round_half_up(total), label=date_label(ts)))
    return snapshots


def snapshots_to_frame(snapshots: Sequence[Snapshot]) -> pd.DataFrame:
    """Trend as a DataFrame with columns timestamp, label, total."""
    return pd.DataFrame(
        [s.to_dict() for s in snapshots],
        columns=["timestamp", "label", "total"],
    )
