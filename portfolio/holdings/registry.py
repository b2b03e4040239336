"""
Holding registry — owns the holding set and each holding's rate change log.

Callers go through upsert / remove / total_income; the underlying list is
never handed out directly (holdings() returns a copy).
"""
import logging
import math
import time
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from portfolio.holdings.schema import Holding, RateChangeEvent, now_iso

logger = logging.getLogger(__name__)


def _parse_number(value) -> Optional[float]:
    """float(value), or None when it does not parse. NaN and infinities count as unparseable."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


class HoldingRegistry:
    """In-process collection of holdings keyed by ticker."""

    def __init__(
        self,
        holdings: Optional[Iterable[Holding]] = None,
        clock: Callable[[], str] = now_iso,
    ):
        self._holdings: List[Holding] = list(holdings or [])
        self._clock = clock

    def __len__(self) -> int:
        return len(self._holdings)

    def __iter__(self) -> Iterator[Holding]:
        return iter(list(self._holdings))

    def holdings(self) -> List[Holding]:
        """Snapshot of the current holdings, insertion order."""
        return list(self._holdings)

    def get(self, ticker: str) -> Optional[Holding]:
        """Look up a holding by ticker (case-insensitive)."""
        ticker = (ticker or "").strip().upper()
        for h in self._holdings:
            if h.ticker == ticker:
                return h
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def upsert(self, ticker: str, display_name: str, quantity, rate) -> Optional[Holding]:
        """
        Insert a new holding or update the one with the same ticker.

        A RateChangeEvent is appended only when `rate` differs from the
        stored current rate. Unparseable quantity/rate or an empty ticker
        make this a no-op (returns None); validation belongs to the caller.
        """
        ticker = (ticker or "").strip().upper()
        qty = _parse_number(quantity)
        new_rate = _parse_number(rate)
        if not ticker or qty is None or new_rate is None:
            logger.debug(f"Ignoring upsert with invalid input: {ticker!r} {quantity!r} {rate!r}")
            return None

        name = (display_name or "").strip() or ticker
        now = self._clock()

        existing = self.get(ticker)
        if existing is not None:
            if existing.record_rate(new_rate, now):
                logger.info(f"{ticker}: rate changed to {new_rate}")
            existing.display_name = name
            existing.quantity = qty
            # updated_at never moves backwards
            existing.updated_at = max(existing.updated_at, now)
            return existing

        holding = Holding(
            id=self._next_id(),
            ticker=ticker,
            display_name=name,
            quantity=qty,
            current_rate=new_rate,
            created_at=now,
            updated_at=now,
            history=[RateChangeEvent(timestamp=now, rate=new_rate)],
        )
        self._holdings.append(holding)
        logger.info(f"{ticker}: added {qty} @ {new_rate}")
        return holding

    def remove(self, holding_id: str) -> Optional[Holding]:
        """Delete the holding with `holding_id`. Absent ids are a no-op."""
        for i, h in enumerate(self._holdings):
            if h.id == holding_id:
                removed = self._holdings.pop(i)
                logger.info(f"{removed.ticker}: removed")
                return removed
        logger.debug(f"Holding {holding_id} not found for removal")
        return None

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def total_income(self) -> float:
        """Sum of quantity * current_rate across all holdings."""
        return sum(h.quantity * h.current_rate for h in self._holdings)

    def allocation(self) -> List[Tuple[Holding, float]]:
        """(holding, income at current rate) pairs, insertion order."""
        return [(h, h.income) for h in self._holdings]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _next_id(self) -> str:
        """Millisecond epoch id, bumped until unique within the registry."""
        taken = {h.id for h in self._holdings}
        candidate = int(time.time() * 1000)
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)
