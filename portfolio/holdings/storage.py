"""
Holdings store — JSON persistence for the holding list.

Absence of the file is a valid empty state; load() returns None for it.
"""
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from config.settings import HOLDINGS_FILE
from portfolio.holdings.schema import Holding

logger = logging.getLogger(__name__)


class HoldingStore:
    """Reads and writes the holding list as a JSON array."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else HOLDINGS_FILE

    def load(self) -> Optional[List[Holding]]:
        """Load all holdings, or None when nothing has been stored yet."""
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return [Holding.from_dict(d) for d in data]
        except (json.JSONDecodeError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Failed to load holdings from {self.path}: {e}")
            return None

    def save(self, holdings: Sequence[Holding]) -> None:
        """Persist holdings to the JSON file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([h.to_dict() for h in holdings], f, indent=2, ensure_ascii=False)
        logger.info(f"Saved {len(holdings)} holdings to {self.path}")
