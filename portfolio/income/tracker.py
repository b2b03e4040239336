"""
Income tracker — ties the registry, the store, the snapshot rebuild and the
report together.

Every mutation runs the same cycle: mutate -> save -> rebuild snapshots ->
render. Nothing is updated incrementally.
"""
import logging
from typing import Any, Callable, List, Optional, Sequence

from portfolio.holdings.names import lookup_with_profile
from portfolio.holdings.registry import HoldingRegistry
from portfolio.holdings.schema import Holding
from portfolio.holdings.storage import HoldingStore
from portfolio.income.report import generate_income_summary
from portfolio.income.snapshots import Snapshot, assemble_snapshots

logger = logging.getLogger(__name__)

Renderer = Callable[[Sequence[Holding], Sequence[Snapshot]], Any]


class IncomeTracker:

    def __init__(
        self,
        store: HoldingStore,
        renderer: Renderer = generate_income_summary,
        name_lookup: Optional[Callable[[str], Optional[str]]] = lookup_with_profile,
        registry: Optional[HoldingRegistry] = None,
    ):
        self.store = store
        self.renderer = renderer
        self.name_lookup = name_lookup
        if registry is None:
            registry = HoldingRegistry(store.load() or [])
        self.registry = registry
        self.last_output: Any = None
        logger.info(f"Loaded {len(self.registry)} holdings")

    def holdings(self) -> List[Holding]:
        return self.registry.holdings()

    def total_income(self) -> float:
        return self.registry.total_income()

    def snapshots(self) -> List[Snapshot]:
        return assemble_snapshots(self.registry.holdings())

    def render(self) -> Any:
        """Hand the current holdings and trend to the renderer."""
        holdings = self.registry.holdings()
        self.last_output = self.renderer(holdings, assemble_snapshots(holdings))
        return self.last_output

    def submit(self, ticker: str, name: str, quantity, rate) -> Optional[Holding]:
        """Add or update a holding. A blank name is filled from the lookup, else the ticker."""
        name = (name or "").strip()
        if not name and self.name_lookup is not None:
            name = self.name_lookup(ticker) or ""

        holding = self.registry.upsert(ticker, name, quantity, rate)
        if holding is None:
            return None
        self._commit()
        return holding

    def delete(self, holding_id: str) -> Optional[Holding]:
        """Remove a holding by id. Unknown ids change nothing but still re-render."""
        removed = self.registry.remove(holding_id)
        self._commit()
        return removed

    def _commit(self) -> None:
        self.store.save(self.registry.holdings())
        self.render()
