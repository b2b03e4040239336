"""
Holdings — holding registry and persistence

Core types: Holding, RateChangeEvent
Registry: upsert/remove holdings, append rate changes, current total income
Storage: JSON load/save of the holding list
Names: ticker -> display name lookup
"""
from portfolio.holdings.schema import Holding, RateChangeEvent, now_iso
from portfolio.holdings.registry import HoldingRegistry
from portfolio.holdings.storage import HoldingStore
from portfolio.holdings.names import lookup_name, default_client

__all__ = [
    "Holding",
    "RateChangeEvent",
    "now_iso",
    "HoldingRegistry",
    "HoldingStore",
    "lookup_name",
    "default_client",
]
