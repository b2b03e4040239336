"""
Income — dividend income trend and reporting

Snapshots: rebuild portfolio-wide totals from per-holding rate change logs
Report: markdown income summary and trend table
Tracker: mutate -> save -> rebuild -> render cycle
"""
from portfolio.income.snapshots import (
    Snapshot,
    assemble_snapshots,
    effective_rate,
    snapshots_to_frame,
)
from portfolio.income.report import generate_income_summary, generate_trend_table
from portfolio.income.tracker import IncomeTracker

__all__ = [
    "Snapshot",
    "assemble_snapshots",
    "effective_rate",
    "snapshots_to_frame",
    "generate_income_summary",
    "generate_trend_table",
    "IncomeTracker",
]
