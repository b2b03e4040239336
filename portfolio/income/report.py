"""
Income report generator — markdown-formatted dividend income summaries.
"""
from typing import List, Sequence

import pandas as pd

from config.settings import CURRENCY_SYMBOL
from portfolio.holdings.schema import Holding
from portfolio.income.snapshots import Snapshot, round_half_up, snapshots_to_frame


def _money(value: float) -> str:
    return f"{CURRENCY_SYMBOL}{round_half_up(value):,}"


def generate_income_summary(holdings: Sequence[Holding], snapshots: Sequence[Snapshot]) -> str:
    """
    Generate a markdown income summary.

    Includes: annual total, holding list, allocation by holding, income trend.
    """
    if not holdings:
        return "# Dividend Income Summary\n\nNo holdings tracked."

    total = sum(h.income for h in holdings)

    lines = []
    lines.append("# Dividend Income Summary")
    lines.append("")
    lines.append(f"**Holdings**: {len(holdings)} | **Annual Income**: {_money(total)}")
    lines.append("")

    lines.append("## Holdings")
    lines.append("")
    lines.append("| ID | Name | Ticker | Shares | Per Share | Income |")
    lines.append("|----|------|--------|-------:|----------:|-------:|")
    for h in holdings:
        lines.append(
            f"| {h.id} | {h.display_name} | {h.ticker} | {h.quantity:g} | "
            f"{CURRENCY_SYMBOL}{h.current_rate:g} | +{_money(h.income)} |"
        )
    lines.append("")

    lines.extend(_allocation_section(holdings, total))
    lines.extend(_trend_section(snapshots))

    return "\n".join(lines)


def generate_trend_table(snapshots: Sequence[Snapshot]) -> str:
    """Markdown table of the income trend alone."""
    if not snapshots:
        return "# Dividend Income Trend\n\nNo history recorded."
    return "\n".join(["# Dividend Income Trend", ""] + _trend_section(snapshots))


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def _allocation_section(holdings: Sequence[Holding], total: float) -> List[str]:
    lines = ["## Allocation", ""]
    lines.append("| Name | Income | Share |")
    lines.append("|------|-------:|------:|")
    for h in sorted(holdings, key=lambda h: -h.income):
        share = h.income / total * 100 if total > 0 else 0.0
        lines.append(f"| {h.display_name} | {_money(h.income)} | {share:.1f}% |")
    lines.append("")
    return lines


def _trend_section(snapshots: Sequence[Snapshot]) -> List[str]:
    frame = snapshots_to_frame(snapshots)
    frame["change"] = frame["total"].astype(float).diff()

    lines = ["## Income Trend", ""]
    lines.append("| Date | Annual Income | Change |")
    lines.append("|------|--------------:|-------:|")
    for row in frame.itertuples(index=False):
        change = "" if pd.isna(row.change) else f"{int(row.change):+,}"
        lines.append(f"| {row.label} | {CURRENCY_SYMBOL}{int(row.total):,} | {change} |")
    lines.append("")
    return lines
