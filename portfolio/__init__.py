"""
Dividend Portfolio — holdings and dividend income tracking

Modules:
- holdings: holding registry (upsert/remove, rate change log, JSON store, name lookup)
- income: income trend reconstruction, reports, tracker
"""
