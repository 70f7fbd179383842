"""
Usage analytics.

Responsibilities:
- Keep an in-memory log of search and detection events.
- Summarise the log into an aggregate report.
"""
