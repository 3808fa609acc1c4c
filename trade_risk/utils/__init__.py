"""
Utility functions module.

Time helpers shared by the watchlist operations and display formatting.

Time Semantics:
- Stored timestamps (addedAt, createdAt) are epoch milliseconds, UTC
- Wall-clock time is read in one place, now_ms, so callers can inject it
"""
