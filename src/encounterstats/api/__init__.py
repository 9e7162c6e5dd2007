"""API module for encounterstats.

api layer:
- Validates upstream payload shapes
- Returns leaderboard and distribution view models for the UI
- Forbidden: upstream fetching, persistence, aggregation arithmetic
"""
