"""Aggregation core for leaderboards and class distributions.

- leaderboard: fold encounter records into per-player aggregates
- distribution: rank class statistics on a shared box/whisker axis
Forbidden: HTTP calls, persistence, module-level state
"""
