"""Aggregates over parsed game logs.

Both aggregates are pure folds over already-parsed games:
- feasibility: sum of ids of games possible under a capacity
- power: sum of per-game minimum cube set powers
"""
