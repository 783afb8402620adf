"""
wangfill - Fill Algorithms

Contains the Wang filler (single-cell and region fill).
"""

from .wang_filler import FillStats, WangFiller, find_best_match

__all__ = ["FillStats", "WangFiller", "find_best_match"]
