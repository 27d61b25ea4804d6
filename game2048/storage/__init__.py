# -*- coding: utf-8 -*-
"""
Persistence of the best score.
"""

from .scores import JsonScoreStore, MemoryScoreStore, ScoreStore, load_best_score

__all__ = ["ScoreStore", "MemoryScoreStore", "JsonScoreStore", "load_best_score"]
