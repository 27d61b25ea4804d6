# -*- coding: utf-8 -*-
"""
Rendering helpers for the 2048 game.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]
