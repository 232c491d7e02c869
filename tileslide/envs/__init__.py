# -*- coding: utf-8 -*-
"""
Input handling for the 2048 game.

This module provides the `Controller` class, which turns input events into moves on a game board.
"""

from .controller import Controller

__all__ = ["Controller"]
