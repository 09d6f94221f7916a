"""Eunoia: achievement and streak engine for the Eunoia journal"""

__version__ = "1.0.0"
