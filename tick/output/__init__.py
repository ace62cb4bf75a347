"""
Output -- Machine-readable renderers for command data
"""

from .json import JsonRenderer

__all__ = ['JsonRenderer']
