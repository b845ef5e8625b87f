"""
Commands package - Exports all command groups
"""

from . import catalog, generate

__all__ = ["catalog", "generate"]
