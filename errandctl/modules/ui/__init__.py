"""
UI Module - Black Box Interface

Purpose: Display errand output and status to the user
Interface: say(line)
Hidden: Terminal handling
"""

from .console import ConsoleUI
from .interfaces import UI

__all__ = ["ConsoleUI", "UI"]
