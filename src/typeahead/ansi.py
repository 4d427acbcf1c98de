"""
ANSI escape sequences used by the terminal sink.
"""

from __future__ import annotations

ESC = "\033"
CSI = f"{ESC}["


def clear_screen() -> str:
    """Clear the entire screen and move cursor to top-left."""
    return f"{CSI}H{CSI}2J"
