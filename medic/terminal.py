"""
Terminal capability detection.

Resolves a color choice into a plain yes/no for the renderer, which
never inspects the environment itself.
"""

import sys
from typing import Optional, TextIO

from rich.console import Console

from .config.models import ColorChoice


def styling_enabled(choice: ColorChoice = ColorChoice.AUTO, stream: Optional[TextIO] = None) -> bool:
    """
    Decide whether output to a stream should be styled.

    Args:
        choice: Requested color mode
        stream: Output stream (defaults to stdout)

    Returns:
        True if ANSI styling should be used
    """
    choice = ColorChoice(choice)
    if choice is ColorChoice.ALWAYS:
        return True
    if choice is ColorChoice.NEVER:
        return False

    # rich honors NO_COLOR, FORCE_COLOR and TERM=dumb here
    console = Console(file=stream or sys.stdout)
    return console.is_terminal and console.color_system is not None and not console.no_color
