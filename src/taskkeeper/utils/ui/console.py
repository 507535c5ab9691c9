"""Console utilities for taskkeeper."""

from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Get a Rich Console instance for consistent output formatting."""
    return Console(highlight=highlight)


@contextmanager
def color_output(enabled: bool) -> Iterator[Console]:
    """Turn colour on or off on the shared console for the duration of a block."""
    console = get_console()
    previous = console.no_color
    console.no_color = not enabled
    try:
        yield console
    finally:
        console.no_color = previous
