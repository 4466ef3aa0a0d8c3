"""ANSI styling for terminal output."""

from __future__ import annotations

from dataclasses import dataclass

GREEN = "\033[1;32m"
BLUE = "\033[1;34m"
CYAN = "\033[1;36m"
RED = "\033[1;31m"
YELLOW = "\033[1;33m"
MAGENTA = "\033[1;35m"
BOLD = "\033[1m"
RESET = "\033[0m"


@dataclass(frozen=True)
class Palette:
    """Escape codes used by the renderer; all empty when color is off."""

    green: str = GREEN
    blue: str = BLUE
    cyan: str = CYAN
    red: str = RED
    yellow: str = YELLOW
    magenta: str = MAGENTA
    bold: str = BOLD
    reset: str = RESET

    @classmethod
    def plain(cls) -> "Palette":
        return cls(**{name: "" for name in cls.__dataclass_fields__})

    @classmethod
    def for_terminal(cls, use_color: bool) -> "Palette":
        return cls() if use_color else cls.plain()


__all__ = ["Palette"]
