"""Terminal color models."""

from dataclasses import dataclass

RESET = "\x1b[0m"


@dataclass(frozen=True)
class Color:
    """An RGB color stop for 24-bit ANSI terminal output."""

    r: int
    g: int
    b: int

    @property
    def escape(self) -> str:
        """Foreground color escape sequence."""
        return f"\x1b[38;2;{self.r};{self.g};{self.b}m"


WHITE = Color(255, 255, 255)
DARK_RED = Color(220, 0, 0)
