"""GridStyle - Line color and width for drawing a grid.

The zoom gating in BaseGrid stores a style without interpreting it; the
renderer reads color and width from it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from tile_grid.constants import StyleConfig


@dataclass(frozen=True)
class Color:
    """RGBA color with 0-255 channels and 0.0-1.0 alpha.

    Example:
        color = Color.from_hex("#FF000080")  # half transparent red
    """

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: float = 1.0

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color {name} must be in 0-255, got {value}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Color alpha must be in 0.0-1.0, got {self.alpha}")

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse #RGB, #RRGGBB or #RRGGBBAA (leading # optional)."""
        digits = value.strip().lstrip("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex color: '{value}'")
        try:
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError as e:
            raise ValueError(f"Invalid hex color: '{value}'") from e
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return cls(red=channels[0], green=channels[1], blue=channels[2], alpha=alpha)

    @property
    def hex(self) -> str:
        """#RRGGBB, or #RRGGBBAA when not fully opaque."""
        base = f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        if self.alpha < 1.0:
            return f"{base}{round(self.alpha * 255):02X}"
        return base

    @property
    def rgba(self) -> list[int]:
        """[r, g, b, a] with alpha scaled to 0-255."""
        return [self.red, self.green, self.blue, round(self.alpha * 255)]


@dataclass
class GridStyle:
    """Style of grid lines.

    Attributes:
        color: Line color
        width: Line width in pixels
    """

    color: Color = field(default_factory=lambda: Color.from_hex(StyleConfig.DEFAULT_COLOR))
    width: float = StyleConfig.DEFAULT_WIDTH_PX

    def __post_init__(self) -> None:
        if self.width < StyleConfig.MIN_WIDTH_PX:
            raise ValueError(f"GridStyle width must be >= {StyleConfig.MIN_WIDTH_PX}, got {self.width}")

    @classmethod
    def default(cls) -> GridStyle:
        """Fresh style with the default color and width."""
        return cls()

    @classmethod
    def style(cls, color: str | Color, width: float = StyleConfig.DEFAULT_WIDTH_PX) -> GridStyle:
        """Create a style from a Color or hex string."""
        if isinstance(color, str):
            color = Color.from_hex(color)
        return cls(color=color, width=width)
