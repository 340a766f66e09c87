"""
Color model - immutable RGB triple

Every channel is clamped to 0-255 on construction, so a Color can never
hold an out-of-range value.
"""

from dataclasses import dataclass
from typing import Tuple

from utils.colors import clamp_channel, hsl_to_rgb, scale_rgb


@dataclass(frozen=True)
class Color:
    """
    RGB color value

    Examples:
        red = Color(255, 0, 0)
        c = Color.from_hsl(120, 100, 50)   # Green
        dim = c.with_brightness(50)
        r, g, b = dim.to_rgb()
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        # frozen dataclass: clamp through object.__setattr__
        object.__setattr__(self, "r", clamp_channel(int(self.r)))
        object.__setattr__(self, "g", clamp_channel(int(self.g)))
        object.__setattr__(self, "b", clamp_channel(int(self.b)))

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> 'Color':
        return cls(r, g, b)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> 'Color':
        """
        Create from HSL

        Args:
            hue: Hue in degrees (0-360)
            saturation: Saturation percent (0-100)
            lightness: Lightness percent (0-100)
        """
        return cls(*hsl_to_rgb(hue, saturation, lightness))

    # === RENDERING ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """CSS hex string, e.g. '#ff0000'"""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    # === BRIGHTNESS SCALING ===

    def with_brightness(self, brightness: float) -> 'Color':
        """
        Return new Color scaled by brightness percent (0-100, clamped)

        Example:
            Color(200, 200, 200).with_brightness(50)  # Color(100, 100, 100)
        """
        return Color(*scale_rgb(self.r, self.g, self.b, brightness))

    @staticmethod
    def black() -> 'Color':
        return Color(0, 0, 0)

    @staticmethod
    def white() -> 'Color':
        return Color(255, 255, 255)

    @staticmethod
    def red() -> 'Color':
        return Color(255, 0, 0)

    @staticmethod
    def blue() -> 'Color':
        return Color(0, 0, 255)

    def __str__(self) -> str:
        return f"Color(RGB={self.to_rgb()})"


def hsl_color(hue: float, saturation: float, lightness: float) -> Color:
    """Functional alias for Color.from_hsl"""
    return Color.from_hsl(hue, saturation, lightness)


def apply_brightness(color: Color, brightness: float) -> Color:
    """Functional alias for Color.with_brightness"""
    return color.with_brightness(brightness)
