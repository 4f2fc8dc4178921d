# particle_engine/utils/color.py

class Color:
    """
    Represents an RGB color with optional Alpha (RGBA).
    Values are stored as integers 0-255.
    """

    def __init__(self, r=0, g=0, b=0, a=255):
        self.r = self._clamp(r)
        self.g = self._clamp(g)
        self.b = self._clamp(b)
        self.a = self._clamp(a)

    @staticmethod
    def _clamp(val):
        return max(0, min(255, int(val)))

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"

    def __eq__(self, other):
        if not isinstance(other, Color):
            return False
        return self.to_rgba() == other.to_rgba()

    def to_rgb(self):
        """Returns the color as a (R, G, B) tuple."""
        return (self.r, self.g, self.b)

    def to_rgba(self):
        """Returns the color as a (R, G, B, A) tuple."""
        return (self.r, self.g, self.b, self.a)

    def with_alpha(self, a):
        return Color(self.r, self.g, self.b, a)

    @classmethod
    def from_hex(cls, hex_str: str):
        """Creates a Color from a hex string (#RRGGBB or #RRGGBBAA)."""
        hex_str = hex_str.lstrip('#')
        if len(hex_str) not in (6, 8):
            raise ValueError(f"Invalid hex color string format: {hex_str}")
        channels = [int(hex_str[i:i + 2], 16) for i in range(0, len(hex_str), 2)]
        return cls(*channels)

    # --- Predefined Colors ---
    @classmethod
    def gray(cls): return cls(128, 128, 128)
    @classmethod
    def clear(cls): return cls(0, 0, 0, 0)
