# Type alias for RGB colors
Color = tuple[int, int, int]


def from_hex(value: str) -> Color:
    """Parse a ``#rrggbb`` or ``#rgb`` string into an RGB tuple."""
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {value!r}")
    try:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError as e:
        raise ValueError(f"Invalid hex color: {value!r}") from e


def to_hex(color: Color) -> str:
    """Format an RGB tuple as a lowercase ``#rrggbb`` string."""
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def coerce(value: str | Color) -> Color:
    """Accept either a hex string or an RGB tuple and return an RGB tuple."""
    if isinstance(value, str):
        return from_hex(value)
    r, g, b = value
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"Color channel out of range: {value!r}")
    return (int(r), int(g), int(b))
