"""RGB to xy conversion for the bridge's native colour space."""


def _gamma(value: float) -> float:
    return pow((value + 0.055) / (1.0 + 0.055), 2.4) if value > 0.04045 else value / 12.92


def _channel(value: float) -> float:
    return _gamma(min(max(value, 0), 255) / 255)


def rgb_to_xy(red: float, green: float, blue: float) -> tuple[float, float]:
    """Convert an 8-bit RGB triple into xy chromaticity coordinates.

    Out-of-range channels are clamped to 0-255 rather than rejected. Black
    has no chromaticity and maps to (0.0, 0.0).
    """
    r, g, b = _channel(red), _channel(green), _channel(blue)

    # Wide RGB D65
    X = r * 0.664511 + g * 0.154324 + b * 0.162028
    Y = r * 0.283881 + g * 0.668433 + b * 0.047685
    Z = r * 0.000088 + g * 0.072310 + b * 0.986039

    total = X + Y + Z
    if total == 0:
        return 0.0, 0.0
    return X / total, Y / total
