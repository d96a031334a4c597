import math
from typing import NamedTuple

# Reference white for D65, 2 degree observer
WHITE_X = 95.047
WHITE_Y = 100.0
WHITE_Z = 108.883

_POW25_7 = 25.0**7


class Lab(NamedTuple):
    L: float
    a: float
    b: float


def _linearize(c: float) -> float:
    return ((c + 0.055) / 1.055) ** 2.4 if c > 0.04045 else c / 12.92


def _f(t: float) -> float:
    return t ** (1 / 3) if t > 0.008856 else 7.787 * t + 4 / 29


def rgb_to_lab(r: int, g: int, b: int) -> Lab:
    """Convert an 8-bit sRGB triple to CIELAB (D65)."""
    lr = _linearize(r / 255)
    lg = _linearize(g / 255)
    lb = _linearize(b / 255)

    x = (lr * 0.4124 + lg * 0.3576 + lb * 0.1805) * 100
    y = (lr * 0.2126 + lg * 0.7152 + lb * 0.0722) * 100
    z = (lr * 0.0193 + lg * 0.1192 + lb * 0.9505) * 100

    fx = _f(x / WHITE_X)
    fy = _f(y / WHITE_Y)
    fz = _f(z / WHITE_Z)
    return Lab(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def _hue(b: float, ap: float) -> float:
    if b == 0 and ap == 0:
        return 0.0
    h = math.degrees(math.atan2(b, ap))
    return h + 360 if h < 0 else h


def ciede2000(lab1: Lab, lab2: Lab, kL: float = 1, kC: float = 1, kH: float = 1) -> float:
    """CIEDE2000 colour difference.

    Follows Sharma, Wu & Dalal, "The CIEDE2000 Color-Difference Formula:
    Implementation Notes, Supplementary Test Data, and Mathematical Observations" (2005).
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C1 = math.sqrt(a1 * a1 + b1 * b1)
    C2 = math.sqrt(a2 * a2 + b2 * b2)
    c7 = ((C1 + C2) / 2) ** 7
    G = 0.5 * (1 - math.sqrt(c7 / (c7 + _POW25_7)))

    ap1 = a1 * (1 + G)
    ap2 = a2 * (1 + G)
    Cp1 = math.sqrt(ap1 * ap1 + b1 * b1)
    Cp2 = math.sqrt(ap2 * ap2 + b2 * b2)
    hp1 = _hue(b1, ap1)
    hp2 = _hue(b2, ap2)

    dLp = L2 - L1
    dCp = Cp2 - Cp1

    if C1 == 0 or C2 == 0:
        dhp = 0.0
    elif abs(hp1 - hp2) <= 180:
        dhp = hp2 - hp1
    elif hp2 <= hp1:
        dhp = hp2 - hp1 + 360
    else:
        dhp = hp2 - hp1 - 360
    dHp = 2 * math.sqrt(Cp1 * Cp2) * math.sin(math.radians(dhp) / 2)

    Lp = (L1 + L2) / 2
    Cp = (Cp1 + Cp2) / 2
    if C1 == 0 or C2 == 0:
        hp = hp1 + hp2
    elif abs(hp1 - hp2) <= 180:
        hp = (hp1 + hp2) / 2
    elif hp1 + hp2 < 360:
        hp = (hp1 + hp2 + 360) / 2
    else:
        hp = (hp1 + hp2 - 360) / 2

    T = (
        1
        - 0.17 * math.cos(math.radians(hp - 30))
        + 0.24 * math.cos(math.radians(2 * hp))
        + 0.32 * math.cos(math.radians(3 * hp + 6))
        - 0.20 * math.cos(math.radians(4 * hp - 63))
    )
    l50 = (Lp - 50) ** 2
    SL = 1 + 0.015 * l50 / math.sqrt(20 + l50)
    SC = 1 + 0.045 * Cp
    SH = 1 + 0.015 * Cp * T

    cp7 = Cp**7
    d_theta = 30 * math.exp(-(((hp - 275) / 25) ** 2))
    RT = -2 * math.sqrt(cp7 / (cp7 + _POW25_7)) * math.sin(math.radians(2 * d_theta))

    dL = dLp / (kL * SL)
    dC = dCp / (kC * SC)
    dH = dHp / (kH * SH)
    return math.sqrt(dL * dL + dC * dC + dH * dH + RT * dC * dH)


def colour_distance(rgb1: tuple[int, int, int], rgb2: tuple[int, int, int]) -> float:
    """Perceptual distance between two RGB triples."""
    return ciede2000(rgb_to_lab(*rgb1), rgb_to_lab(*rgb2))
