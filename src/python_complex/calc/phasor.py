import math

from ..pint_setup import Quantity, to_degrees, to_radians
from ..core import Complex

__all__ = [
    "phasor",
    "phasor_rad",
    "polar",
    "phasor_from_cos",
    "cosphi"
]


def _magnitude(magnitude: float | Quantity) -> float:
    if isinstance(magnitude, Quantity):
        return magnitude.m
    return magnitude


def phasor(magnitude: float | Quantity, angle_deg: float | Quantity) -> Complex:
    """Return a complex number for a phasor (angle in degrees if float)."""
    rad = math.radians(to_degrees(angle_deg))
    return Complex.from_polar(_magnitude(magnitude), rad)


def phasor_rad(magnitude: float | Quantity, angle_rad: float | Quantity) -> Complex:
    """Return a complex number for a phasor (angle in radians if float)."""
    return Complex.from_polar(_magnitude(magnitude), to_radians(angle_rad))


def polar(z: Complex) -> tuple[float, float]:
    """Return (magnitude, angle_deg)."""
    return z.magnitude, math.degrees(z.angle)


def phasor_from_cos(
    magnitude: float | Quantity,
    cos_phi: float,
    *,
    lagging: bool = True
) -> Complex:
    """
    Create a phasor when only magnitude and cos(phi) are given.
    lagging=True  negative angle (inductive, current behind voltage)
    lagging=False positive angle (capacitive, current ahead of voltage)
    """
    phi = math.acos(cos_phi)
    angle = -phi if lagging else +phi
    return phasor_rad(magnitude, angle)


def cosphi(z: Complex) -> float:
    """Return cos(phi) for a complex phasor."""
    return math.cos(z.angle)
