from __future__ import annotations

import pint
from pint.facets.plain.quantity import PlainQuantity as Quantity

UNITS = pint.UnitRegistry()

Q_ = UNITS.Quantity

unit_definitions = [
    'half_turn = pi * radian',
    'quarter_turn = 0.5 * pi * radian'
]
for ud in unit_definitions:
    UNITS.define(ud)

pint.set_application_registry(UNITS)


def to_radians(angle: float | Quantity) -> float:
    """
    Returns `angle` in radians. A plain float is taken to be in radians
    already; a `Quantity` must have an angle unit.
    """
    if isinstance(angle, Quantity):
        return angle.to('rad').m
    return float(angle)


def to_degrees(angle: float | Quantity) -> float:
    """
    Returns `angle` in degrees. A plain float is taken to be in degrees
    already; a `Quantity` must have an angle unit.
    """
    if isinstance(angle, Quantity):
        return angle.to('deg').m
    return float(angle)


__all__ = ["UNITS", "Q_", "Quantity", "to_radians", "to_degrees"]
