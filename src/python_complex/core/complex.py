from __future__ import annotations

from dataclasses import dataclass, replace
from numbers import Real
from typing import Iterable, Sequence
import math

import numpy as np
import numpy.typing as npt

from ..pint_setup import Quantity, to_radians
from ..utils.formatting import FormatProvider, resolve_provider
from .exceptions import InvalidArgumentError
from .numerics import ieee_divide
from .parsing import ParserConfig, parse_complex_text

__all__ = ["Complex"]


@dataclass
class Complex:
    """
    Complex number with a real and an imaginary part.

    Besides the two stored parts, the number exposes its polar form through
    the properties `magnitude` (alias `abs`) and `angle`. Assigning to one
    of them moves the number in the complex plane while keeping the other
    one fixed.

    Division never raises on a zero divisor: the result follows IEEE 754
    floating-point semantics and contains inf or nan. Use `is_nan()` and
    `is_zero()` to check results where this matters.

    Methods that take the number itself as the only operand can also be
    called on the class, e.g. `Complex.conjugate(c)` or `Complex.dot(a, b)`.
    """
    real: float = 0.0
    imag: float = 0.0

    def __post_init__(self) -> None:
        self.real = float(self.real)
        self.imag = float(self.imag)

    @property
    def magnitude(self) -> float:
        """
        Get or set the absolute value. Setting it scales the number along
        its current angle.
        """
        return math.sqrt(self.real * self.real + self.imag * self.imag)

    @magnitude.setter
    def magnitude(self, value: float) -> None:
        angle = self.angle
        self.real, self.imag = math.cos(angle) * value, math.sin(angle) * value

    abs = magnitude

    @property
    def angle(self) -> float:
        """
        Get or set the angle in radians, in the range (-pi, pi]. Setting it
        rotates the number at its current magnitude. A `Quantity` with an
        angle unit is also accepted when setting.
        """
        return math.atan2(self.imag, self.real)

    @angle.setter
    def angle(self, value: float | Quantity) -> None:
        angle = to_radians(value)
        magnitude = self.magnitude
        self.real, self.imag = math.cos(angle) * magnitude, math.sin(angle) * magnitude

    # --------------------------------------------------------------------------
    # Operators
    # --------------------------------------------------------------------------

    def __add__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real + other.real, self.imag + other.imag)

    def __sub__(self, other: Complex) -> Complex:
        if not isinstance(other, Complex):
            return NotImplemented
        return Complex(self.real - other.real, self.imag - other.imag)

    def __mul__(self, other: Complex | float) -> Complex:
        if isinstance(other, Complex):
            return Complex(
                self.real * other.real - self.imag * other.imag,
                self.imag * other.real + self.real * other.imag
            )
        if isinstance(other, Real):
            return Complex(self.real * other, self.imag * other)
        return NotImplemented

    def __rmul__(self, other: float) -> Complex:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: Complex | float) -> Complex:
        if isinstance(other, Complex):
            den = other.real * other.real + other.imag * other.imag
            return Complex(
                ieee_divide(self.real * other.real + self.imag * other.imag, den),
                ieee_divide(self.imag * other.real - self.real * other.imag, den)
            )
        if isinstance(other, Real):
            return Complex(
                ieee_divide(self.real, other),
                ieee_divide(self.imag, other)
            )
        return NotImplemented

    def __rtruediv__(self, other: float) -> Complex:
        if isinstance(other, Real):
            return Complex(other, 0.0) / self
        return NotImplemented

    def __abs__(self) -> float:
        return self.magnitude

    def __complex__(self) -> complex:
        return complex(self.real, self.imag)

    def __round__(self, ndigits: int | None = None) -> Complex:
        return self.round(0 if ndigits is None else ndigits)

    # --------------------------------------------------------------------------
    # Derived values
    # --------------------------------------------------------------------------

    def normalize(self) -> Complex:
        """
        Returns the complex number scaled to unit magnitude. The parts of the
        result are nan if the number is zero.
        """
        magnitude = self.magnitude
        return Complex(
            ieee_divide(self.real, magnitude),
            ieee_divide(self.imag, magnitude)
        )

    def conjugate(self) -> Complex:
        """Returns the complex conjugate."""
        return Complex(self.real, -self.imag)

    def dot(self, other: Complex) -> Complex:
        """
        Returns the complex dot product, i.e. the conjugate of this number
        times `other`. Its magnitude is the product of both magnitudes and
        its angle is the angle of `other` minus the angle of this number.
        """
        return self.conjugate() * other

    def is_zero(self) -> bool:
        """Returns True if both parts are exactly zero."""
        return self.real == 0.0 and self.imag == 0.0

    def is_nan(self) -> bool:
        """Returns True if either part is nan."""
        return math.isnan(self.real) or math.isnan(self.imag)

    def round(self, decimals: int) -> Complex:
        """
        Rounds the real and imaginary parts to `decimals` fractional digits.
        Ties are rounded to the even neighbour.

        Parameters
        ----------
        decimals: int
            Number of fractional digits, between 0 and 15.

        Returns
        -------
        Complex
        """
        if not 0 <= decimals <= 15:
            raise InvalidArgumentError(
                f"decimals must be between 0 and 15, got {decimals}."
            )
        return Complex(round(self.real, decimals), round(self.imag, decimals))

    def copy(self) -> Complex:
        return replace(self)

    # --------------------------------------------------------------------------
    # Construction
    # --------------------------------------------------------------------------

    @classmethod
    def from_angle(cls, angle: float | Quantity) -> Complex:
        """
        Returns the complex number of unit magnitude at the given angle.

        Parameters
        ----------
        angle: float | Quantity
            Angle in radians (if float).

        Returns
        -------
        Complex
        """
        rad = to_radians(angle)
        return cls(math.cos(rad), math.sin(rad))

    @classmethod
    def from_polar(cls, magnitude: float, angle: float | Quantity) -> Complex:
        """Returns the complex number with the given magnitude and angle."""
        return cls.from_angle(angle) * magnitude

    @classmethod
    def from_string(
        cls,
        text: str,
        config: ParserConfig | None = None
    ) -> Complex:
        """
        Parses text such as "3+5i" or "3+5j" into a complex number. Commas are
        read as decimal points.

        Parameters
        ----------
        text: str
            Text to parse.
        config: ParserConfig, optional
            Parser settings, see `ParserConfig`.

        Returns
        -------
        Complex

        Raises
        ------
        ParseError
            If the text does not hold one or two numeric terms.
        """
        real, imag = parse_complex_text(text, config, stacklevel=3)
        return cls(real, imag)

    @staticmethod
    def interpolate(c1: Complex, c2: Complex, p: float) -> Complex:
        """
        Interpolates between two complex numbers by the fraction `p`. Angle
        and magnitude are interpolated separately, which gives a smooth
        transition from one number to the other. `p` = 0 returns `c1` and
        `p` = 1 returns `c2`.

        The angle always moves along the shorter way round, so it never
        turns by more than pi. When one of both numbers is zero, its angle
        is undefined and the other number is simply scaled.

        Parameters
        ----------
        c1: Complex
            Start of the interpolation.
        c2: Complex
            End of the interpolation.
        p: float
            Fraction of interpolation on the closed interval [0, 1].

        Returns
        -------
        Complex
        """
        if not 0.0 <= p <= 1.0:
            raise InvalidArgumentError(
                f"p must be on the closed interval [0, 1], got {p}."
            )
        if c1.is_zero():
            return c2 * p
        if c2.is_zero():
            return c1 * (1 - p)
        angle = c1.angle + Complex.dot(c1, c2).angle * p
        magnitude = c1.magnitude + (c2.magnitude - c1.magnitude) * p
        return Complex(magnitude * math.cos(angle), magnitude * math.sin(angle))

    # --------------------------------------------------------------------------
    # Array conversion
    # --------------------------------------------------------------------------

    @classmethod
    def from_double_array(cls, array: Sequence[float] | npt.ArrayLike) -> list[Complex]:
        """
        Converts a flat array of floats to complex numbers. Each complex
        number takes two consecutive floats: the real part followed by the
        imaginary part.

        Parameters
        ----------
        array: Sequence[float] | npt.ArrayLike
            One-dimensional array with an even number of floats.

        Returns
        -------
        list[Complex]
        """
        values = np.asarray(array, dtype=float)
        if values.ndim != 1:
            raise InvalidArgumentError(
                f"Input array must be one-dimensional, got {values.ndim} "
                f"dimensions."
            )
        quotient, remainder = divmod(len(values), 2)
        if remainder != 0:
            raise InvalidArgumentError(
                f"Length of input array needs to be a multiple of two, "
                f"got {len(values)}."
            )
        return [
            cls(float(values[2 * k]), float(values[2 * k + 1]))
            for k in range(quotient)
        ]

    @staticmethod
    def to_double_array(complexes: Iterable[Complex]) -> list[float]:
        """
        Converts complex numbers to a flat list of floats, the inverse of
        `from_double_array`.
        """
        array = []
        for c in complexes:
            array.append(c.real)
            array.append(c.imag)
        return array

    @classmethod
    def from_complex_array(cls, array: Iterable[complex] | npt.ArrayLike) -> list[Complex]:
        """Converts a one-dimensional array of builtin/numpy complex numbers."""
        values = np.asarray(array, dtype=np.complex128)
        if values.ndim != 1:
            raise InvalidArgumentError(
                f"Input array must be one-dimensional, got {values.ndim} "
                f"dimensions."
            )
        return [cls(float(z.real), float(z.imag)) for z in values]

    @staticmethod
    def to_complex_array(complexes: Iterable[Complex]) -> npt.NDArray[np.complex128]:
        return np.array([complex(c) for c in complexes], dtype=np.complex128)

    # --------------------------------------------------------------------------
    # Text
    # --------------------------------------------------------------------------

    def to_string(self, provider: FormatProvider = None) -> str:
        """
        Converts the complex number to text of the form "3+5i".

        Parameters
        ----------
        provider: FormatProvider, optional
            Formats the real and imaginary part: a `NumberFormat`, a callable
            that takes a float, or a format spec like ".2f". If None, the
            decimal point of the current locale is used.

        Returns
        -------
        str
        """
        fmt = resolve_provider(provider)
        sign = "" if self.imag < 0 else "+"
        return fmt(self.real) + sign + fmt(self.imag) + "i"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return self.to_string(format_spec)
