"""
Number formatting used when complex numbers are converted to text.

A format provider is anything that turns a float into a string: a
`NumberFormat`, a plain callable or a format spec such as ".3f". `None`
stands for the conventions of the current locale.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union
import locale
import math
import re

__all__ = [
    "NumberFormat",
    "FormatProvider",
    "INVARIANT",
    "current_locale",
    "resolve_provider",
    "shortest_repr"
]


# integer digits of the number, ahead of any fraction or exponent
_INT_DIGITS = re.compile(r"\d+")


def shortest_repr(value: float) -> str:
    """
    Returns the shortest text that reads back as `value`. Integral values
    are written without a fractional part, e.g. 3.0 -> "3".
    """
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _group_digits(digits: str, sep: str) -> str:
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return sep.join(groups)


@dataclass(frozen=True)
class NumberFormat:
    """
    Culture-like description of how a float is rendered.

    Parameters
    ----------
    decimal_point: str, default "."
        Separator between the integer and the fractional digits.
    thousands_sep: str, default ""
        Separator between groups of three integer digits. When empty, digits
        are only grouped if `spec` asks for it (e.g. ",.2f"), and the groups
        are then separated by "." if `decimal_point` is "," or by "," else.
    spec: str, default ""
        Format spec passed to `format()`. When empty, the shortest
        round-trip representation is used.
    """
    decimal_point: str = "."
    thousands_sep: str = ""
    spec: str = ""

    def __call__(self, value: float) -> str:
        value = float(value)
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if self.spec:
            text = format(value, self.spec)
        else:
            text = shortest_repr(value)
        return self._localize(text)

    def _localize(self, text: str) -> str:
        grouped = "," in text
        if self.thousands_sep and not grouped:
            text = _INT_DIGITS.sub(lambda m: _group_digits(m.group(), ","), text, count=1)
            grouped = True
        mapping = {".": self.decimal_point}
        if grouped:
            mapping[","] = self.thousands_sep or ("." if self.decimal_point == "," else ",")
        return "".join(mapping.get(ch, ch) for ch in text)


INVARIANT = NumberFormat()


FormatProvider = Union[NumberFormat, Callable[[float], str], str, None]


def current_locale() -> NumberFormat:
    """
    Returns a `NumberFormat` with the decimal point of the locale that is
    currently set for the process (see `locale.setlocale`).
    """
    conv = locale.localeconv()
    return NumberFormat(decimal_point=conv["decimal_point"] or ".")


def resolve_provider(provider: FormatProvider) -> Callable[[float], str]:
    """
    Turns any accepted kind of format provider into a callable that formats
    a single float.
    """
    if provider is None:
        return current_locale()
    if isinstance(provider, str):
        return NumberFormat(spec=provider)
    if callable(provider):
        return provider
    raise TypeError(
        f"Expected a NumberFormat, a callable or a format spec, "
        f"got {type(provider).__name__}."
    )
