"""
Conversion of text such as "3+5i", "3-5j" or "-2,5 - 4I" into the real and
imaginary part of a complex number.

The text is cut into at most two terms. A term that contains an imaginary
marker (`i` or `j`, case-insensitive) gives the imaginary part, the number in
front of the marker; any other term gives the real part.

By default `+` and `-` start a new term and stay attached to it as its sign.
A run of signs counts as one sign and a sign with nothing after it is ignored.
With `ParserConfig(legacy_signs=True)` the text is split on spaces, `+` and
`-` which are then thrown away, so that "3-5i" gives 3 and 5. This mode
exists for compatibility with data written for older readers of the format.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import re
import warnings

from .exceptions import ParseError, SignDroppedWarning

__all__ = [
    "ParserConfig",
    "parse_complex_text"
]


logger = logging.getLogger(__name__)


# whitespace, or the position in front of a sign that is not an exponent sign
_SIGNED_SPLIT = re.compile(r"\s+|(?<![eE])(?=[+-])")
_LEGACY_SPLIT = re.compile(r"[ +\-]")


@dataclass(frozen=True)
class ParserConfig:
    """
    Settings for parsing complex numbers from text.
    """
    # Replace every comma by a period before parsing ("3,5" -> "3.5").
    decimal_comma: bool = True

    # Treat "+" and "-" as plain separators that are discarded.
    legacy_signs: bool = False

    # Characters that mark the imaginary term; matched case-insensitively.
    imag_markers: str = "ij"


def parse_complex_text(
    text: str,
    config: ParserConfig | None = None,
    *,
    stacklevel: int = 2
) -> tuple[float, float]:
    """
    Returns the real and imaginary part parsed from `text`.

    Parameters
    ----------
    text: str
        Text to parse, e.g. "3+5i".
    config: ParserConfig, optional
        Parser settings. The defaults of `ParserConfig` are used if None.
    stacklevel: int, default 2
        Passed to `warnings.warn` for the `SignDroppedWarning` of the legacy
        parser. The default points at the caller of this function.

    Returns
    -------
    tuple[float, float]

    Raises
    ------
    ParseError
        If the text holds no term, more than two terms or a term that is
        not a number.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected a str, got {type(text).__name__}.")
    config = config or ParserConfig()
    source = text
    if config.decimal_comma:
        text = text.replace(",", ".")
    if config.legacy_signs:
        terms = _legacy_terms(text, stacklevel + 1)
    else:
        terms = _signed_terms(text)
    logger.debug("Tokenized %r into terms %s", source, terms)

    if len(terms) == 0 or len(terms) > 2:
        raise ParseError(
            f"Could not convert {source!r} to a complex number: expected one "
            f"or two terms, found {len(terms)}."
        )

    real, imag = 0.0, 0.0
    for term in terms:
        index = _marker_index(term, config.imag_markers)
        if index >= 0:
            imag = _to_float(term[:index], source)
        else:
            real = _to_float(term, source)
    return real, imag


def _signed_terms(text: str) -> list[str]:
    terms = []
    negative = False
    for piece in _SIGNED_SPLIT.split(text):
        body = piece.lstrip("+-")
        # runs of signs collapse into one: "+-" is "-", "--" is "+"
        if piece[:len(piece) - len(body)].count("-") % 2:
            negative = not negative
        if not body:
            continue
        terms.append(("-" if negative else "") + body)
        negative = False
    # a sign without a number after it is dropped
    return terms


def _legacy_terms(text: str, stacklevel: int) -> list[str]:
    if "-" in text:
        warnings.warn(
            f"Minus sign(s) in {text!r} are discarded by the legacy parser.",
            category=SignDroppedWarning,
            stacklevel=stacklevel
        )
    return [t for t in _LEGACY_SPLIT.split(text) if t]


def _marker_index(term: str, markers: str) -> int:
    upper = term.upper()
    found = [upper.find(m) for m in markers.upper()]
    found = [i for i in found if i >= 0]
    return min(found, default=-1)


def _to_float(number: str, source: str) -> float:
    try:
        return float(number)
    except ValueError as err:
        raise ParseError(
            f"Could not convert {source!r} to a complex number: "
            f"{number!r} is not a number."
        ) from err
