"""
python_complex

Complex number value type with polar access, interpolation, parsing and
array conversion.
"""
from .pint_setup import UNITS, Q_, Quantity
from .core import (
    Complex,
    InvalidArgumentError,
    ParseError,
    SignDroppedWarning,
    ParserConfig
)
from .utils.formatting import NumberFormat, INVARIANT

from . import calc
from . import core
from . import utils


__all__ = [
    "UNITS",
    "Q_",
    "Quantity",
    "Complex",
    "InvalidArgumentError",
    "ParseError",
    "SignDroppedWarning",
    "ParserConfig",
    "NumberFormat",
    "INVARIANT",
    "calc",
    "core",
    "utils"
]


__version__ = "0.1.0"
