"""
Central place for general utilities used in python-complex.
"""
from . import formatting

__all__ = [
    "formatting"
]
