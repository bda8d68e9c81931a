"""
The complex number value type with its parsing and error types.
"""
from .exceptions import *
from .parsing import *
from .complex import *
