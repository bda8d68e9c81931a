"""
Phasor helpers for AC calculations on top of `Complex`.
"""
from .phasor import *
