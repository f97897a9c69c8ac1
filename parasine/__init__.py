# parasine/__init__.py
from .coefficients import (
    Constant,
    as_coefficient,
    default_coefficient,
    DEFAULT_A,
    DEFAULT_B,
    DEFAULT_C,
    DEFAULT_D,
    DEFAULTS,
)
from .sine import SineFunction

__version__ = "0.1.0"

__all__ = [
    "SineFunction",

    # from coefficients.py
    "Constant",
    "as_coefficient",
    "default_coefficient",
    "DEFAULT_A",
    "DEFAULT_B",
    "DEFAULT_C",
    "DEFAULT_D",
    "DEFAULTS",
]
