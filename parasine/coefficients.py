from __future__ import annotations
from dataclasses import dataclass
from numbers import Real
from typing import Callable, Dict, Union

Coefficient = Callable[[float], float]
CoefficientLike = Union[Real, Coefficient]

DEFAULT_A = 1.0
DEFAULT_B = 1.0
DEFAULT_C = 0.0
DEFAULT_D = 0.0

DEFAULTS: Dict[str, float] = {
    "a": DEFAULT_A,
    "b": DEFAULT_B,
    "c": DEFAULT_C,
    "d": DEFAULT_D,
}


@dataclass(frozen=True)
class Constant:
    """
    Coefficient function with a fixed value.

    c(x) = value for every x.

    Parameters
    ----------
    value : float
        Value returned regardless of the input.
    """
    value: float

    def __call__(self, x: float) -> float:
        return self.value


def as_coefficient(value: CoefficientLike) -> Coefficient:
    """
    Lift a fixed number into a :class:`Constant`; pass callables through.

    Parameters
    ----------
    value : float or callable
        A real number (Python or numpy scalar) or a unary function of x.

    Returns
    -------
    callable
        The coefficient function to bind.

    Raises
    ------
    TypeError
        If `value` is neither a real number nor callable.
    """
    if isinstance(value, Real):
        return Constant(float(value))
    if callable(value):
        return value
    raise TypeError(
        f"coefficient must be a real number or a callable, "
        f"got {type(value).__name__}"
    )


def default_coefficient(name: str) -> Constant:
    """Fresh default binding for coefficient 'a', 'b', 'c' or 'd'."""
    key = (name or "").lower()
    if key not in DEFAULTS:
        raise ValueError(f"Unknown coefficient: {name!r} (expected one of a, b, c, d)")
    return Constant(DEFAULTS[key])
