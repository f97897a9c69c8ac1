from __future__ import annotations
import math
from numbers import Real
from typing import Callable, Optional

from parasine.coefficients import (
    Coefficient,
    CoefficientLike,
    as_coefficient,
    default_coefficient,
)
from parasine.utils.params import frequency_from_period


def _sin(theta: float) -> float:
    # math.sin raises on ±inf; IEEE sine of an infinity is NaN
    if math.isinf(theta):
        return math.nan
    return math.sin(theta)


class SineFunction:
    """
    General sine function with coefficients that may depend on x.

    f(x) = A(x) * sin(B(x) * x + C(x) * π) + D(x)

    Every coefficient accepts either a fixed number, which is held as a
    constant function, or a unary function of x. Omitted coefficients take
    their defaults A=1, B=1, C=0, D=0, so ``SineFunction()`` is plain sin(x).

    Parameters
    ----------
    a : float or callable, optional
        Amplitude.
    b : float or callable, optional
        Angular frequency multiplying x.
    c : float or callable, optional
        Phase, in units of π.
    d : float or callable, optional
        Vertical offset.

    Examples
    --------
    >>> f = SineFunction(2.0, 1.0, 0.5, 3.0)
    >>> f(0.0)
    5.0
    >>> g = SineFunction(a=lambda x: x)
    >>> g.apply(2.0) == 2.0 * math.sin(2.0)
    True
    """

    def __init__(
        self,
        a: Optional[CoefficientLike] = None,
        b: Optional[CoefficientLike] = None,
        c: Optional[CoefficientLike] = None,
        d: Optional[CoefficientLike] = None,
    ):
        self._a = default_coefficient("a") if a is None else as_coefficient(a)
        self._b = default_coefficient("b") if b is None else as_coefficient(b)
        self._c = default_coefficient("c") if c is None else as_coefficient(c)
        self._d = default_coefficient("d") if d is None else as_coefficient(d)

    @classmethod
    def from_period(
        cls,
        a: float,
        period: float,
        c: float,
        d: float,
        single_precision: bool = False,
    ) -> "SineFunction":
        """
        Build f(x) = a * sin(x / period + c * π) + d from fixed numbers.

        B is bound to the constant 1 / period. See
        :func:`parasine.utils.params.frequency_from_period` for the zero
        period and `single_precision` behaviour.
        """
        for name, value in (("a", a), ("period", period), ("c", c), ("d", d)):
            if not isinstance(value, Real):
                raise TypeError(
                    f"from_period requires numeric arguments, "
                    f"got {name}={type(value).__name__}"
                )
        b = frequency_from_period(period, single_precision=single_precision)
        return cls(a, b, c, d)

    # --- bindings --------------------------------------------------------

    @property
    def a(self) -> Coefficient:
        return self._a

    @property
    def b(self) -> Coefficient:
        return self._b

    @property
    def c(self) -> Coefficient:
        return self._c

    @property
    def d(self) -> Coefficient:
        return self._d

    def set_a(self, a: CoefficientLike) -> None:
        self._a = as_coefficient(a)

    def set_b(self, b: CoefficientLike) -> None:
        self._b = as_coefficient(b)

    def set_c(self, c: CoefficientLike) -> None:
        self._c = as_coefficient(c)

    def set_d(self, d: CoefficientLike) -> None:
        self._d = as_coefficient(d)

    def reset_a(self) -> None:
        """Reset coefficient A to its default value."""
        self._a = default_coefficient("a")

    def reset_b(self) -> None:
        """Reset coefficient B to its default value."""
        self._b = default_coefficient("b")

    def reset_c(self) -> None:
        """Reset coefficient C to its default value."""
        self._c = default_coefficient("c")

    def reset_d(self) -> None:
        """Reset coefficient D to its default value."""
        self._d = default_coefficient("d")

    def reset(self) -> None:
        """Reset all coefficients to their default values."""
        self.reset_a()
        self.reset_b()
        self.reset_c()
        self.reset_d()

    # --- evaluation ------------------------------------------------------

    def apply(self, x: float) -> float:
        """
        Evaluate f at x.

        Non-finite values coming out of a coefficient propagate into the
        result; exceptions raised by a coefficient reach the caller as is.
        """
        return self._a(x) * _sin(self._b(x) * x + self._c(x) * math.pi) + self._d(x)

    def __call__(self, x: float) -> float:
        return self.apply(x)

    def compose(self, before: Callable[[float], float]) -> Callable[[float], float]:
        """Return x -> f(before(x))."""
        def composed(x):
            return self.apply(before(x))
        return composed

    def and_then(self, after: Callable[[float], float]) -> Callable[[float], float]:
        """Return x -> after(f(x))."""
        def chained(x):
            return after(self.apply(x))
        return chained

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"a={self._a!r}, b={self._b!r}, c={self._c!r}, d={self._d!r})"
        )
