"""
Function Validation Framework for parasine

Checks that a SineFunction behaves as its closed form says it should:
- Evaluation matches A(x)*sin(B(x)*x + C(x)*π) + D(x)
- Resetting every coefficient gives back plain sin(x)
- Resetting one coefficient leaves the other three alone
- The period constructor agrees with an explicit 1/period frequency

Usage:
    from parasine import SineFunction
    from parasine.validation import FunctionValidator

    f = SineFunction(2.0, 1.0, 0.5, 3.0)
    validator = FunctionValidator(f)

    # Run all checks
    results = validator.validate_all()

    # Or run individual checks
    validator.check_closed_form()
    validator.check_reset_restores_sine()
    validator.check_coefficient_independence()
    validator.check_period_equivalence()
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence
import copy
import math
import numpy as np

from parasine.coefficients import Constant, DEFAULTS
from parasine.sine import SineFunction

DEFAULT_PROBES = (-10.0, -math.pi, -1.0, -0.25, 0.0, 0.25, 1.0, math.pi / 2, math.pi, 10.0)
SLOTS = ("a", "b", "c", "d")


@dataclass
class ValidationResult:
    """Result from a single validation check."""
    test_name: str
    passed: bool
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        status = "✓ PASS" if self.passed else "✗ FAIL"
        return f"{status}: {self.test_name}\n  {self.message}"


class FunctionValidator:
    """
    Validate SineFunction behaviour at a set of probe points.

    Parameters
    ----------
    func : SineFunction
        Function to validate.
    tolerance : float
        Absolute and relative tolerance for comparisons (default: 1e-12).
    verbose : bool
        Print each result as it is produced (default: True).
    probes : sequence of float, optional
        Points at which the function is evaluated. Defaults to a spread of
        values around zero including ±π and π/2.

    Examples
    --------
    >>> f = SineFunction(a=lambda x: x)
    >>> validator = FunctionValidator(f, verbose=False)
    >>> all(r.passed for r in validator.validate_all())
    True
    """

    def __init__(
        self,
        func: SineFunction,
        tolerance: float = 1e-12,
        verbose: bool = True,
        probes: Optional[Sequence[float]] = None,
    ):
        self.func = func
        self.tolerance = tolerance
        self.verbose = verbose
        self.probes = list(DEFAULT_PROBES if probes is None else probes)
        self.results: List[ValidationResult] = []

    def _add_result(self, result: ValidationResult) -> ValidationResult:
        self.results.append(result)
        if self.verbose:
            print(result)
        return result

    def _close(self, actual: float, expected: float) -> bool:
        return bool(np.isclose(actual, expected, rtol=self.tolerance,
                               atol=self.tolerance, equal_nan=True))

    def _max_error(self, pairs) -> float:
        # equal infinities and NaN pairs carry no error
        errors = [abs(a - e) for a, e in pairs
                  if not (a == e or (math.isnan(a) and math.isnan(e)))]
        return max(errors, default=0.0)

    # =========================================================================
    # 1. CLOSED FORM
    # =========================================================================

    def check_closed_form(self) -> ValidationResult:
        """
        Compare f(x) with the formula evaluated from the current bindings.

        Returns
        -------
        ValidationResult
            Pass if every probe agrees within tolerance.
        """
        f = self.func
        pairs = []
        with np.errstate(invalid="ignore"):
            for x in self.probes:
                expected = float(f.a(x) * np.sin(f.b(x) * x + f.c(x) * np.pi) + f.d(x))
                pairs.append((f(x), expected))

        failures = [x for x, (a, e) in zip(self.probes, pairs) if not self._close(a, e)]
        passed = not failures
        if passed:
            message = f"f(x) matches the closed form at {len(self.probes)} points"
        else:
            message = f"f(x) differs from the closed form at x={failures}"
        return self._add_result(ValidationResult(
            test_name="Closed Form",
            passed=passed,
            message=message,
            details={"failures": failures, "max_error": self._max_error(pairs)},
        ))

    # =========================================================================
    # 2. RESET
    # =========================================================================

    def check_reset_restores_sine(self) -> ValidationResult:
        """
        Call reset() on a shallow copy of the function and compare with math.sin.

        The copy keeps the function's class, so an overridden reset() is the
        one exercised. The validated function keeps its bindings.
        """
        fresh = copy.copy(self.func)
        fresh.reset()

        pairs = [(fresh(x), math.sin(x)) for x in self.probes]
        failures = [x for x, (a, e) in zip(self.probes, pairs) if a != e]
        passed = not failures
        if passed:
            message = "reset() restores sin(x) exactly"
        else:
            message = f"reset() result differs from sin(x) at x={failures}"
        return self._add_result(ValidationResult(
            test_name="Reset Restores Sine",
            passed=passed,
            message=message,
            details={"failures": failures, "max_error": self._max_error(pairs)},
        ))

    def check_coefficient_independence(self) -> ValidationResult:
        """
        Reset each coefficient alone and check the other three are untouched.

        For every slot, a shallow copy of the function gets ``reset_<slot>()``.
        The slot must then return its default at every probe point while the
        remaining slots stay bound to the function's own callables.

        Returns
        -------
        ValidationResult
            Pass if every single-slot reset is independent of the others.
        """
        f = self.func
        original = {name: getattr(f, name) for name in SLOTS}
        problems = []

        for slot in SLOTS:
            fresh = copy.copy(f)
            getattr(fresh, f"reset_{slot}")()

            coeff = getattr(fresh, slot)
            if any(coeff(x) != DEFAULTS[slot] for x in self.probes):
                problems.append(f"reset_{slot}() did not restore {slot}={DEFAULTS[slot]}")
            for other in SLOTS:
                if other != slot and getattr(fresh, other) is not original[other]:
                    problems.append(f"reset_{slot}() changed {other}")

        passed = not problems
        if passed:
            message = "Each reset_<slot>() restores its default and leaves the others bound"
        else:
            message = "; ".join(problems)
        return self._add_result(ValidationResult(
            test_name="Coefficient Independence",
            passed=passed,
            message=message,
            details={"problems": problems},
        ))

    # =========================================================================
    # 3. PERIOD CONSTRUCTOR
    # =========================================================================

    def _constant_values(self) -> Optional[Dict[str, float]]:
        bindings = {name: getattr(self.func, name) for name in SLOTS}
        if not all(isinstance(c, Constant) for c in bindings.values()):
            return None
        return {name: c.value for name, c in bindings.items()}

    def check_period_equivalence(self) -> ValidationResult:
        """
        Compare the function with SineFunction.from_period(a, 1/b, c, d).

        Only meaningful when all four coefficients are constants and B is
        non-zero; otherwise the result fails with a reason in `details`.
        """
        values = self._constant_values()
        if values is None:
            return self._add_result(ValidationResult(
                test_name="Period Equivalence",
                passed=False,
                message="Function has non-constant coefficients",
                details={"reason": "Non-constant coefficients"}
            ))
        if values["b"] == 0.0:
            return self._add_result(ValidationResult(
                test_name="Period Equivalence",
                passed=False,
                message="Frequency b is zero; no finite period",
                details={"reason": "Zero frequency"}
            ))

        period = 1.0 / values["b"]
        by_period = SineFunction.from_period(values["a"], period, values["c"], values["d"])

        pairs = [(self.func(x), by_period(x)) for x in self.probes]
        failures = [x for x, (a, e) in zip(self.probes, pairs) if not self._close(a, e)]
        passed = not failures
        if passed:
            message = f"f agrees with from_period(period={period})"
        else:
            message = f"f disagrees with from_period(period={period}) at x={failures}"
        return self._add_result(ValidationResult(
            test_name="Period Equivalence",
            passed=passed,
            message=message,
            details={"period": period, "failures": failures,
                     "max_error": self._max_error(pairs)},
        ))

    # =========================================================================
    # RUN ALL
    # =========================================================================

    def validate_all(self) -> List[ValidationResult]:
        """
        Run every applicable check and return the results.

        The period check only runs for functions with constant coefficients
        and a non-zero frequency.
        """
        self.results = []
        self.check_closed_form()
        self.check_reset_restores_sine()
        self.check_coefficient_independence()
        values = self._constant_values()
        if values is not None and values["b"] != 0.0:
            self.check_period_equivalence()
        return self.results

    def summary(self) -> str:
        """Formatted summary of the results collected so far."""
        if not self.results:
            return "No validation results yet. Run validate_all() first."

        passed = sum(r.passed for r in self.results)
        total = len(self.results)

        lines = [
            "=" * 70,
            "VALIDATION SUMMARY",
            "=" * 70,
            f"Function: {self.func!r}",
            f"Passed: {passed}/{total} tests",
            ""
        ]

        for result in self.results:
            status = "✓" if result.passed else "✗"
            lines.append(f"{status} {result.test_name}: {result.message}")

        lines.append("=" * 70)

        return "\n".join(lines)


def validate_function(func: SineFunction, verbose: bool = True) -> List[ValidationResult]:
    """
    Quick validation of a SineFunction with default settings.

    Examples
    --------
    >>> from parasine import SineFunction
    >>> results = validate_function(SineFunction(), verbose=False)
    """
    validator = FunctionValidator(func, verbose=verbose)
    return validator.validate_all()
