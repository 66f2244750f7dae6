import logging
import math
import operator
from dataclasses import dataclass
from itertools import product
from typing import Any, Callable, Iterable, List, Optional

from .core import Lens

logger = logging.getLogger(__name__)

Eq = Callable[[Any, Any], bool]

GET_SET = 'GetSet'
SET_GET = 'SetGet'
SET_SET = 'SetSet'

@dataclass(frozen=True)
class LawViolation:
    law: str
    inputs: tuple
    expected: Any
    actual: Any

    def __str__(self):
        return f"{self.law} failed for {self.inputs!r}: expected {self.expected!r}, got {self.actual!r}"

class LawViolationError(AssertionError):
    def __init__(self, violations: List[LawViolation]):
        self.violations = violations
        super().__init__("\n".join(str(v) for v in violations))

def _same(expected: Any, actual: Any, tolerance: Optional[float]) -> bool:
    if tolerance is not None and isinstance(expected, (int, float)) and isinstance(actual, (int, float)):
        return math.isclose(expected, actual, rel_tol=0.0, abs_tol=tolerance)
    return expected == actual

# GetSet: set(get(w), w) == w
def _get_set(lens: Lens, whole: Any, eq: Eq) -> Optional[LawViolation]:
    actual = lens.set(lens.get(whole), whole)
    if eq(whole, actual):
        return None
    return LawViolation(GET_SET, (whole,), whole, actual)

# SetGet: get(set(f, w)) == f, up to tolerance for rounding lenses
def _set_get(lens: Lens, focus: Any, whole: Any, tolerance: Optional[float]) -> Optional[LawViolation]:
    actual = lens.get(lens.set(focus, whole))
    if _same(focus, actual, tolerance):
        return None
    return LawViolation(SET_GET, (focus, whole), focus, actual)

# SetSet: set(f2, set(f1, w)) == set(f2, w)
def _set_set(lens: Lens, focus1: Any, focus2: Any, whole: Any, eq: Eq) -> Optional[LawViolation]:
    expected = lens.set(focus2, whole)
    actual = lens.set(focus2, lens.set(focus1, whole))
    if eq(expected, actual):
        return None
    return LawViolation(SET_SET, (focus1, focus2, whole), expected, actual)

def get_set(lens: Lens, whole: Any, eq: Eq = operator.eq) -> bool:
    return _get_set(lens, whole, eq) is None

def set_get(lens: Lens, focus: Any, whole: Any, tolerance: Optional[float] = None) -> bool:
    return _set_get(lens, focus, whole, tolerance) is None

def set_set(lens: Lens, focus1: Any, focus2: Any, whole: Any, eq: Eq = operator.eq) -> bool:
    return _set_set(lens, focus1, focus2, whole, eq) is None

# GetSet and SetSet compare wholes with eq; tolerance only applies to SetGet
def check_laws(lens: Lens, wholes: Iterable, foci: Iterable,
               tolerance: Optional[float] = None, eq: Eq = operator.eq) -> List[LawViolation]:
    wholes = list(wholes)
    foci = list(foci)
    found = []
    for whole in wholes:
        found.append(_get_set(lens, whole, eq))
        for focus in foci:
            found.append(_set_get(lens, focus, whole, tolerance))
        for focus1, focus2 in product(foci, repeat=2):
            found.append(_set_set(lens, focus1, focus2, whole, eq))
    violations = [v for v in found if v is not None]
    for v in violations:
        logger.debug("lens law violation: %s", v)
    return violations

def assert_lawful(lens: Lens, wholes: Iterable, foci: Iterable,
                  tolerance: Optional[float] = None, eq: Eq = operator.eq) -> None:
    violations = check_laws(lens, wholes, foci, tolerance, eq)
    if violations:
        logger.warning("%d lens law violation(s), first: %s", len(violations), violations[0])
        raise LawViolationError(violations)
