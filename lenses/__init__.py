from .core import Lens, Composed, lens, compose, compose_all, identity, over, iso
from .fields import key, attr, index
from .laws import (
    LawViolation, LawViolationError, get_set, set_get, set_set, check_laws, assert_lawful,
)

__all__ = [
    'Lens', 'Composed', 'lens', 'compose', 'compose_all', 'identity', 'over', 'iso',
    'key', 'attr', 'index',
    'LawViolation', 'LawViolationError', 'get_set', 'set_get', 'set_set', 'check_laws', 'assert_lawful',
]
