from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Callable, Generic, TypeVar

F = TypeVar('F')
W = TypeVar('W')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')

Getter = Callable[[W], F]
Setter = Callable[[F, W], W]

# get must not mutate; set returns a new whole
@dataclass(frozen=True)
class Lens(Generic[F, W]):
    get: Callable[[W], F]
    set: Callable[[F, W], W]

    def __rshift__(self, inner: Lens[B, F]) -> Lens[B, W]:
        return compose(self, inner)

@dataclass(frozen=True)
class Composed(Lens[B, A]):
    outer: Lens
    inner: Lens

    def __repr__(self):
        return f"Composed({self.outer!r}, {self.inner!r})"

def lens(get: Getter, set: Setter) -> Lens:
    return Lens(get, set)

def compose(outer: Lens[B, A], inner: Lens[C, B]) -> Lens[C, A]:
    def get(whole: A) -> C:
        return inner.get(outer.get(whole))

    def set(focus: C, whole: A) -> A:
        return outer.set(inner.set(focus, outer.get(whole)), whole)

    return Composed(get, set, outer, inner)

def identity() -> Lens[W, W]:
    return Lens(lambda whole: whole, lambda focus, _: focus)

# outermost first
def compose_all(*lenses: Lens) -> Lens:
    if not lenses:
        return identity()
    return reduce(compose, lenses)

def over(optic: Lens[F, W], f: Callable[[F], F], whole: W) -> W:
    return optic.set(f(optic.get(whole)), whole)

def iso(forward: Callable[[W], F], backward: Callable[[F], W]) -> Lens[F, W]:
    # the whole is rebuilt from the focus alone
    return Lens(forward, lambda focus, _: backward(focus))
