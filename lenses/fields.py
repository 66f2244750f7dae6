import copy
import dataclasses
from typing import Any, Hashable, Mapping, Tuple

from .core import Lens


def key(name: Hashable) -> Lens[Any, Mapping]:
    """Lens on ``whole[name]``.

    Setting copies a dict (or dict subclass, keeping its type); any other
    mapping comes back as a plain dict.
    """
    def get(whole: Mapping) -> Any:
        return whole[name]

    def set(focus: Any, whole: Mapping) -> Mapping:
        if not isinstance(whole, dict):
            return {**whole, name: focus}
        rebuilt = copy.copy(whole)
        rebuilt[name] = focus
        return rebuilt

    return Lens(get, set)


def attr(name: str) -> Lens[Any, Any]:
    """Lens on an attribute of a dataclass instance or a named tuple."""
    def get(whole: Any) -> Any:
        return getattr(whole, name)

    def set(focus: Any, whole: Any) -> Any:
        if dataclasses.is_dataclass(whole) and not isinstance(whole, type):
            return dataclasses.replace(whole, **{name: focus})
        if isinstance(whole, tuple) and hasattr(whole, '_replace'):
            return whole._replace(**{name: focus})
        raise TypeError(f"attr({name!r}): cannot rebuild {type(whole).__name__}")

    return Lens(get, set)


def index(i: int) -> Lens[Any, Tuple]:
    def get(whole: Tuple) -> Any:
        return whole[i]

    def set(focus: Any, whole: Tuple) -> Tuple:
        # negative positions count from the end
        j = range(len(whole))[i]
        return whole[:j] + (focus,) + whole[j + 1:]

    return Lens(get, set)
