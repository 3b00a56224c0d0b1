"""Turn a record's named fields into query parameter pairs.

Kept apart from the value types: they only ever see the resulting
``(name, value)`` pairs.
"""

import dataclasses as _dataclasses
import typing as _ty


def _fields(obj) -> _ty.Iterable[tuple[str, _ty.Any]]:
    if isinstance(obj, _ty.Mapping):
        return obj.items()
    if _dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return ((f.name, getattr(obj, f.name)) for f in _dataclasses.fields(obj))
    if isinstance(obj, tuple) and hasattr(obj, "_asdict"):
        return obj._asdict().items()
    try:
        return vars(obj).items()
    except TypeError:
        raise TypeError(
            f"cannot derive query parameters from {type(obj).__name__!r}"
        ) from None


def query_pairs(obj) -> _ty.Iterator[tuple[str, str]]:
    """Yield ``(name, str(value))`` in field declaration order, skipping
    fields that are None."""
    for name, value in _fields(obj):
        if value is None:
            continue
        yield name, str(value)
