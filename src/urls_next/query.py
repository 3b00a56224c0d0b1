from __future__ import annotations

import typing as _ty

from . import codec as _codec

QueryPairs: _ty.TypeAlias = (
    "Query | _ty.Iterable[QueryParameter | tuple[str, str]]"
)


class QueryParameter(_ty.NamedTuple):
    field_name: str
    value: str

    def __str__(self) -> str:
        return f"{self.field_name}={_codec.encode(self.value)}"


class _QueryParts(_ty.NamedTuple):
    elements: tuple[QueryParameter, ...] = ()


class Query(_QueryParts):
    """Ordered query parameters. Field names may repeat."""

    __slots__ = ()

    SEPARATOR = "&"

    def __new__(cls, elements: _ty.Iterable[QueryParameter | tuple[str, str]] = ()):
        return super().__new__(
            cls, tuple(QueryParameter(name, value) for name, value in elements)
        )

    @classmethod
    def from_pairs(cls, pairs: QueryPairs) -> Query:
        if isinstance(pairs, Query):
            return pairs
        return cls.EMPTY.extend(pairs)

    @classmethod
    def parse(cls, raw: str) -> Query:
        if not raw:
            return cls.EMPTY
        elements = []
        for piece in raw.split(cls.SEPARATOR):
            if not piece:
                continue
            name, _, value = piece.partition("=")
            elements.append(QueryParameter(name, _codec.decode(value)))
        return cls(elements)

    def __str__(self) -> str:
        return self.SEPARATOR.join(str(element) for element in self.elements)

    def __bool__(self):
        return bool(self.elements)

    def add(self, field_name: str, value: str) -> Query:
        return Query(self.elements + (QueryParameter(field_name, value),))

    def extend(self, pairs: QueryPairs) -> Query:
        added = Query(pairs.elements if isinstance(pairs, Query) else pairs)
        if not added:
            return self
        return Query(self.elements + added.elements)

    def get(self, field_name: str, default: str | None = None) -> str | None:
        for element in self.elements:
            if element.field_name == field_name:
                return element.value
        return default

    def get_all(self, field_name: str) -> list[str]:
        return [e.value for e in self.elements if e.field_name == field_name]

    def to_dict(query) -> dict[str, list[str]]:
        query_: dict[str, list[str]] = {}
        for k, v in query.elements:
            query_.setdefault(k, []).append(v)
        return query_


Query.EMPTY = Query()
