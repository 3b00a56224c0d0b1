from __future__ import annotations

import typing as _ty

from . import codec as _codec
from .query import Query, QueryPairs, QueryParameter


def split_path(*paths: str) -> tuple[str, ...]:
    """Split each path on ``/``, dropping the empty segments left by
    leading, trailing and repeated slashes."""
    return tuple(
        segment for path in paths for segment in path.split("/") if segment
    )


def parse_path(raw: str) -> tuple[str, ...]:
    """Split an encoded path and decode each of its segments."""
    return tuple(_codec.decode(segment) for segment in split_path(raw))


class _RelativeUrlParts(_ty.NamedTuple):
    path: tuple[str, ...] = ()
    query: Query = Query.EMPTY
    fragment: str = ""


class RelativeUrl(_RelativeUrlParts):
    __slots__ = ()

    def __new__(
        cls,
        path: str | _ty.Iterable[str] = (),
        query: QueryPairs = Query.EMPTY,
        fragment: str = "",
    ):
        path = split_path(path) if isinstance(path, str) else tuple(path)
        return super().__new__(cls, path, Query.from_pairs(query), fragment)

    @classmethod
    def of(
        cls,
        path: str | _ty.Iterable[str] = (),
        query: str | QueryPairs = (),
        fragment: str = "",
    ) -> RelativeUrl:
        if isinstance(path, str):
            path = split_path(path)
        else:
            path = split_path(*path)
        if isinstance(query, str):
            query = Query.parse(query.removeprefix("?"))
        else:
            query = Query.from_pairs(query)
        return cls(path, query, fragment or "")

    @classmethod
    def parse(cls, raw: str) -> RelativeUrl:
        rest, _, fragment = raw.partition("#")
        path, _, query = rest.partition("?")
        return cls(parse_path(path), Query.parse(query), fragment)

    def __str__(self) -> str:
        url = "".join(f"/{_codec.encode(segment)}" for segment in self.path)
        if self.query:
            url += f"?{self.query}"
        if self.fragment:
            url += f"#{self.fragment}"
        return url

    @property
    def query_parameters(self) -> tuple[QueryParameter, ...]:
        return self.query.elements

    def with_path(self, *segments: str) -> RelativeUrl:
        return self._replace(path=split_path(*segments))

    def append_path(self, *segments: str) -> RelativeUrl:
        return self._replace(path=self.path + split_path(*segments))

    def with_query(self, query: str | QueryPairs) -> RelativeUrl:
        if isinstance(query, str):
            query = Query.parse(query.removeprefix("?"))
        return self._replace(query=Query.from_pairs(query))

    def add_query_parameter(self, field_name: str, value: str) -> RelativeUrl:
        return self._replace(query=self.query.add(field_name, value))

    def add_query_parameters(self, pairs: QueryPairs) -> RelativeUrl:
        return self._replace(query=self.query.extend(pairs))

    def with_fragment(self, fragment: str) -> RelativeUrl:
        return self._replace(fragment=fragment or "")


RelativeUrl.EMPTY = RelativeUrl()
