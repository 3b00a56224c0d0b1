from __future__ import annotations

import logging
import typing as _ty

import uritools as _uritools

from .exceptions import FormatError
from .query import Query, QueryPairs
from .relative import RelativeUrl, parse_path
from .userinfo import UserInfo

logger = logging.getLogger(__name__)

_AUTHORITY_END = "/?#"


def _format_error(message: str, raw) -> FormatError:
    logger.debug("%s: %r", message, raw)
    return FormatError(f"{message}: {raw!r}")


def _split_authority(rest: str) -> tuple[str, str]:
    end = len(rest)
    for delimiter in _AUTHORITY_END:
        index = rest.find(delimiter, 0, end)
        if index >= 0:
            end = index
    return rest[:end], rest[end:]


def _split_port(hostport: str, raw: str) -> tuple[str, int | None]:
    host, sep, port = hostport.rpartition(":")
    if not sep:
        return hostport, None
    if not (port.isascii() and port.isdigit()):
        raise _format_error("invalid port", raw)
    return host, int(port)


def _split_host(hostport: str, raw: str) -> tuple[str, int | None]:
    host, port = _split_port(hostport, raw)
    if not host:
        raise _format_error("empty host", raw)
    return host, port


class AbsoluteUrl(_ty.NamedTuple):
    scheme: str
    host: str
    port: int | None = None
    relative_url: RelativeUrl = RelativeUrl.EMPTY
    user_info: UserInfo | None = None

    SCHEME_DELIMITER = "://"
    DEFAULT_SCHEME = "http"
    SECURE_SCHEME = "https"

    @classmethod
    def parse(cls, raw: str) -> AbsoluteUrl:
        """Split ``scheme://[user[:pass]@]host[:port][relative]``.

        Raises FormatError when the scheme delimiter is missing, the scheme
        or host is empty, or the text after the last ``:`` of the host is
        not a port number. Hosts holding a ``:`` of their own (ipv6
        literals) are not supported.
        """
        scheme, sep, rest = raw.partition(cls.SCHEME_DELIMITER)
        if not sep:
            raise _format_error("missing scheme delimiter", raw)
        if not scheme:
            raise _format_error("empty scheme", raw)
        authority, relative = _split_authority(rest)
        userinfo, at, hostport = authority.rpartition("@")
        host, port = _split_host(hostport, raw)
        return cls(
            scheme,
            host,
            port,
            RelativeUrl.parse(relative),
            UserInfo.parse(userinfo) if at else None,
        )

    @classmethod
    def from_split(cls, parts: _uritools.SplitResult) -> AbsoluteUrl:
        """Build from components already split by ``uritools.urisplit``."""
        raw = parts.geturi()
        if not parts.scheme or parts.authority is None:
            raise _format_error("missing scheme or authority", raw)
        userinfo, at, hostport = parts.authority.rpartition("@")
        host, port = _split_host(hostport, raw)
        return cls(
            parts.scheme,
            host,
            port,
            RelativeUrl(
                parse_path(parts.path or ""),
                Query.parse(parts.query or ""),
                parts.fragment or "",
            ),
            UserInfo.parse(userinfo) if at else None,
        )

    @classmethod
    def from_host(
        cls, host: str, port: int | None = None, use_https: bool = False
    ) -> AbsoluteUrl:
        return cls(cls.SECURE_SCHEME if use_https else cls.DEFAULT_SCHEME, host, port)

    def __str__(self) -> str:
        userinfo = str(self.user_info) if self.user_info else ""
        port = f":{self.port}" if self.port is not None else ""
        return (
            f"{self.scheme}{self.SCHEME_DELIMITER}{userinfo}{self.host}{port}"
            f"{self.relative_url}"
        )

    def to_split(self) -> _uritools.SplitResult:
        return _uritools.urisplit(str(self))

    @property
    def path(self) -> tuple[str, ...]:
        return self.relative_url.path

    @property
    def query(self) -> Query:
        return self.relative_url.query

    @property
    def fragment(self) -> str:
        return self.relative_url.fragment

    def with_scheme(self, scheme: str) -> AbsoluteUrl:
        return self._replace(scheme=scheme)

    def with_host(self, host: str) -> AbsoluteUrl:
        return self._replace(host=host)

    def with_port(self, port: int | None) -> AbsoluteUrl:
        return self._replace(port=port)

    def with_credentials(
        self, username: str, password: str | None = None
    ) -> AbsoluteUrl:
        return self._replace(user_info=UserInfo(username, password))

    def without_credentials(self) -> AbsoluteUrl:
        return self._replace(user_info=None)

    def with_relative_url(self, relative_url: RelativeUrl) -> AbsoluteUrl:
        return self._replace(relative_url=relative_url)

    def with_path(self, *segments: str) -> AbsoluteUrl:
        return self._replace(relative_url=self.relative_url.with_path(*segments))

    def append_path(self, *segments: str) -> AbsoluteUrl:
        return self._replace(relative_url=self.relative_url.append_path(*segments))

    def with_query(self, query: str | QueryPairs) -> AbsoluteUrl:
        return self._replace(relative_url=self.relative_url.with_query(query))

    def add_query_parameter(self, field_name: str, value: str) -> AbsoluteUrl:
        return self._replace(
            relative_url=self.relative_url.add_query_parameter(field_name, value)
        )

    def add_query_parameters(self, pairs: QueryPairs) -> AbsoluteUrl:
        return self._replace(
            relative_url=self.relative_url.add_query_parameters(pairs)
        )

    def with_fragment(self, fragment: str) -> AbsoluteUrl:
        return self._replace(relative_url=self.relative_url.with_fragment(fragment))


def http_url(host: str, port: int | None = None) -> AbsoluteUrl:
    return AbsoluteUrl.from_host(host, port)


def https_url(host: str, port: int | None = None) -> AbsoluteUrl:
    return AbsoluteUrl.from_host(host, port, use_https=True)
