"""Percent-encoding of single path segments and query values."""

import uritools as _uritools

ENCODING = "utf-8"
ERRORS = "surrogatepass"
FALLBACK_ERRORS = "surrogateescape"


def encode(value: str) -> str:
    """Escape everything outside the unreserved set ``A-Za-z0-9-._~``.

    Escapes use uppercase hex, so ``"<>"`` becomes ``"%3C%3E"``.
    """
    if not value:
        return ""
    return _uritools.uriencode(value, "", ENCODING, ERRORS).decode("ascii")


def decode(value: str) -> str:
    """Undo ``encode``.

    A ``%`` that does not start a two hex digit escape is kept as is, and
    bytes that are not valid text are kept as ``surrogateescape`` code
    points.
    """
    if "%" not in value:
        return value
    decoded = _uritools.uridecode(value.encode(ENCODING, ERRORS), None)
    try:
        return decoded.decode(ENCODING, ERRORS)
    except UnicodeDecodeError:
        return decoded.decode(ENCODING, FALLBACK_ERRORS)
