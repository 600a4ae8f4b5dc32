import re
from collections.abc import Mapping

from ._logger import get_logger
from ._rules import DEFAULT_RULES
from ._util import (
    InvalidNameValuePairError,
    InvalidRawHeaderError,
    is_null_or_empty,
    normalize_name,
    stringify,
    textify,
    validate,
)

__all__ = [
    "Headers",
    "coerce_values",
    "HEADER_AUTHORIZATION",
    "HEADER_CONTENT_LENGTH",
    "HEADER_CONTENT_TYPE",
    "HEADER_LOCATION",
    "HEADER_SET_COOKIE",
]

log = get_logger("headers")

HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_LOCATION = "Location"
HEADER_SET_COOKIE = "Set-Cookie"

################################################################
# Facts:
#
# Names are case-insensitive, so we store everything under one spelling (see
# normalize_name) and look things up by that spelling. That way a lookup is a
# dict lookup, and the spelling we emit on the wire is always the same no
# matter how the caller typed it.
#
# Values are native strings with leading/trailing whitespace stripped. A
# header that is present always has at least one value. A header that has only
# ever been given empty values has exactly one, and it's "". ("X-Foo:" is a
# perfectly legal header line, and adding it three times shouldn't give you
# three of them.)
#
# Order is important:
# "a proxy MUST NOT change the order of these field values when forwarding a
# message."
# So values keep the order they were added in, and names keep the order they
# first appeared in.
#
# Raw header lines are "Name: value". A line without a colon can't be told
# apart from a status line ("HTTP/1.1 400 BAD REQUEST"), so that's the one
# thing we refuse outright instead of guessing.
#
# Splitting raw values on commas is off by default, because commas show up in
# perfectly ordinary single values (dates, quoted strings, cookies). You can
# get a collection that splits them with with_raw_comma_separation_enabled().
################################################################

# Everything up to the first colon is the name, the rest is the value.
raw_header_re = re.compile(r"(?P<name>[^:]*):(?P<value>.*)", re.DOTALL)


def coerce_values(value):
    # Turns whatever the caller gave us into a list of stripped strings. A
    # list or tuple gives one value per element; anything else gives exactly
    # one value.
    if isinstance(value, str):
        return [value.strip()]
    if isinstance(value, (list, tuple)):
        return [stringify(item).strip() for item in value]
    return [stringify(value).strip()]


def _split_raw_header(line):
    line = textify(line)
    try:
        matches = validate(
            raw_header_re, line, "Invalid HTTP header: {}".format(line)
        )
    except InvalidRawHeaderError:
        log.debug("rejecting raw header line without a colon: %r", line)
        raise
    return normalize_name(matches["name"].strip()), matches["value"]


def _split_raw_block(raw):
    if isinstance(raw, (str, bytes, bytearray, memoryview)):
        raw = textify(raw).split("\n")
    for line in raw:
        line = textify(line).rstrip("\r\n")
        if line.strip():
            yield line


def _render_raw_header(name, value):
    if is_null_or_empty(value):
        return "{}:".format(name)
    return "{}: {}".format(name, value)


class Headers:
    """An ordered, case-insensitive, multi-valued collection of HTTP headers.

    Header names are normalized to their capitalized, hyphenated form
    (``content-TYPE`` becomes ``Content-Type``) before they're used, so any
    spelling of a name finds the same entry. Each name maps to a list of one
    or more string values, in the order they were added.

    Which names can only hold a single value, and which names are emitted as
    one line per value, is decided by the :class:`HeaderRules` passed as
    ``rules`` (by default :data:`DEFAULT_RULES`: ``Content-Type`` and
    ``Location`` are single valued, ``Set-Cookie`` is never folded).

    ``raw_comma_separation`` controls whether :meth:`add_raw_header` and
    :meth:`set_raw_header` split values on commas. It can't be changed on an
    existing collection; use :meth:`with_raw_comma_separation_enabled` to
    get a copy that splits.

    Iterating gives ``(name, values)`` pairs in the current name order. The
    order is captured when iteration starts. Don't mutate the collection
    while you're iterating over it; what you get in that case is undefined.

    """

    def __init__(
        self, initial_headers=None, *, rules=DEFAULT_RULES,
        raw_comma_separation=False
    ):
        self._headers = {}
        self._rules = rules
        self._comma_separation = bool(raw_comma_separation)
        if initial_headers is not None:
            self.add_headers(initial_headers)

    @classmethod
    def from_name_value_pairs(cls, pairs, **kwargs):
        """Build a collection from ``[[name, value], [name], ...]``.

        A pair with no second element adds the name with an empty value. A
        pair with no name raises :exc:`InvalidNameValuePairError`, and in
        that case nothing is stored at all.

        """
        pairs = list(pairs)
        for pair in pairs:
            if (not isinstance(pair, (list, tuple)) or len(pair) == 0
                    or pair[0] is None):
                raise InvalidNameValuePairError(
                    "Invalid name/value pair structure: {!r}".format(pair)
                )
        headers = cls(**kwargs)
        for pair in pairs:
            value = pair[1] if len(pair) > 1 else None
            headers.add_header(pair[0], value)
        return headers

    @classmethod
    def from_raw_headers(cls, raw, **kwargs):
        """Build a collection from raw header text.

        ``raw`` is either a block of text (``str`` or bytes-like, lines
        separated by ``\\n`` or ``\\r\\n``) or an iterable of lines. Blank
        lines are skipped. Every line has to be a ``Name: value`` line; if
        any of them isn't, :exc:`InvalidRawHeaderError` is raised before
        anything is stored.

        """
        parsed = [_split_raw_header(line) for line in _split_raw_block(raw)]
        headers = cls(**kwargs)
        for name, value in parsed:
            headers._set(name, headers._raw_values(name, value), False)
        return headers

    @property
    def rules(self):
        return self._rules

    @property
    def raw_comma_separation(self):
        return self._comma_separation

    def with_raw_comma_separation_enabled(self):
        headers = self.copy()
        headers._comma_separation = True
        log.debug("derived headers with raw comma separation enabled")
        return headers

    # Everything that changes a value list goes through here.
    def _set(self, name, values, overwrite):
        if name in self._rules.single_value_names:
            # enforce headers that can only hold one value
            values = values[:1]
            overwrite = True
        if name in self._headers and not overwrite:
            values = self._headers[name] + values
        values = [value for value in values if value != ""]
        if not values:
            values = [""]
        self._headers[name] = values

    def _raw_values(self, name, value):
        if not self._comma_separation or name in self._rules.folded_multi_names:
            return [value.strip()]
        # split multiple header values
        return [
            piece.strip() for piece in value.split(",") if piece.strip()
        ]

    def add_header(self, name, value):
        self._set(normalize_name(name), coerce_values(value), False)

    def set_header(self, name, value):
        self._set(normalize_name(name), coerce_values(value), True)

    def add_headers(self, headers):
        """Append every value from ``headers`` onto this collection.

        ``headers`` can be another :class:`Headers`, a mapping, or an
        iterable of ``(name, value)`` pairs. Each value goes through
        :meth:`add_header` on its own (list and tuple values are taken apart
        first), so single value names end up holding the last one.

        """
        if isinstance(headers, Headers):
            pairs = list(headers)
        elif isinstance(headers, Mapping):
            pairs = list(headers.items())
        else:
            pairs = headers
        for name, values in pairs:
            if not isinstance(values, (list, tuple)):
                values = [values]
            for value in values:
                self.add_header(name, value)

    def add_raw_header(self, line):
        name, value = _split_raw_header(line)
        self._set(name, self._raw_values(name, value), False)

    def set_raw_header(self, line):
        name, value = _split_raw_header(line)
        self._set(name, self._raw_values(name, value), True)

    def remove_header(self, name):
        self._headers.pop(normalize_name(name), None)

    def has_header(self, name):
        return normalize_name(name) in self._headers

    def get_header(self, name):
        return list(self._headers.get(normalize_name(name), []))

    def get_header_line(self, name):
        values = self._headers.get(normalize_name(name))
        if not values:
            return None
        return ", ".join(values)

    def get_set_cookie_header_line(self, cookie_name):
        for value in self._headers.get(HEADER_SET_COOKIE, []):
            if value.startswith(cookie_name):
                return value
        return None

    def is_empty(self):
        return not self._headers

    def names(self):
        return list(self._headers)

    def items(self):
        return list(self)

    def __iter__(self):
        for name in list(self._headers):
            values = self._headers.get(name)
            if values is not None:
                yield name, list(values)

    def __len__(self):
        return len(self._headers)

    def __contains__(self, name):
        return self.has_header(name)

    def to_raw_headers(self):
        lines = []
        for name, values in self:
            if name in self._rules.folded_multi_names:
                for value in values:
                    lines.append(_render_raw_header(name, value))
            else:
                lines.append(_render_raw_header(name, ", ".join(values)))
        return lines

    def to_flattened_dict(self):
        return {name: ", ".join(values) for name, values in self}

    def to_dict(self):
        return dict(self)

    def to_bytes(self):
        return b"".join(
            line.encode("iso-8859-1") + b"\r\n"
            for line in self.to_raw_headers()
        )

    def copy(self):
        headers = type(self)(
            rules=self._rules, raw_comma_separation=self._comma_separation
        )
        headers._headers = {
            name: list(values) for name, values in self._headers.items()
        }
        return headers

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def to_merged_headers(self, headers):
        merged = self.copy()
        merged.add_headers(headers)
        return merged

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self._headers)

    # Useful for tests
    def __eq__(self, other):
        if not isinstance(other, Headers):
            return NotImplemented
        return self._headers == other._headers

    # This is an unhashable type.
    __hash__ = None
