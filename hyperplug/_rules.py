# Per-name rules that the header collection enforces.
#
# Two kinds of header need special treatment:
#
# - Headers that may hold at most one value. "Content-Type" (RFC 7231,
#   section 3.1.1.5) and "Location" (RFC 7231, section 7.1.2) are defined
#   as a single field-value, so there is no sensible way to combine two of
#   them. Adding one always replaces whatever was there.
#
# - Headers that must go out as one line per value. RFC 7230 says a sender
#   may only repeat a header if its whole value is a comma-separated list,
#   in which case the repeats can be folded into a single line -- except for
#   Set-Cookie, which RFC 6265 explicitly forbids folding:
#
#     "Origin servers SHOULD NOT fold multiple Set-Cookie header fields into
#     a single header field. The usual mechanism for folding HTTP headers
#     fields (i.e., as defined in [RFC2616]) might change the semantics of
#     the Set-Cookie header field because the %x2C (",") character is used
#     by Set-Cookie in a way that conflicts with such folding."
#
#   Those headers are also never split on commas when read back in.
#
# HeaderRules objects are immutable; extending one gives you a new one, which
# you then hand to Headers(rules=...). So there's no global table for some
# other part of the program to change underneath you.

from ._logger import get_logger
from ._util import normalize_name

__all__ = ["HeaderRules", "DEFAULT_RULES"]

log = get_logger("rules")


# A lone name is a name, not an iterable of one-letter names
def _as_names(names):
    if isinstance(names, (str, bytes)):
        return (names,)
    return names


class HeaderRules:
    """The set of per-name rules a :class:`Headers` collection follows.

    .. attribute:: single_value_names

       A frozenset of normalized header names that can hold at most one
       value.

    .. attribute:: folded_multi_names

       A frozenset of normalized header names that are serialized as one raw
       line per value, and are never split on commas during raw ingestion.

    """

    __slots__ = ("single_value_names", "folded_multi_names")

    def __init__(self, single_value_names=(), folded_multi_names=()):
        single_value_names = _as_names(single_value_names)
        folded_multi_names = _as_names(folded_multi_names)
        object.__setattr__(
            self, "single_value_names",
            frozenset(normalize_name(name) for name in single_value_names))
        object.__setattr__(
            self, "folded_multi_names",
            frozenset(normalize_name(name) for name in folded_multi_names))

    def __setattr__(self, name, value):
        raise AttributeError("HeaderRules objects are immutable")

    # __setattr__ is blocked, so copy and pickle have to go through __init__
    def __reduce__(self):
        return (type(self), (self.single_value_names, self.folded_multi_names))

    def is_single_value(self, name):
        return normalize_name(name) in self.single_value_names

    def is_folded_multi(self, name):
        return normalize_name(name) in self.folded_multi_names

    def with_single_value_names(self, *names):
        log.debug("extending single value header names with %r", names)
        return type(self)(
            self.single_value_names.union(normalize_name(n) for n in names),
            self.folded_multi_names,
        )

    def with_folded_multi_names(self, *names):
        log.debug("extending folded multi value header names with %r", names)
        return type(self)(
            self.single_value_names,
            self.folded_multi_names.union(normalize_name(n) for n in names),
        )

    def __repr__(self):
        return "{}(single_value_names={}, folded_multi_names={})".format(
            self.__class__.__name__,
            sorted(self.single_value_names),
            sorted(self.folded_multi_names),
        )

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return (
            self.single_value_names == other.single_value_names
            and self.folded_multi_names == other.folded_multi_names
        )

    def __hash__(self):
        return hash((self.single_value_names, self.folded_multi_names))


DEFAULT_RULES = HeaderRules(
    single_value_names=["Content-Type", "Location"],
    folded_multi_names=["Set-Cookie"],
)
