__all__ = [
    "HeaderError",
    "InvalidRawHeaderError",
    "InvalidNameValuePairError",
    "normalize_name",
    "validate",
    "stringify",
    "textify",
    "is_null_or_empty",
    "ends_with_invariant_case",
]


class HeaderError(Exception):
    """Exception indicating that some header input could not be understood.

    This is an abstract base class, with two concrete subclasses:
    :exc:`InvalidRawHeaderError`, raised when a raw header line has no
    ``:`` separating the name from the value, and
    :exc:`InvalidNameValuePairError`, raised when a name/value pair has no
    name. Both also inherit from :exc:`ValueError`.

    Almost everything else is accepted and normalized (name case folding,
    value trimming, empty value coalescing) rather than rejected.

    In addition to the normal :exc:`Exception` features, it has one attribute:

    .. attribute:: error_status_hint

       This gives a suggestion as to what status code a server might use if
       this error occurred while ingesting a request. The default is 400 Bad
       Request.

    """

    def __init__(self, msg, error_status_hint=400):
        if type(self) is HeaderError:
            raise TypeError("tried to directly instantiate HeaderError")
        Exception.__init__(self, msg)
        self.error_status_hint = error_status_hint


class InvalidRawHeaderError(HeaderError, ValueError):
    pass


class InvalidNameValuePairError(HeaderError, ValueError):
    pass


# Header names are case-insensitive. We pick one spelling and use it as the
# dict key everywhere: capitalized, hyphenated (content-TYPE -> Content-Type).
# Any string is acceptable here; validity of the name is not our business.
def normalize_name(name):
    return "-".join(
        segment[:1].upper() + segment[1:]
        for segment in textify(name).lower().split("-")
    )


def validate(regex, data, msg="malformed data", error_cls=InvalidRawHeaderError):
    match = regex.fullmatch(data)
    if not match:
        raise error_cls(msg)
    return match.groupdict()


# Header text on the wire is ISO-8859-1 (RFC 7230 obs-text is opaque octets),
# so that's what we use to get from bytes-like objects to native strings.
def textify(s):
    if isinstance(s, str):
        return s
    if isinstance(s, int):
        raise TypeError("expected str or bytes-like object, not int")
    return bytes(s).decode("iso-8859-1")


# Turns any header value into a native string:
#   None -> ""
#   bools -> "true" / "false"
#   lists and tuples -> each element stringified, then joined with ","
#   callables -> called, then the result stringified (deferred values).
#     Classes are callable too, but they are values, not deferred ones.
#   everything else -> str()
def stringify(value):
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool is a subclass of int, so this has to come before the fallback
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return textify(value)
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    if callable(value) and not isinstance(value, type):
        return stringify(value())
    return str(value)


def is_null_or_empty(s):
    return s is None or s == ""


def ends_with_invariant_case(haystack, needle):
    return haystack.lower().endswith(needle.lower())
