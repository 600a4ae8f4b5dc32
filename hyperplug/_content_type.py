# A Content-Type value, for when you want to ask questions about one rather
# than just pass the string around. It's stringifiable, so an instance can be
# handed straight to Headers.set_header().
#
# Reference: https://tools.ietf.org/html/rfc7231#section-3.1.1.1
#
#   media-type = type "/" subtype *( OWS ";" OWS parameter )
#   parameter  = token "=" ( token / quoted-string )
#
# Type, subtype and parameter names are case-insensitive, so we lowercase
# them. We lowercase parameter values too. That suits charset, which is what
# people compare on, though not every parameter (boundary, for one).

from ._util import ends_with_invariant_case, is_null_or_empty

__all__ = ["ContentType"]


class ContentType:
    """A media type with its parameters, e.g. ``text/html; charset=utf-8``.

    .. attribute:: main_type

       The part before the slash, e.g. ``"text"``.

    .. attribute:: sub_type

       The part after the slash, e.g. ``"html"``.

    .. attribute:: parameters

       A dict of parameter names to values, in the order they appeared.

    """

    JSON = "application/json; charset=utf-8"
    CSS = "text/css; charset=utf-8"
    JAVASCRIPT = "application/javascript; charset=utf-8"
    HTML = "text/html; charset=utf-8"
    XML = "application/xml; charset=utf-8"
    TEXT = "text/plain; charset=utf-8"
    STREAM = "application/octet-stream"
    FORM_MULTIPART = "multipart/form-data"
    FORM_URLENCODED = "application/x-www-form-urlencoded"

    __slots__ = ("main_type", "sub_type", "parameters")

    def __init__(self, main_type, sub_type, parameters=None):
        self.main_type = main_type.lower()
        self.sub_type = sub_type.lower()
        self.parameters = {}
        for name, value in (parameters or {}).items():
            self.parameters[name.lower()] = value.lower()

    @classmethod
    def from_string(cls, s):
        # Returns None if there's no type/subtype to be found
        parts = [part.strip() for part in s.split(";")]
        type_parts = [part for part in parts[0].split("/", 1) if part]
        if len(type_parts) != 2:
            return None
        parameters = {}
        for part in parts[1:]:
            if is_null_or_empty(part):
                continue
            if "=" not in part:
                name, value = part, ""
            else:
                name, value = part.split("=", 1)
            parameters[name.strip()] = value.strip()
        return cls(type_parts[0], type_parts[1], parameters)

    def is_(self, other, include_parameters=False):
        if include_parameters:
            return str(self) == str(other)
        return (
            self.main_type == other.main_type
            and self.sub_type == other.sub_type
        )

    def is_json(self):
        return self.sub_type == "json" or ends_with_invariant_case(
            self.sub_type, "+json"
        )

    def is_xml(self):
        return self.sub_type == "xml"

    def is_plain_text(self):
        return self.main_type == "text" and self.sub_type == "plain"

    def is_stream(self):
        return self.main_type == "application" and self.sub_type == "octet-stream"

    def __str__(self):
        pieces = ["{}/{}".format(self.main_type, self.sub_type)]
        for name, value in self.parameters.items():
            pieces.append("{}={}".format(name, value))
        return "; ".join(pieces)

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, str(self))

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.is_(other, include_parameters=True)

    __hash__ = None
