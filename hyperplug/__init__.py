# An ordered, case-insensitive, multi-valued collection of HTTP headers that
# knows the wire rules: which headers may only hold one value, which ones must
# be sent as separate lines instead of being folded together with commas, and
# how to read "Name: value" lines back in, with or without splitting the
# values on commas.
#
# There's no I/O here at all. Parsing request/status lines, talking to
# sockets, and encoding bodies are somebody else's job.

from ._util import (
    HeaderError, InvalidRawHeaderError, InvalidNameValuePairError,
    normalize_name, stringify,
)
from ._rules import *
from ._headers import *
from ._content_type import *
from ._version import __version__

__all__ = [
    "HeaderError",
    "InvalidRawHeaderError",
    "InvalidNameValuePairError",
    "normalize_name",
    "stringify",
]
__all__ += _rules.__all__
__all__ += _headers.__all__
__all__ += _content_type.__all__
