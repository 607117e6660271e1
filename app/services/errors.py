from enum import Enum


class SearchErrorKind(str, Enum):
    TRANSPORT = "transport"
    PARSE = "parse"


class SearchError(Exception):
    """A book search that produced no usable results.

    ``kind`` tells callers whether the upstream fetch failed or the body
    could not be understood; both are fatal for the request.
    """

    kind: SearchErrorKind

    def __init__(self, message: str, kind: SearchErrorKind):
        super().__init__(message)
        self.kind = kind


class TransportError(SearchError):
    def __init__(self, message: str):
        super().__init__(message, SearchErrorKind.TRANSPORT)


class ParseError(SearchError):
    def __init__(self, message: str):
        super().__init__(message, SearchErrorKind.PARSE)
