"""Custom exceptions for the web API helpers."""


class WebApiHelperException(Exception):
    """Base exception for webapi_helper."""


class MalformedFormSegmentError(WebApiHelperException, ValueError):
    """A form body segment is not a single ``key=value`` pair."""

    def __init__(self, segment: str, index: int):
        self.segment = segment
        self.index = index
        self.message = f"Malformed form segment {index}: '{segment}' is not a key=value pair"
        super().__init__(self.message)


class UnsupportedFieldTypeError(WebApiHelperException, TypeError):
    """A column cannot take part in a full-text search."""

    def __init__(self, column_name: str, type_name: str):
        self.column_name = column_name
        self.type_name = type_name
        self.message = f"Column '{column_name}' of type {type_name} is not full-text searchable"
        super().__init__(self.message)


class FormBodyDecodeError(WebApiHelperException, ValueError):
    """A request body is not valid text in the configured encoding."""

    def __init__(self, encoding: str, reason: str):
        self.encoding = encoding
        self.reason = reason
        self.message = f"Form body is not valid {encoding}: {reason}"
        super().__init__(self.message)
