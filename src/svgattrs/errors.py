class ParseError:
    """Represents a recoverable problem found while collecting attributes."""

    __slots__ = ("code", "column", "line", "message")

    def __init__(self, code, line=None, column=None, message=None):
        self.code = code
        self.line = line
        self.column = column
        self.message = message or code

    def __repr__(self):
        if self.line is not None and self.column is not None:
            return f"ParseError({self.code!r}, line={self.line}, column={self.column})"
        return f"ParseError({self.code!r})"

    def __str__(self):
        if self.line is not None and self.column is not None:
            if self.message != self.code:
                return f"({self.line},{self.column}): {self.code} - {self.message}"
            return f"({self.line},{self.column}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __eq__(self, other):
        if not isinstance(other, ParseError):
            return NotImplemented
        return self.code == other.code and self.line == other.line and self.column == other.column

    __hash__ = None  # Unhashable since we define __eq__


class StrictModeError(SyntaxError):
    """Raised in strict mode on the first ParseError."""

    def __init__(self, error):
        self.error = error
        super().__init__(str(error))


class AttributeValueError(ValueError):
    """A value could not be parsed for a known attribute.

    Value parsers raise this so the caller can report which attribute was
    wrong without carrying the raw name around.
    """

    def __init__(self, attr, message):
        self.attr = attr
        self.message = message
        super().__init__(f"invalid value for attribute '{attr.spelling}': {message}")


class HrefError(ValueError):
    """An href value could not be used as a reference."""

    # The value is empty or has an empty URI or fragment part
    PARSE_ERROR = "parse-error"
    # A fragment ("#foo") is not allowed here, e.g. <image xlink:href="foo.png">
    FRAGMENT_FORBIDDEN = "fragment-forbidden"
    # A fragment is required, e.g. <use xlink:href="foo.svg#bar">
    FRAGMENT_REQUIRED = "fragment-required"

    def __init__(self, kind, href):
        self.kind = kind
        self.href = href
        super().__init__(f"{kind}: {href!r}")
