"""Errors raised by URL construction."""


class InvalidURLSyntax(ValueError):
    """Text that does not validate as a URI reference."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"invalid URL syntax {text!r}: {reason}")

    def __reduce__(self):
        return type(self), (self.text, self.reason)


class InvalidURLLiteral(BaseException):
    """
    Raised by must_parse for a literal that is not a valid URL.

    Derives from BaseException so generic ``except Exception`` handlers
    let it through. Catching it is a programming error.
    """
