"""Generic text codec, for hosts that bind values from plain strings."""

from typing import Self


class TextCodecMixin:
    __slots__ = ()

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Strip surrounding whitespace and construct."""
        return cls(text.strip())

    def to_text(self) -> str:
        return self.raw
