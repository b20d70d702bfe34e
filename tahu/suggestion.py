"""Suggested fixes attached to diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field

from tahu.span import Span


@dataclass(frozen=True)
class Replacement:
    """Text to put in place of a span."""

    span: Span
    replacement: str


@dataclass
class Suggestion:
    """A hint, optionally carrying concrete text replacements."""

    message: str
    replacements: list[Replacement] = field(default_factory=list)
    applies_to: Span | None = None

    @classmethod
    def simple_replacement(cls, span: Span, message: str, replacement: str) -> Suggestion:
        """Replace the text of ``span`` with ``replacement``."""
        return cls(message, [Replacement(span, replacement)], span)

    @classmethod
    def multi_replacement(cls, message: str, replacements: list[Replacement]) -> Suggestion:
        """A suggestion made of several replacements."""
        return cls(message, list(replacements), None)

    @classmethod
    def hint(cls, message: str) -> Suggestion:
        """A suggestion with no replacement attached."""
        return cls(message)

    @classmethod
    def insert_before(cls, span: Span, message: str, text: str) -> Suggestion:
        """Insert ``text`` at the start of ``span``."""
        return cls(message, [Replacement(Span.point(span.start, span.file_id), text)], span)

    @classmethod
    def insert_after(cls, span: Span, message: str, text: str) -> Suggestion:
        """Insert ``text`` at the end of ``span``."""
        return cls(message, [Replacement(Span.point(span.end, span.file_id), text)], span)