"""Diagnostics: messages about source code with locations and fixes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from tahu.severity import Severity
from tahu.span import Span
from tahu.suggestion import Suggestion


@dataclass(frozen=True)
class RelatedDiagnostic:
    """A secondary location mentioned by a diagnostic."""

    span: Span
    message: str


@dataclass
class Diagnostic:
    """A message with severity, optional location, suggestions and notes.

    The ``with_*`` methods return an updated copy, leaving the original as it was.
    """

    severity: Severity
    message: str
    span: Span | None = None
    suggestions: list[Suggestion] = field(default_factory=list)
    related: list[RelatedDiagnostic] = field(default_factory=list)
    note: str | None = None

    @classmethod
    def error(cls, message: str) -> Diagnostic:
        return cls(Severity.ERROR, message)

    @classmethod
    def warning(cls, message: str) -> Diagnostic:
        return cls(Severity.WARNING, message)

    @classmethod
    def info(cls, message: str) -> Diagnostic:
        return cls(Severity.INFO, message)

    def with_span(self, span: Span) -> Diagnostic:
        return replace(self, span=span)

    def with_suggestion(self, suggestion: Suggestion) -> Diagnostic:
        return replace(self, suggestions=[*self.suggestions, suggestion])

    def with_suggestions(self, suggestions: list[Suggestion]) -> Diagnostic:
        return replace(self, suggestions=[*self.suggestions, *suggestions])

    def with_related(self, span: Span, message: str) -> Diagnostic:
        return replace(self, related=[*self.related, RelatedDiagnostic(span, message)])

    def with_note(self, note: str) -> Diagnostic:
        return replace(self, note=note)

    def has_fixes(self) -> bool:
        """Whether any suggestion carries a concrete replacement."""
        return any(s.replacements for s in self.suggestions)