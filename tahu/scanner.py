"""Character cursor over source text that tracks line, column and offset."""

from __future__ import annotations

from tahu.span import FileId, Position, Span


class Scanner:
    """A cursor over source text.

    ``current`` is the character under the cursor, or None once the text
    is exhausted. ``position`` is the location of that character.
    """

    def __init__(self, text: str, file_id: FileId) -> None:
        self.text = text
        self.file_id = file_id
        self.position = Position(1, 1, 0)
        self.current: str | None = None
        self.advance()

    def advance(self) -> None:
        """Move past the current character, if there is one."""
        if self.current == "\n":
            self.position = self.position.next_line()
        elif self.current is not None:
            self.position = self.position.next_column()
        offset = self.position.offset
        self.current = self.text[offset] if offset < len(self.text) else None

    def peek_next(self) -> str | None:
        """Return the character after the current one without moving."""
        index = self.position.offset + 1
        return self.text[index] if index < len(self.text) else None

    def span_from(self, start: Position) -> Span:
        """Return the span from ``start`` to the current position."""
        return Span(start, self.position, self.file_id)