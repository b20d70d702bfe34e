"""Source positions, spans and source files."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileId:
    """Identifier of a source file registered with a diagnostic context."""

    index: int


@dataclass(frozen=True, order=True)
class Position:
    """A location in a source file: 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int

    def next_line(self) -> Position:
        """Return the position at the start of the following line."""
        return Position(self.line + 1, 1, self.offset + 1)

    def next_column(self) -> Position:
        """Return the position one character further on the same line."""
        return Position(self.line, self.column + 1, self.offset + 1)


@dataclass(frozen=True)
class Span:
    """A range of source text between two positions in one file."""

    start: Position
    end: Position
    file_id: FileId

    @classmethod
    def point(cls, pos: Position, file_id: FileId) -> Span:
        """Return an empty span located at ``pos``."""
        return cls(pos, pos, file_id)

    def merge(self, other: Span) -> Span:
        """Return the smallest span covering both spans."""
        if self.file_id != other.file_id:
            raise ValueError("cannot merge spans from different files")
        return Span(min(self.start, other.start), max(self.end, other.end), self.file_id)

    def contains(self, pos: Position) -> bool:
        """Whether ``pos`` lies within the span, both ends included."""
        return self.start <= pos <= self.end

    def __len__(self) -> int:
        length = self.end.offset - self.start.offset
        if length < 0:
            raise ValueError("span ends before it starts")
        return length

    def __bool__(self) -> bool:
        # An empty span still denotes a location.
        return True


@dataclass
class SourceFile:
    """A source file's text with the offsets at which its lines start."""

    id: FileId
    path: str
    content: str
    lines: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.lines = [0, *(i + 1 for i, ch in enumerate(self.content) if ch == "\n")]

    def line_content(self, line: int) -> str | None:
        """Return the text of a 1-based line, including its newline."""
        index = max(line - 1, 0)
        if index >= len(self.lines):
            return None
        start = self.lines[index]
        end = self.lines[index + 1] if index + 1 < len(self.lines) else len(self.content)
        return self.content[start:end]

    def span_content(self, span: Span) -> str | None:
        """Return the text a span covers, or None if it is out of range."""
        start, end = span.start.offset, span.end.offset
        if start > end or end > len(self.content):
            return None
        return self.content[start:end]