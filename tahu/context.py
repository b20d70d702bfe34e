"""Registry of source files referenced by diagnostics."""

from __future__ import annotations

from tahu.span import FileId, SourceFile


class DiagnosticContext:
    """Holds the source files that spans point into."""

    def __init__(self) -> None:
        self._files: dict[FileId, SourceFile] = {}
        self._next_index = 0

    def add_file(self, path: str, content: str) -> FileId:
        """Register a file and return its new identifier."""
        file_id = FileId(self._next_index)
        self._next_index += 1
        self._files[file_id] = SourceFile(file_id, path, content)
        return file_id

    def get_file(self, file_id: FileId) -> SourceFile | None:
        return self._files.get(file_id)

    def file_path(self, file_id: FileId) -> str | None:
        source = self._files.get(file_id)
        return source.path if source is not None else None