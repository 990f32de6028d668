"""Shared file handling for the format parsers."""

from pathlib import Path
from typing import Any, Tuple


class BaseParser:
    """Reads a file from disk and hands its content to ``parse_string``."""

    SUFFIXES: Tuple[str, ...] = ()

    def parse(self, file_path: str) -> Any:
        """
        Parse a localization file from disk.

        Args:
            file_path: Path to the file

        Returns:
            Whatever ``parse_string`` returns for this format
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if path.suffix.lower() not in self.SUFFIXES:
            expected = ", ".join(self.SUFFIXES)
            raise ValueError(f"Expected {expected} file, got: {path.suffix}")

        content = path.read_text(encoding="utf-8-sig")
        return self.parse_string(content, source_name=path.name)

    def parse_string(self, content: str, source_name: str = "<string>") -> Any:
        raise NotImplementedError
