"""An ingested localization file."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..errors import ParseError


@dataclass(frozen=True)
class Source:
    """
    Raw content of one file contributing to a catalog.

    The file name selects the parser by extension. The language code is
    required for single-language formats and ignored for String Catalogs.
    """

    name: str
    content: str
    language_code: Optional[str] = None

    @property
    def suffix(self) -> str:
        return Path(self.name).suffix.lower()

    @classmethod
    def from_path(cls, file_path: str, language_code: Optional[str] = None) -> "Source":
        """
        Read a file from disk.

        Args:
            file_path: Path to the localization file
            language_code: Explicit language; inferred from the path when omitted

        Returns:
            Source with the file's name and UTF-8 content
        """
        # Local import: formats depends on the parsers which depend on models
        from ..extraction.formats import guess_language_code

        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            content = path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(path.name, f"Not valid UTF-8: {e.reason} at byte {e.start}") from e
        return cls(
            name=path.name,
            content=content,
            language_code=language_code or guess_language_code(str(path)) or None,
        )
