"""Transcript file reader using markitdown for non-text documents."""

import logging
from pathlib import Path

from markitdown import MarkItDown

logger = logging.getLogger(__name__)

PLAIN_TEXT_EXTENSIONS = {".txt", ".text", ".md"}


class TranscriptReader:
    """Reads transcript exports into text, converting rich documents with markitdown."""

    def __init__(self, markitdown: MarkItDown):
        self.markitdown = markitdown
        self.supported_extensions = PLAIN_TEXT_EXTENSIONS | {
            ".docx",
            ".pdf",
            ".html",
            ".htm",
        }

    def read(self, file_path: str) -> str:
        """
        Read a transcript file as text.

        Plain text exports are decoded as strict UTF-8 and returned unchanged,
        so an unfiltered render reproduces the file exactly.

        Args:
            file_path: Path to the transcript export

        Returns:
            Transcript text

        Raises:
            ValueError: If the file type is not supported
            UnicodeDecodeError: If a plain text file is not valid UTF-8
        """
        suffix = Path(file_path).suffix.lower()
        if suffix not in self.supported_extensions:
            raise ValueError(f"Unsupported transcript format: {suffix or '(none)'}")

        if suffix in PLAIN_TEXT_EXTENSIONS:
            # newline="" keeps \r\n intact
            with open(file_path, encoding="utf-8", newline="") as f:
                return f.read()

        logger.info("Converting %s with markitdown", file_path)
        result = self.markitdown.convert(file_path)
        return result.text_content
