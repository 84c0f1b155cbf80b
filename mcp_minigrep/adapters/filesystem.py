"""
Filesystem Document Adapter

Implements DocumentSource port using local files.
"""
import logging
from pathlib import Path

from ..core.domain import Document
from ..core.ports import DocumentSource

logger = logging.getLogger(__name__)


class FileDocumentSource(DocumentSource):
    """Reads UTF-8 text files into Documents"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, location: str | Path) -> Document:
        """Read file at location. Missing files raise FileNotFoundError."""
        path = Path(location)
        text = path.read_text(encoding=self.encoding, errors="replace")
        document = Document.from_text(text)
        logger.debug("read %s (%d lines)", path, len(document))
        return document
