"""Document Export Service - renders translations to PDF and saves them."""

import logging
from pathlib import Path

from PySide6.QtCore import QBuffer, QIODevice
from PySide6.QtGui import QFont, QPageSize, QPdfWriter, QTextDocument

logger = logging.getLogger(__name__)


class DocumentExporter:
    """
    Converts translated text to a downloadable PDF.

    PDFs are rendered in memory so the caller decides where the bytes go;
    download() stores them in the configured download directory.
    """

    FONT_POINT_SIZE = 12

    def __init__(self, download_dir: Path):
        """
        Initialize exporter.

        Args:
            download_dir: Directory that download() writes into.
        """
        self.download_dir = Path(download_dir)

    def generate_pdf(self, text: str, filename: str) -> bytes:
        """
        Render plain text into an A4 PDF.

        Args:
            text: Text to render.
            filename: Used as the document title.

        Returns:
            The PDF file contents.
        """
        buffer = QBuffer()
        buffer.open(QIODevice.OpenModeFlag.WriteOnly)

        writer = QPdfWriter(buffer)
        writer.setPageSize(QPageSize(QPageSize.PageSizeId.A4))
        writer.setTitle(Path(filename).stem)
        writer.setCreator("LinguBridge")

        document = QTextDocument()
        font = QFont()
        font.setPointSize(self.FONT_POINT_SIZE)
        document.setDefaultFont(font)
        document.setPlainText(text)
        document.print_(writer)

        # The writer must be gone before the buffer holds a complete file
        del writer
        data = bytes(buffer.data())
        buffer.close()
        return data

    def download(self, blob: bytes, filename: str) -> Path:
        """
        Save bytes under filename in the download directory.

        Existing files are never overwritten; a numbered suffix is added instead.

        Returns:
            Path of the written file.
        """
        self.download_dir.mkdir(parents=True, exist_ok=True)
        target = self._unique_path(self.download_dir / filename)
        target.write_bytes(blob)
        logger.info("Saved %d bytes to %s", len(blob), target)
        return target

    @staticmethod
    def _unique_path(path: Path) -> Path:
        if not path.exists():
            return path
        counter = 1
        while True:
            candidate = path.with_name(f"{path.stem} ({counter}){path.suffix}")
            if not candidate.exists():
                return candidate
            counter += 1
