import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from PySide6.QtWidgets import QFileDialog

log = logging.getLogger(__name__)

PNG_FILTER = "png files (*.png)"


class ExportError(Exception):
    pass


class ExportStatus(Enum):
    SAVED = "saved"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class ExportResult:
    status: ExportStatus
    path: Path = None
    error: str = None

    @classmethod
    def saved(cls, path):
        return cls(ExportStatus.SAVED, path=Path(path))

    @classmethod
    def cancelled(cls):
        return cls(ExportStatus.CANCELLED)

    @classmethod
    def failed(cls, error):
        return cls(ExportStatus.FAILED, error=error)

    @property
    def ok(self):
        return self.status is ExportStatus.SAVED


class PngExporter:
    """Asks the user where to save and writes the snapshot there as PNG."""

    def __init__(self, parent=None, directory=""):
        self.parent = parent
        self.directory = directory

    def request_path(self):
        path, _ = QFileDialog.getSaveFileName(self.parent, "Save Image", self.directory, PNG_FILTER)
        return path or None

    def write(self, image, path):
        path = Path(path)
        if path.suffix.lower() != ".png":
            path = path.with_name(path.name + ".png")
        log.info("[save] Saving to %s", path)
        if not image.save(str(path), "PNG"):
            raise ExportError(f"Could not save to {path}")
        return path
