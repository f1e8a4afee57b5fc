"""The generated static stylesheet on disk."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileInfo:
    exists: bool
    path: str
    url: str
    version: int  # mtime in nanoseconds, used for cache busting


class StylesheetFile:
    """Writes and describes ``<directory>/<slug>.css``.

    File information is cached until :meth:`clear_cache` is called, which
    every write and removal does.
    """

    def __init__(self, directory: str | Path, slug: str, base_url: str = "") -> None:
        self.directory = Path(directory)
        self.slug = slug
        self.base_url = base_url.rstrip("/")
        self._info: FileInfo | None = None

    @property
    def filename(self) -> str:
        return f"{self.slug}.css"

    @property
    def path(self) -> Path:
        return self.directory / self.filename

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.slug}/{self.filename}"

    def info(self) -> FileInfo:
        """Return existence, path, url and version; empty files count as absent."""
        if self._info is None:
            try:
                stat = self.path.stat()
            except OSError:
                stat = None
            exists = stat is not None and stat.st_size > 0
            self._info = FileInfo(
                exists=exists,
                path=str(self.path),
                url=self.url,
                version=stat.st_mtime_ns if exists else 0,
            )
        return self._info

    def clear_cache(self) -> None:
        self._info = None

    def read(self) -> str:
        """Return the file contents, or an empty string if it is missing."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""

    def write(self, css: str) -> bool:
        """Write *css*, creating the directory first. Returns success."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Failed to create directory %s: %s", self.directory, exc)
            return False

        if not os.access(self.directory, os.W_OK):
            logger.error("Directory not writable: %s", self.directory)
            return False

        try:
            self.path.write_text(css, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write CSS file %s: %s", self.path, exc)
            return False
        finally:
            self.clear_cache()

        logger.info("wrote %d bytes to %s", len(css.encode("utf-8")), self.path)
        return True

    def remove(self) -> bool:
        """Delete the file and, if then empty, its directory."""
        removed = False
        try:
            self.path.unlink()
            removed = True
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.error("Failed to remove %s: %s", self.path, exc)
        self.clear_cache()

        try:
            self.directory.rmdir()
        except OSError:
            # Missing or not empty.
            pass
        return removed
