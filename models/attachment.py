# -*- coding: utf-8 -*-
"""
Attachment model for files added to a report.
"""

from dataclasses import dataclass
from typing import Any, Optional
import mimetypes
import os


@dataclass(frozen=True)
class Attachment:
    """
    A binary attachment (photo) collected by the report wizard.

    ``handle`` is whatever the attachment source supplies (a file path or an
    open binary stream). The wizard never reads its contents.
    """

    handle: Any
    mime_type: str
    size_bytes: int
    file_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Name shown in admission messages."""
        if self.file_name:
            return self.file_name
        if isinstance(self.handle, (str, os.PathLike)):
            return os.path.basename(os.fspath(self.handle))
        return getattr(self.handle, "name", None) or "attachment"

    @property
    def size_mb(self) -> float:
        return round(self.size_bytes / (1024 * 1024), 2)

    @classmethod
    def from_path(cls, file_path: str) -> "Attachment":
        """Build an attachment from file metadata only (size and guessed type)."""
        mime_type = mimetypes.guess_type(file_path)[0] or "application/octet-stream"
        return cls(
            handle=file_path,
            mime_type=mime_type,
            size_bytes=os.stat(file_path).st_size,
            file_name=os.path.basename(file_path),
        )

    def to_dict(self) -> dict:
        """Metadata-only view (no contents)."""
        return {
            "file_name": self.display_name,
            "mime_type": self.mime_type,
            "size_bytes": self.size_bytes,
        }
