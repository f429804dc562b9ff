"""Where the OpenAPI document comes from."""

import asyncio
from pathlib import Path

from truss_dashboard.errors import DocumentNotFoundError, DocumentUnavailableError


class FileDocumentSource:
    """Reads the OpenAPI document from a file on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def read(self) -> bytes:
        if not self.path.is_file():
            raise DocumentNotFoundError(f"OpenAPI document not found at {self.path}")
        try:
            return self.path.read_bytes()
        except OSError as exc:
            raise DocumentUnavailableError(f"Cannot read {self.path}: {exc}") from exc

    async def read_async(self) -> bytes:
        return await asyncio.to_thread(self.read)
