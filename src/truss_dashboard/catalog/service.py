"""Process-wide catalog built lazily from the OpenAPI document.

The catalog is built once, on first access, and reused until the process
exits. A document that is missing or broken yields an empty catalog: that
only disables widget creation, while already configured widgets keep working.
"""

import asyncio
import logging
from typing import Protocol

from truss_dashboard.errors import (
    DocumentNotFoundError,
    DocumentUnavailableError,
    MalformedDocumentError,
)

from .base import Catalog, EndpointInfo, SchemaInfo
from .openapi import parse_document

logger = logging.getLogger(__name__)


class DocumentSource(Protocol):
    async def read_async(self) -> bytes: ...


class CatalogService:
    """Lazy, single-flight owner of the Catalog."""

    def __init__(self, source: DocumentSource):
        self.source = source
        self.extractions = 0
        self._catalog: Catalog | None = None
        self._lock = asyncio.Lock()

    async def get_catalog(self) -> Catalog:
        if self._catalog is not None:
            return self._catalog
        async with self._lock:
            # another caller may have finished the build while we waited
            if self._catalog is None:
                self._catalog = await self._build()
        return self._catalog

    async def get_endpoints(self) -> list[EndpointInfo]:
        return list((await self.get_catalog()).endpoints)

    async def get_schemas(self) -> dict[str, SchemaInfo]:
        return dict((await self.get_catalog()).schemas)

    async def get_endpoints_by_tag(self) -> dict[str, list[EndpointInfo]]:
        """Group endpoints by tag, keeping the catalog's (tag, path) order."""
        groups: dict[str, list[EndpointInfo]] = {}
        for endpoint in (await self.get_catalog()).endpoints:
            groups.setdefault(endpoint.tag, []).append(endpoint)
        return groups

    async def get_schema(self, name: str) -> SchemaInfo | None:
        return (await self.get_catalog()).schemas.get(name)

    async def _build(self) -> Catalog:
        self.extractions += 1
        try:
            raw = await self.source.read_async()
            catalog = parse_document(raw)
        except DocumentNotFoundError as exc:
            logger.warning("%s; widget catalog is empty", exc)
            return Catalog.empty()
        except (DocumentUnavailableError, MalformedDocumentError) as exc:
            logger.error("Failed to parse OpenAPI document: %s", exc)
            return Catalog.empty()

        logger.info(
            "Parsed %d endpoints and %d schemas from OpenAPI document",
            len(catalog.endpoints),
            len(catalog.schemas),
        )
        return catalog
