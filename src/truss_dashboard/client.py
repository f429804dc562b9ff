"""HTTP client for the vendor truss-design API."""

import logging
from typing import Any

import requests
from pydantic import ValidationError

from truss_dashboard import config
from truss_dashboard.errors import VendorApiError
from truss_dashboard.models import (
    ComponentDesign,
    ComponentDesignResponse,
    LumberPrice,
    LumberPriceRequest,
    Project,
)

logger = logging.getLogger(__name__)


class ParagonClient:
    """Thin wrapper over requests for the vendor design server."""

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or config.BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        api_key = config.API_KEY if api_key is None else api_key
        if api_key:
            self.session.headers["Authorization"] = f"JWT {api_key}"

    def get(self, path: str, query: dict[str, str] | None = None) -> Any:
        """GET a path and return the decoded JSON body, or None when it is empty.

        Query parameters with empty values are dropped.
        """
        params = {k: v for k, v in (query or {}).items() if v}
        url = self._url(path)
        logger.info("Making GET request to %s", url)
        try:
            response = self.session.get(url, params=params or None, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("HTTP error calling %s: %s", path, exc)
            raise VendorApiError(f"GET {path} failed: {exc}", status_code=status) from exc
        except requests.RequestException as exc:
            logger.error("Error calling API endpoint %s: %s", path, exc)
            raise VendorApiError(f"GET {path} failed: {exc}") from exc

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise VendorApiError(f"GET {path} returned invalid JSON") from exc

    def health_check(self) -> bool:
        try:
            response = self.session.get(self._url(config.HEALTH_CHECK_PATH), timeout=self.timeout)
        except requests.RequestException:
            return False
        return response.ok

    def get_projects(self) -> list[Project]:
        try:
            data = self.get("/api/public/projects")
            return [Project.model_validate(p) for p in data or []]
        except (VendorApiError, ValidationError, TypeError) as exc:
            logger.error("Failed to fetch projects: %s", exc)
            return []

    def get_component_design(self, guid: str) -> ComponentDesign | None:
        try:
            data = self.get(f"/api/ComponentDesigns/{guid}")
            if data is None:
                return None
            return ComponentDesignResponse.model_validate(data).component_design
        except (VendorApiError, ValidationError) as exc:
            logger.error("Failed to fetch component design for %s: %s", guid, exc)
            return None

    def get_plate_type_properties(self, plate_type: str) -> dict | None:
        try:
            data = self.get(f"/api/PlatePairs/getPlateTypeProperties/{plate_type}")
        except VendorApiError as exc:
            logger.error("Failed to fetch plate type properties for %s: %s", plate_type, exc)
            return None
        return data if isinstance(data, dict) else None

    def get_lumber_prices(self, request: LumberPriceRequest) -> list[LumberPrice]:
        """Most recent prices for every stock length of the given lumber."""
        url = self._url("/api/LumberPrices/mostRecent/forAllStockLengths")
        try:
            response = self.session.post(
                url, json=request.model_dump(mode="json", by_alias=True), timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.error("Failed to fetch lumber prices: %s", exc)
            return []
        if not response.ok:
            logger.warning("Failed to fetch prices. Status: %s", response.status_code)
            return []
        try:
            return [LumberPrice.model_validate(p) for p in response.json() or []]
        except (ValueError, TypeError) as exc:
            logger.error("Failed to decode lumber prices: %s", exc)
            return []

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"
