"""In-memory production tracking per component."""

import threading
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


class ProductionStatus(str, Enum):
    PENDING = "Pending"
    CUTTING = "Cutting"
    ASSEMBLING = "Assembling"
    PACKING = "Packing"
    SHIPPED = "Shipped"


class ProductionData(BaseModel):
    component_guid: str = ""
    status: ProductionStatus = ProductionStatus.PENDING
    time_in_stages: dict[ProductionStatus, float] = Field(default_factory=dict)  # hours
    labor_cost: Decimal = Decimal("0")
    projected_start_time: datetime | None = None
    projected_end_time: datetime | None = None
    projected_production_date: datetime | None = None


class ProductionTracker:
    """Thread-safe component GUID -> ProductionData map."""

    def __init__(self):
        self._store: dict[str, ProductionData] = {}
        self._lock = threading.Lock()

    def get(self, component_guid: str) -> ProductionData:
        with self._lock:
            if component_guid not in self._store:
                self._store[component_guid] = ProductionData(component_guid=component_guid)
            return self._store[component_guid]

    def update(self, data: ProductionData) -> None:
        if not data.component_guid:
            return
        with self._lock:
            self._store[data.component_guid] = data
