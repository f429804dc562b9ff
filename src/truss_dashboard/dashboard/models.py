"""Dashboard and widget configuration models."""

import uuid
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class WidgetType(str, Enum):
    DATA_TABLE = "DataTable"
    BAR_CHART = "BarChart"
    LINE_CHART = "LineChart"
    PIE_CHART = "PieChart"
    KPI_CARD = "KpiCard"


class WidgetConfig(BaseModel):
    """A single dashboard panel, placed on a 12-column grid."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=_new_id)
    title: str = "New Widget"
    type: WidgetType = WidgetType.DATA_TABLE

    row: int = Field(1, ge=1)
    column: int = Field(1, ge=1)
    width: int = Field(6, ge=1, le=12)
    height: int = Field(2, ge=1)

    endpoint_path: str | None = None
    endpoint_template: str | None = None  # e.g. /api/users/{id}
    endpoint_method: str = "GET"
    display_fields: list[str] = Field(default_factory=list)
    filters: dict[str, str] = Field(default_factory=dict)

    x_axis_field: str | None = None
    y_axis_field: str | None = None
    value_field: str | None = None  # KPI cards
    label_field: str | None = None  # pie charts

    refresh_interval_seconds: int = Field(0, ge=0)  # 0 = no auto-refresh


class DashboardConfiguration(BaseModel):
    id: str = Field(default_factory=_new_id)
    name: str = "My Dashboard"
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)
    widgets: list[WidgetConfig] = Field(default_factory=list)

    def touch(self) -> None:
        self.updated_at = _now()
