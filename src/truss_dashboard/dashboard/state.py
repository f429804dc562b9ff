"""In-memory dashboard store.

Dashboards live only for the lifetime of the process; nothing is written to
disk.
"""

import logging
from collections.abc import Callable

from pydantic import ValidationError

from truss_dashboard.errors import WidgetConfigError

from .models import DashboardConfiguration, WidgetConfig

logger = logging.getLogger(__name__)

DEFAULT_DASHBOARD_NAME = "My Dashboard"


class DashboardStore:
    """Holds dashboards, tracks the current one and notifies listeners on change."""

    def __init__(self):
        self._dashboards: list[DashboardConfiguration] = []
        self._current: DashboardConfiguration | None = None
        self._listeners: list[Callable[[], None]] = []

    @property
    def current(self) -> DashboardConfiguration | None:
        return self._current

    def subscribe(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def list_dashboards(self) -> list[DashboardConfiguration]:
        return list(self._dashboards)

    def get_or_create_default(self) -> DashboardConfiguration:
        if not self._dashboards:
            self._dashboards.append(DashboardConfiguration(name=DEFAULT_DASHBOARD_NAME))
            logger.debug("Created default dashboard")
        self._current = self._dashboards[0]
        return self._current

    def set_current(self, dashboard_id: str) -> DashboardConfiguration | None:
        self._current = self._find(dashboard_id)
        self._notify()
        return self._current

    def create_dashboard(self, name: str) -> DashboardConfiguration:
        dashboard = DashboardConfiguration(name=name)
        self._dashboards.append(dashboard)
        self._current = dashboard
        self._notify()
        return dashboard

    def delete_dashboard(self, dashboard_id: str) -> None:
        self._dashboards = [d for d in self._dashboards if d.id != dashboard_id]
        if self._current is not None and self._current.id == dashboard_id:
            self._current = self._dashboards[0] if self._dashboards else None
        self._notify()

    def add_widget(self, widget: WidgetConfig) -> None:
        """Add a widget to the current dashboard, creating the default one if needed."""
        if widget.endpoint_method.upper() != "GET":
            raise WidgetConfigError(
                f"Widgets can only read GET endpoints, got {widget.endpoint_method}"
            )
        dashboard = self._current or self.get_or_create_default()
        dashboard.widgets.append(widget)
        dashboard.touch()
        self._notify()

    def update_widget(self, widget: WidgetConfig) -> bool:
        dashboard = self._current
        if dashboard is None:
            return False
        for i, existing in enumerate(dashboard.widgets):
            if existing.id == widget.id:
                dashboard.widgets[i] = widget
                dashboard.touch()
                self._notify()
                return True
        return False

    def remove_widget(self, widget_id: str) -> None:
        dashboard = self._current
        if dashboard is None:
            return
        dashboard.widgets = [w for w in dashboard.widgets if w.id != widget_id]
        dashboard.touch()
        self._notify()

    def move_widget(self, widget_id: str, row: int, column: int) -> bool:
        widget = self._find_widget(widget_id)
        if widget is None:
            return False
        self._place(widget, row=row, column=column)
        return True

    def resize_widget(self, widget_id: str, width: int, height: int) -> bool:
        widget = self._find_widget(widget_id)
        if widget is None:
            return False
        self._place(widget, width=width, height=height)
        return True

    def _place(self, widget: WidgetConfig, **layout: int) -> None:
        # a rejected layout leaves the widget unchanged
        try:
            WidgetConfig.model_validate(widget.model_dump() | layout)
        except ValidationError as exc:
            raise WidgetConfigError(f"Invalid widget layout {layout}: {exc}") from exc
        for field, value in layout.items():
            setattr(widget, field, value)
        self._current.touch()

    def _find(self, dashboard_id: str) -> DashboardConfiguration | None:
        return next((d for d in self._dashboards if d.id == dashboard_id), None)

    def _find_widget(self, widget_id: str) -> WidgetConfig | None:
        if self._current is None:
            return None
        return next((w for w in self._current.widgets if w.id == widget_id), None)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener()
