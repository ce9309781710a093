"""
Service layer: the fetchers consumed by the presentation layer.
"""

from .dashboard import DashboardService, get_dashboard_service, store_operation

__all__ = ["DashboardService", "get_dashboard_service", "store_operation"]
