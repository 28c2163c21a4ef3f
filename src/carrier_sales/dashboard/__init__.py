"""Metrics dashboard page (Jinja2 template + Chart.js)."""

from carrier_sales.dashboard.renderer import DashboardRenderer

__all__ = ["DashboardRenderer"]
