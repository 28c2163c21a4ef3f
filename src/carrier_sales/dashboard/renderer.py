"""
Dashboard page rendering.

The dashboard is a single HTML page (Chart.js from a CDN) that polls the
metrics snapshot endpoint. Rendering happens once per request from a
Jinja2 template loaded at startup.
"""

from pathlib import Path

import structlog
from jinja2 import Environment, FileSystemLoader, select_autoescape

logger = structlog.get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


class DashboardRenderer:
    """Renders the dashboard HTML page."""

    def __init__(
        self,
        title: str = "Carrier Sales Dashboard",
        metrics_url: str = "/dashboard/metrics",
        refresh_seconds: int = 30,
        templates_dir: Path = TEMPLATES_DIR,
    ):
        self.title = title
        self.metrics_url = metrics_url
        self.refresh_seconds = refresh_seconds

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.jinja_env.get_template("dashboard.html")
        logger.info("Loaded dashboard template", templates_dir=str(templates_dir))

    def render(self) -> str:
        return self.template.render(
            title=self.title,
            metrics_url=self.metrics_url,
            refresh_ms=self.refresh_seconds * 1000,
        )
