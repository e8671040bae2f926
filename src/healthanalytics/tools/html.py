"""HTML report export."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import DictLoader, Environment, select_autoescape

from healthanalytics.templates.report_template import REPORT_TEMPLATE


if TYPE_CHECKING:
    from healthanalytics.core.models import AnalyticsReport

logger = logging.getLogger(__name__)
DEFAULT_TEMPLATE = "report.html"


class HTMLExporter:
    """Renders an AnalyticsReport to a standalone HTML page."""

    def __init__(self, templates: dict[str, str] | None = None) -> None:
        self._templates = templates or {DEFAULT_TEMPLATE: REPORT_TEMPLATE}
        self._env: Environment | None = None

    def _get_env(self) -> Environment:
        if self._env is None:
            self._env = Environment(
                loader=DictLoader(self._templates),
                autoescape=select_autoescape(["html", "xml"]),
            )
        return self._env

    def render(self, data: dict[str, Any], template_name: str = DEFAULT_TEMPLATE) -> str:
        template = self._get_env().get_template(template_name)
        return template.render(**data)

    def export(
        self, report: AnalyticsReport, output_path: str | Path, template_name: str = DEFAULT_TEMPLATE
    ) -> Path:
        """Write the report as HTML and return the absolute output path."""
        html_content = self.render(report.to_template_data(), template_name)
        output = Path(output_path)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(html_content, encoding="utf-8")
        logger.info("Wrote HTML report to %s (%d bytes)", output, len(html_content))
        return output.absolute()
