"""Valuation report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from pricegraph.models.reports import ValuationReport

TEMPLATE_DIR = Path(__file__).parent / "templates"


class ValuationReportGenerator:
    """Generates a human-readable valuation of holdings in a base commodity."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)))

    def render(self, report: ValuationReport) -> str:
        template = self.env.get_template("valuation.txt")
        return template.render(report=report)
