"""
HTML report for batch verification.

Invalid identifiers are listed first so they are visible without scrolling
through a long file of valid ones.
"""

from __future__ import annotations

from pathlib import Path
from jinja2 import Environment, PackageLoader, select_autoescape
from ..engine.batch import BatchResult

_env = Environment(
    loader=PackageLoader("iso7064.reporting", "templates"),
    autoescape=select_autoescape(),
)


def render_report(result: BatchResult, source: str = "", scheme: str = "") -> str:
    rows = sorted(result.findings, key=lambda f: (f.valid, f.line))
    return _env.get_template("report.html.j2").render(
        result=result, rows=rows, source=source, scheme=scheme
    )


def write_report(result: BatchResult, path: Path, source: str = "", scheme: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_report(result, source, scheme), encoding="utf-8")
