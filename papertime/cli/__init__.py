"""PaperTime CLI Package.

Usage:
    python -m papertime.cli recommend papers.json --liked 1706.03762
    python -m papertime.cli filter papers.json --subject "Computer Vision"
    python -m papertime.cli validate config/papertime.yaml
    python -m papertime.cli serve --papers papers.json
"""

import typer

from papertime.cli.recommend import recommend_command
from papertime.cli.filter import filter_command
from papertime.cli.validate import validate_command
from papertime.cli.serve import serve_command

app = typer.Typer(help="PaperTime: arXiv paper recommendations")

app.command(name="recommend")(recommend_command)
app.command(name="filter")(filter_command)
app.command(name="validate")(validate_command)
app.command(name="serve")(serve_command)

__all__ = [
    "app",
    "recommend_command",
    "filter_command",
    "validate_command",
    "serve_command",
]
