import typer

from .serve import app as serve_app
from .version import app as version_app

app = typer.Typer(help="Prometheus exporter reporting whether a newer stable GitHub release exists.")

app.add_typer(serve_app)
app.add_typer(version_app)
