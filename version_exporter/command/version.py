import typer

from version_exporter.core import settings

app = typer.Typer()


@app.command()
def version():
    typer.echo(f"version_exporter version {settings.VERSION}")
