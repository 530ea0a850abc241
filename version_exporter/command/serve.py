import typer
import uvicorn
from loguru import logger

from version_exporter.core import settings

from .utils import configure_logging, split_bind

app = typer.Typer()


@app.command()
def serve(
    bind: str = typer.Option(settings.bind, help="addr to bind the server"),
    debug: bool = typer.Option(settings.DEBUG, help="show debug logs"),
):
    try:
        host, port = split_bind(bind)

    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--bind") from e

    configure_logging(debug)
    logger.info(f"listening on {host}:{port}")

    uvicorn.run(
        "version_exporter.main:app",
        host=host,
        port=port,
        log_level="debug" if debug else "info",
        forwarded_allow_ips="*",
    )
