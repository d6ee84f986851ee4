"""crud-api CLI — start either service under uvicorn."""

import typer
import uvicorn

from . import __version__
from .config import get_settings
from .core.domain_types import ServiceName

app = typer.Typer(help="crud-api - mock users and in-memory todos services", no_args_is_help=True)

TARGETS = {
    ServiceName.USERS: "crud_api.main:users_app",
    ServiceName.TODOS: "crud_api.main:todos_app",
}


def version_callback(v: bool) -> None:
    if v:
        typer.echo(f"v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Each command binds its own listener; the two services never share a process."""


def _serve(service: ServiceName, host: str | None, port: int | None) -> None:
    settings = get_settings()
    if host is None:
        host = settings.host
    if port is None:
        port = settings.port
    typer.echo(f"Listening on http://{host}:{port}")
    uvicorn.run(
        TARGETS[service], host=host, port=port,
        log_level=settings.log_level.lower(),
    )


@app.command("users")
def users(
    host: str | None = typer.Option(None, help="Bind address (default from settings)."),
    port: int | None = typer.Option(None, help="Bind port (default from settings)."),
) -> None:
    """Run the mock users service."""
    _serve(ServiceName.USERS, host, port)


@app.command("todos")
def todos(
    host: str | None = typer.Option(None, help="Bind address (default from settings)."),
    port: int | None = typer.Option(None, help="Bind port (default from settings)."),
) -> None:
    """Run the in-memory todos service."""
    _serve(ServiceName.TODOS, host, port)


if __name__ == "__main__":
    app()
