"""
Point d'entrée CLI de trakt-api.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import auth_app, search, trending_app
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="trakt-api",
    help="Client en ligne de commande pour l'API Trakt",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Affiche les requetes HTTP (DEBUG)"),
    ] = False,
) -> None:
    """trakt-api - Client de l'API Trakt v2."""
    settings = get_config()
    configure_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(search)
app.add_typer(auth_app, name="auth")
app.add_typer(trending_app, name="trending")


def get_config() -> Settings:
    """Récupère les paramètres depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration trakt-api")
    typer.echo(f"API : {config.api_url}")
    typer.echo(f"Client ID : {'défini' if config.client_id else 'non défini'}")
    typer.echo(f"Client secret : {'défini' if config.client_secret else 'non défini'}")
    typer.echo(f"Access token : {'défini' if config.auth_enabled else 'non défini'}")
    typer.echo(f"Tentatives sur 429 : {config.max_attempts}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"trakt-api v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
