"""
Point d'entrée CLI d'AniFetch.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import fetch, verify
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="anifetch",
    help="Récupération et normalisation des métadonnées anime (Jikan)",
)
container = Container()

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """AniFetch - Métadonnées anime depuis Jikan."""
    if quiet:
        state["quiet"] = True
        logger.disable("src")
    else:
        state["verbose"] = verbose


app.command()(fetch)
app.command()(verify)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration AniFetch")
    typer.echo(f"API Jikan : {config.jikan_base_url}")
    typer.echo(f"Type de média : {config.media_type}")
    typer.echo(f"Intervalle entre requêtes : {config.request_interval} s")
    typer.echo(f"Timeout : {config.request_timeout} s")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"AniFetch v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Démarrage d'AniFetch", version=__version__)

    app()


if __name__ == "__main__":
    main()
