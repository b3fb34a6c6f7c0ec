"""
Commandes CLI de recuperation et de verification d'un titre.
"""

import asyncio
import json
from typing import Annotated

import typer
from rich.table import Table

from src.adapters.cli.helpers import console, suppress_loguru, with_container
from src.core.entities.title import OrganizationRole, Title
from src.core.exceptions import AniFetchError, UpstreamError

# Jikan repond 429 quand la limite de requetes est atteinte
RATE_LIMIT_STATUS = 429


def fetch(
    title_id: Annotated[int, typer.Argument(help="ID MyAnimeList du titre")],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Affiche l'agregat complet au format JSON"),
    ] = False,
) -> None:
    """Recupere les details complets d'un titre (metadonnees, personnages, staff)."""
    asyncio.run(_fetch_async(title_id, as_json))


@with_container()
async def _fetch_async(container, title_id: int, as_json: bool) -> None:
    """Implementation async de la commande fetch."""
    service = container.title_service()

    try:
        if as_json:
            # Sortie JSON pure: pas de logs melanges au document
            with suppress_loguru():
                title = await service.get_full_title_details(title_id)
        else:
            title = await service.get_full_title_details(title_id)
    except AniFetchError as e:
        console.print(f"[red]Echec de la recuperation du titre {title_id} : {e}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(title.to_dict(), ensure_ascii=False, indent=2))
        return

    display_title(title)


def verify(
    title_id: Annotated[int, typer.Argument(help="ID MyAnimeList du titre")] = 52991,
) -> None:
    """Verifie la reconstruction complete d'un titre depuis l'API Jikan."""
    asyncio.run(_verify_async(title_id))


@with_container()
async def _verify_async(container, title_id: int) -> None:
    """Implementation async de la commande verify."""
    from src.services.title_checks import run_title_checks

    service = container.title_service()
    console.print(f"[bold cyan]Verification du titre {title_id}[/bold cyan]\n")

    try:
        title = await service.get_full_title_details(title_id)
    except UpstreamError as e:
        if e.status_code == RATE_LIMIT_STATUS:
            console.print("[yellow]⚠ Verification ignoree : limite de requetes atteinte (429)[/yellow]")
            return
        console.print(f"[red]Erreur API : {e}[/red]")
        raise typer.Exit(code=1)
    except AniFetchError as e:
        console.print(f"[red]Reponse invalide : {e}[/red]")
        raise typer.Exit(code=1)

    results = run_title_checks(title, expected_id=title_id)
    for result in results:
        mark = "[green]✓[/green]" if result.passed else "[red]✗[/red]"
        console.print(f"{mark} {result.name} [dim]({result.detail})[/dim]")

    failed = [r for r in results if not r.passed]
    if failed:
        console.print(f"\n[red]{len(failed)} controle(s) en echec[/red]")
        raise typer.Exit(code=1)

    console.print(f"\n[green]Tous les controles sont passes pour : {title.title}[/green]")


def display_title(title: Title) -> None:
    """Affiche un resume lisible de l'agregat."""
    header = title.title or f"#{title.id}"
    if title.title_japanese:
        header += f" ({title.title_japanese})"
    console.print(f"[bold]{header}[/bold]")
    if title.title_english:
        console.print(f"[dim]{title.title_english}[/dim]")

    table = Table(show_header=False, box=None)
    table.add_column("Champ", style="cyan")
    table.add_column("Valeur")
    table.add_row("ID", str(title.id))
    table.add_row("Type", title.type or "-")
    table.add_row("Statut", title.status or "-")
    table.add_row("Episodes", str(title.episodes) if title.episodes is not None else "-")
    table.add_row("Diffusion", title.aired_string or "-")
    table.add_row("Source", title.source or "-")
    table.add_row("Classification", title.rating or "-")
    table.add_row(
        "Score",
        f"{title.stats.score} (#{title.stats.ranked})" if title.stats.score is not None else "-",
    )
    table.add_row("Membres", str(title.stats.members) if title.stats.members is not None else "-")
    table.add_row("Genres", ", ".join(g.name for g in title.genres) or "-")
    table.add_row(
        "Studios",
        ", ".join(o.name for o in title.organizations_with_role(OrganizationRole.STUDIO)) or "-",
    )
    table.add_row("Personnages", str(len(title.characters)))
    table.add_row("Staff", str(len(title.staff)))
    table.add_row("Themes", str(len(title.themes)))
    table.add_row("Relations", str(len(title.related_entries)))
    console.print(table)
