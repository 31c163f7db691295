"""
Commandes CLI de trakt-api.

- auth url / auth device : obtention d'un access token
- search : recherche textuelle (client async)
- trending movies / trending shows : tendances du moment
"""

from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from trakt_api.adapters.api.errors import ClientSecretNeededError, TraktError
from trakt_api.adapters.cli.helpers import (
    async_command,
    console,
    poll_device_token,
    require_client_id,
    suppress_loguru,
)
from trakt_api.container import Container
from trakt_api.core.value_objects import SearchItemType, SearchType

OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"

auth_app = typer.Typer(help="Authentification OAuth")
trending_app = typer.Typer(help="Films et series tendance")


@auth_app.command("url")
def auth_url(
    redirect_uri: Annotated[
        str, typer.Option("--redirect-uri", help="URI de redirection de l'application")
    ] = OOB_REDIRECT_URI,
    state: Annotated[
        Optional[str], typer.Option("--state", help="Valeur opaque renvoyee par Trakt")
    ] = None,
) -> None:
    """Affiche l'URL d'autorisation OAuth."""
    container = Container()
    require_client_id(container.config())
    typer.echo(container.client().oauth_authorize_url(redirect_uri, state))


@auth_app.command("device")
def auth_device() -> None:
    """Obtient un access token via le flux device (code a saisir sur trakt.tv)."""
    container = Container()
    require_client_id(container.config())
    client = container.client()

    try:
        device = client.oauth_device_code()
        console.print(
            Panel(
                f"Ouvrez [bold]{device.verification_url}[/bold] "
                f"et saisissez le code [bold cyan]{device.user_code}[/bold cyan]",
                title="Autorisation Trakt",
            )
        )
        token = poll_device_token(client, device)
    except ClientSecretNeededError:
        console.print("[red]Erreur: TRAKT_CLIENT_SECRET est requis pour ce flux[/red]")
        raise typer.Exit(1)
    except TimeoutError:
        console.print("[red]Erreur: le code a expire avant validation[/red]")
        raise typer.Exit(1)
    except TraktError as exc:
        console.print(f"[red]Erreur Trakt: {exc}[/red]")
        raise typer.Exit(1)

    console.print("[green]Autorisation accordee[/green]")
    typer.echo(f"access_token: {token.access_token}")
    typer.echo(f"refresh_token: {token.refresh_token}")


def _parse_search_type(value: str) -> SearchType:
    try:
        items = [SearchItemType(part.strip()) for part in value.split(",") if part.strip()]
        return SearchType.of(*items)
    except ValueError:
        valid = ", ".join(item.value for item in SearchItemType)
        console.print(f"[red]Erreur: type invalide '{value}' (valeurs: {valid})[/red]")
        raise typer.Exit(1)


@async_command
async def search(
    query: Annotated[str, typer.Argument(help="Texte a rechercher")],
    item_type: Annotated[
        str, typer.Option("--type", "-t", help="Types separes par des virgules")
    ] = "movie,show",
    limit: Annotated[int, typer.Option("--limit", "-n", help="Nombre de resultats")] = 10,
) -> None:
    """Recherche des films, series, episodes, personnes ou listes."""
    container = Container()
    require_client_id(container.config())
    search_type = _parse_search_type(item_type)

    try:
        async with container.async_client() as client:
            results = await client.search(search_type, query).limit(limit).execute()
    except TraktError as exc:
        console.print(f"[red]Erreur Trakt: {exc}[/red]")
        raise typer.Exit(1)

    if not results:
        console.print("[yellow]Aucun resultat[/yellow]")
        return

    table = Table(title=f"Recherche : {query}")
    table.add_column("Type")
    table.add_column("Titre")
    table.add_column("Annee", justify="right")
    table.add_column("Score", justify="right")
    for result in results:
        item = getattr(result, result.item_type.value)
        title = getattr(item, "title", None) or getattr(item, "name", "")
        year = getattr(item, "year", None)
        score = f"{result.score:.1f}" if result.score is not None else ""
        table.add_row(result.item_type.value, title, str(year or ""), score)

    with suppress_loguru():
        console.print(table)


def _trending(kind: str, limit: int, page: int) -> None:
    container = Container()
    require_client_id(container.config())
    client = container.client()

    try:
        if kind == "movies":
            entries = client.movies_trending().page(page).limit(limit).execute()
            rows = [(entry.watchers, entry.movie) for entry in entries]
        else:
            entries = client.shows_trending().page(page).limit(limit).execute()
            rows = [(entry.watchers, entry.show) for entry in entries]
    except TraktError as exc:
        console.print(f"[red]Erreur Trakt: {exc}[/red]")
        raise typer.Exit(1)

    title = "Films tendance" if kind == "movies" else "Series tendance"
    if entries.page_count:
        title += f" (page {entries.page}/{entries.page_count})"
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Titre")
    table.add_column("Annee", justify="right")
    table.add_column("Spectateurs", justify="right")
    for rank, (watchers, item) in enumerate(rows, start=(page - 1) * limit + 1):
        table.add_row(str(rank), item.title, str(item.year or ""), str(watchers))

    with suppress_loguru():
        console.print(table)


@trending_app.command("movies")
def trending_movies(
    limit: Annotated[int, typer.Option("--limit", "-n", help="Elements par page")] = 10,
    page: Annotated[int, typer.Option("--page", "-p", help="Page (a partir de 1)")] = 1,
) -> None:
    """Films les plus regardes en ce moment."""
    _trending("movies", limit, page)


@trending_app.command("shows")
def trending_shows(
    limit: Annotated[int, typer.Option("--limit", "-n", help="Elements par page")] = 10,
    page: Annotated[int, typer.Option("--page", "-p", help="Page (a partir de 1)")] = 1,
) -> None:
    """Series les plus regardees en ce moment."""
    _trending("shows", limit, page)
