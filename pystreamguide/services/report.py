from typing import Iterable, List

from rich.table import Table

from pystreamguide.dto.channel import ChannelEntity


def build_channel_table(
    channels: List[ChannelEntity], favorites: Iterable[str], title: str = "Channels"
) -> Table:
    favorite_ids = set(favorites)
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Status")
    table.add_column("Fav", justify="center")

    for ch in channels:
        if ch.embed_url:
            status = "[green]embed[/green]"
        elif ch.stream_url:
            status = "[green]stream[/green]"
        else:
            status = "[dim]no stream[/dim]"
        table.add_row(
            ch.id,
            ch.name,
            ch.category or "",
            status,
            "*" if ch.id in favorite_ids else "",
        )
    return table
