"""CLI startup entrypoint for Auto Bag Renamer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich import print
from rich.logging import RichHandler

from bag_renamer import __version__
from bag_renamer.config import settings
from bag_renamer.configuration import (
    ConfigStore,
    ConfigurationError,
    RenamerConfig,
    default_config,
    load_config,
    migrate_document,
    read_document,
)
from bag_renamer.formatter import format_bag_name
from bag_renamer.grid import position_to_grid
from bag_renamer.host import ManualTickScheduler
from bag_renamer.models import BuildEvent, Vector3
from bag_renamer.renamer import BagRenamer
from bag_renamer.world_file import load_world_fixture

app = typer.Typer(help="Auto Bag Renamer tooling")


def _configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _load(config_path: str | None) -> RenamerConfig:
    try:
        return load_config(config_path or settings.config_path)
    except ConfigurationError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)


@app.callback()
def main(log_level: str = typer.Option(None, help="Override BAG_RENAMER_LOG_LEVEL")) -> None:
    _configure_logging(log_level)


@app.command("show-config")
def show_config(config_path: str = typer.Option(None, help="Path to the plugin config JSON")) -> None:
    """Load (and migrate) the plugin configuration and print it."""
    config = _load(config_path)
    print({"plugin_version": __version__, "config": config.to_document()})


@app.command("migrate-config")
def migrate_config(
    config_path: str = typer.Option(None, help="Path to the plugin config JSON"),
    dry_run: bool = typer.Option(False, help="Print the upgraded document without saving"),
) -> None:
    """Upgrade an older configuration document to the current version."""
    path = Path(config_path or settings.config_path)
    if dry_run:
        if not path.exists():
            print({"config": default_config().to_document(), "saved": False})
            return
        try:
            document = read_document(path)
        except ConfigurationError as exc:
            print({"error": str(exc)})
            raise typer.Exit(code=1)
        print({"config": migrate_document(document), "saved": False})
        return

    config = _load(str(path))
    print({"config": config.to_document(), "saved": True})


@app.command()
def grid(
    x: float = typer.Option(..., help="World X"),
    z: float = typer.Option(..., help="World Z"),
    world_size: int = typer.Option(None, help="Map size; defaults to BAG_RENAMER_WORLD_SIZE"),
) -> None:
    """Print the map grid label for a position."""
    size = world_size or settings.world_size
    print({"grid": position_to_grid(Vector3(x, 0.0, z), size, settings.grid_cell_size)})


@app.command()
def preview(
    template: str = typer.Option(..., help="Bag name format, e.g. '{player} - {grid}'"),
    grid_label: str = typer.Option("", "--grid", help="Value for {grid}"),
    biome: str = typer.Option("", help="Value for {biome}"),
    landmark: str = typer.Option("", help="Value for {landmark}"),
    player: str = typer.Option("", help="Value for {player}"),
) -> None:
    """Format a bag name from literal attribute values."""
    name = format_bag_name(template, {"grid": grid_label, "biome": biome, "landmark": landmark, "player": player})
    print({"bag_name": name, "skipped": not name})


@app.command()
def simulate(
    world_file: str = typer.Argument(..., help="World fixture JSON"),
    config_path: str = typer.Option(None, help="Path to the plugin config JSON"),
) -> None:
    """Place the fixture's sleeping bags in an in-memory world and print their names."""
    try:
        fixture = load_world_fixture(world_file)
    except ConfigurationError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    world = fixture.build_world()
    scheduler = ManualTickScheduler()
    renamer = BagRenamer(
        config_store=ConfigStore(_load(config_path)),
        permissions=fixture.build_permissions(),
        terrain=fixture.build_terrain(),
        registry=world,
        scheduler=scheduler,
        owner=settings.permission_owner,
    )
    renamer.init()

    players = fixture.player_map()
    results = []
    for placement in fixture.placements:
        entity = world.spawn(
            prefab=placement.prefab,
            kind=placement.kind,
            position=Vector3(*placement.position),
            display_name=placement.display_name,
            owner_id=placement.user_id,
        )
        renamer.on_entity_built(BuildEvent(actor=players.get(placement.user_id), entity=entity))
        scheduler.run_pending()
        results.append(
            {
                "entity_id": entity.entity_id,
                "owner": placement.user_id,
                "position": placement.position,
                "display_name": entity.display_name,
            }
        )

    renamer.unload()
    print({"bags": results})


if __name__ == "__main__":
    app()
