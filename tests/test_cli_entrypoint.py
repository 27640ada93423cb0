from __future__ import annotations

import importlib
import json
from pathlib import Path

import pytest


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("bag_renamer.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_simulate_renames_fixture_bags(tmp_path: Path) -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from bag_renamer.main import app

    fixture = {
        "world_size": 4000,
        "default_biome": "Arid",
        "monuments": [{"prefab": "assets/bundled/prefabs/autospawn/monument/banditcamp.prefab", "position": [-1600, 0, 1300]}],
        "players": [{"user_id": "1", "display_name": "Raider", "permissions": ["autobagrenamer.use"]}],
        "placements": [{"user_id": "1", "position": [-1600, 0, 1300]}, {"user_id": "2", "position": [0, 0, 0]}],
    }
    world_path = tmp_path / "world.json"
    world_path.write_text(json.dumps(fixture), encoding="utf-8")
    config_path = tmp_path / "AutoBagRenamer.json"

    result = CliRunner().invoke(app, ["simulate", str(world_path), "--config-path", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "C4 - Arid - banditcamp" in result.output
    assert "Sleeping Bag" in result.output
    assert config_path.exists()


def test_preview_skips_empty_names() -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from bag_renamer.main import app

    result = CliRunner().invoke(app, ["preview", "--template", "{player} - {grid}", "--grid", "A1"])

    assert result.exit_code == 0, result.output
    assert "'A1'" in result.output


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"Version": 1}'])
def test_migrate_config_dry_run_reports_bad_documents(tmp_path: Path, content: str) -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from bag_renamer.main import app

    config_path = tmp_path / "AutoBagRenamer.json"
    config_path.write_text(content, encoding="utf-8")

    result = CliRunner().invoke(app, ["migrate-config", "--config-path", str(config_path), "--dry-run"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "error" in result.output


def test_simulate_applies_biome_zones(tmp_path: Path) -> None:
    pytest.importorskip("typer")
    from typer.testing import CliRunner

    from bag_renamer.main import app

    fixture = {
        "world_size": 4000,
        "default_biome": "Temperate",
        "biome_zones": [{"biome": "Arctic", "min_x": 0, "max_x": 500, "min_z": 0, "max_z": 500}],
        "players": [{"user_id": "1", "display_name": "Raider", "permissions": ["autobagrenamer.use"]}],
        "placements": [{"user_id": "1", "position": [100, 0, 100]}, {"user_id": "1", "position": [-100, 0, -100]}],
    }
    world_path = tmp_path / "world.json"
    world_path.write_text(json.dumps(fixture), encoding="utf-8")
    config_path = tmp_path / "AutoBagRenamer.json"
    config_path.write_text(
        json.dumps({"Version": "1.1.0", "Rename Based On Biome": True, "Bag Name Format": "{biome}"}),
        encoding="utf-8",
    )

    result = CliRunner().invoke(app, ["simulate", str(world_path), "--config-path", str(config_path)])

    assert result.exit_code == 0, result.output
    assert "'Arctic'" in result.output
    assert "'Temperate'" in result.output
