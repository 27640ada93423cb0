from __future__ import annotations

from bag_renamer.host.memory import InMemoryWorld
from bag_renamer.landmarks import LandmarkLocator, simplify_identifier
from bag_renamer.models import Vector3

BANDIT = "assets/bundled/prefabs/autospawn/monument/medium/banditcamp.prefab"
OUTPOST = "assets/bundled/prefabs/autospawn/monument/medium/compound.prefab"
ROCK = "assets/bundled/prefabs/autospawn/resource/rock.prefab"


def test_simplify_strips_path_and_suffix() -> None:
    assert simplify_identifier("assets/bundled/prefabs/autospawn/monument/banditcamp.prefab") == "banditcamp"


def test_simplify_leaves_plain_names_alone() -> None:
    assert simplify_identifier("lighthouse") == "lighthouse"
    assert simplify_identifier("dome.prefab") == "dome"


def test_nearest_monument_wins() -> None:
    world = InMemoryWorld()
    world.add_object(BANDIT, Vector3(100, 0, 100))
    world.add_object(OUTPOST, Vector3(-20, 0, 5))
    world.add_object(ROCK, Vector3(0, 0, 1))

    locator = LandmarkLocator(world)

    assert locator.nearest(Vector3(0, 0, 0)) == "compound"
    match = locator.nearest_match(Vector3(90, 0, 100))
    assert match is not None
    assert match.identifier == BANDIT
    assert match.distance == 10


def test_no_monuments_returns_empty_string() -> None:
    world = InMemoryWorld()
    world.add_object(ROCK, Vector3(0, 0, 0))

    assert LandmarkLocator(world).nearest(Vector3(0, 0, 0)) == ""
    assert LandmarkLocator(InMemoryWorld()).nearest(Vector3(0, 0, 0)) == ""


def test_equidistant_monuments_resolve_by_identifier() -> None:
    first = InMemoryWorld()
    first.add_object(OUTPOST, Vector3(10, 0, 0))
    first.add_object(BANDIT, Vector3(-10, 0, 0))

    second = InMemoryWorld()
    second.add_object(BANDIT, Vector3(-10, 0, 0))
    second.add_object(OUTPOST, Vector3(10, 0, 0))

    assert LandmarkLocator(first).nearest(Vector3(0, 0, 0)) == "banditcamp"
    assert LandmarkLocator(second).nearest(Vector3(0, 0, 0)) == "banditcamp"


def test_scan_sees_objects_added_after_construction() -> None:
    world = InMemoryWorld()
    locator = LandmarkLocator(world)
    assert locator.nearest(Vector3(0, 0, 0)) == ""

    world.add_object(BANDIT, Vector3(5, 0, 5))

    assert locator.nearest(Vector3(0, 0, 0)) == "banditcamp"
