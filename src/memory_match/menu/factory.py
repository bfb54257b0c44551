"""Factory helpers for the menu screens."""
from typing import Iterable

from esper import World

from memory_match.components.leaderboard import LeaderboardEntry
from memory_match.menu.components import (
    LeaderboardRow,
    MenuAction,
    MenuBackground,
    MenuButton,
    MenuTag,
    MenuTitle,
    NameEntry,
)


def clear_menu(world: World) -> None:
    """Remove every entity belonging to the current menu screen."""
    to_delete = {ent for ent, _ in world.get_component(MenuTag)}
    for ent in to_delete:
        world.delete_entity(ent, immediate=True)


def _spawn(world: World, *components) -> int:
    return world.create_entity(*components, MenuTag())


def spawn_home_menu(world: World, width: int, height: int) -> None:
    clear_menu(world)
    center_x = width / 2
    center_y = height / 2
    _spawn(world, MenuBackground())
    _spawn(world, MenuTitle("🌸 Memory Match 🍵", center_x, center_y + 150, size=44))
    _spawn(world, MenuTitle("Match cards and test your memory", center_x, center_y + 95, size=20, bold=False))
    _spawn(world, MenuButton("Start Game", MenuAction.START_GAME, center_x, center_y))
    _spawn(
        world,
        MenuButton("Leaderboard", MenuAction.SHOW_LEADERBOARD, center_x, center_y - 76, primary=False),
    )


def spawn_name_entry(world: World, width: int, height: int) -> None:
    clear_menu(world)
    center_x = width / 2
    center_y = height / 2
    _spawn(world, MenuBackground())
    _spawn(world, MenuTitle("What's your name?", center_x, center_y + 150, size=32))
    _spawn(
        world,
        MenuTitle("Enter a username to appear on the leaderboard", center_x, center_y + 105, size=18, bold=False),
    )
    _spawn(world, NameEntry(x=center_x, y=center_y + 30))
    _spawn(world, MenuButton("Begin Round 1", MenuAction.SUBMIT_NAME, center_x, center_y - 50))
    _spawn(world, MenuButton("Back", MenuAction.BACK_HOME, center_x, center_y - 120, primary=False))


def spawn_leaderboard_screen(
    world: World,
    width: int,
    height: int,
    entries: Iterable[LeaderboardEntry],
) -> None:
    clear_menu(world)
    center_x = width / 2
    top = height - 90
    _spawn(world, MenuBackground())
    _spawn(world, MenuTitle("Top Players", center_x, top, size=32))
    entries = list(entries)
    for rank, entry in enumerate(entries, start=1):
        _spawn(
            world,
            LeaderboardRow(rank=rank, name=entry.name, score=entry.score, x=center_x, y=top - 30 - rank * 58),
        )
    if not entries:
        _spawn(world, MenuTitle("No scores yet", center_x, top - 90, size=20, bold=False))
    _spawn(world, MenuButton("Play Again", MenuAction.PLAY_AGAIN, center_x, 150))
    _spawn(world, MenuButton("Back to Home", MenuAction.BACK_HOME, center_x, 80, primary=False))
