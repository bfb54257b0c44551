"""Static level catalog."""
from __future__ import annotations

from memory_match.components.level_config import LevelConfig
from memory_match.errors import InvalidLevel

_LEVELS: tuple[LevelConfig, ...] = (
    LevelConfig(level=1, rows=2, cols=3, pair_count=3, round_seconds=30),
    LevelConfig(level=2, rows=3, cols=4, pair_count=6, round_seconds=45),
    LevelConfig(level=3, rows=4, cols=5, pair_count=10, round_seconds=60),
)

_BY_LEVEL: dict[int, LevelConfig] = {config.level: config for config in _LEVELS}


def max_level() -> int:
    return len(_LEVELS)


def all_levels() -> tuple[LevelConfig, ...]:
    return _LEVELS


def config_for(level: int) -> LevelConfig:
    """Return the configuration for ``level`` or raise ``InvalidLevel``."""
    # bool is an int subclass; True must not silently mean level 1.
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevel(level, max_level())
    config = _BY_LEVEL.get(level)
    if config is None:
        raise InvalidLevel(level, max_level())
    return config
