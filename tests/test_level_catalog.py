import pytest

from memory_match.components.level_config import LevelConfig
from memory_match.errors import InvalidLevel
from memory_match.factories.levels import all_levels, config_for, max_level


def test_every_level_grid_holds_exactly_its_pairs():
    for config in all_levels():
        assert config.rows * config.cols == 2 * config.pair_count


def test_catalog_levels_grow_in_size_and_time():
    assert max_level() == 3
    assert [(c.rows, c.cols, c.pair_count, c.round_seconds) for c in all_levels()] == [
        (2, 3, 3, 30),
        (3, 4, 6, 45),
        (4, 5, 10, 60),
    ]


@pytest.mark.parametrize("level", [0, 4, -1, 99])
def test_config_for_rejects_levels_outside_catalog(level):
    with pytest.raises(InvalidLevel):
        config_for(level)


@pytest.mark.parametrize("level", [True, "1", 1.0, None])
def test_config_for_rejects_non_integer_levels(level):
    with pytest.raises(InvalidLevel):
        config_for(level)


def test_invalid_level_is_a_value_error():
    with pytest.raises(ValueError):
        config_for(7)


def test_level_config_rejects_inconsistent_grid():
    with pytest.raises(ValueError):
        LevelConfig(level=4, rows=3, cols=3, pair_count=4, round_seconds=30)


def test_level_config_rejects_non_positive_duration():
    with pytest.raises(ValueError):
        LevelConfig(level=4, rows=2, cols=2, pair_count=2, round_seconds=0)
