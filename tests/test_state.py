from typing import List, Optional, Tuple

import pytest

from gridbench.app.state import (
    SETTING_LABELS,
    Configuration,
    RecompositionTriggers,
    Session,
    Setting,
)
from gridbench.model.grid import GridModel


def test_all_settings_start_disabled_in_display_order() -> None:
    configuration = Configuration()
    items = list(configuration.items())

    assert [setting for setting, _, _ in items] == list(Setting)
    assert [label for _, label, _ in items] == [
        "Pause on each step (100ms)",
        "Update top row only",
        "Enable animations",
        "Highlight recompositions",
        "Force top-level recomposition",
        "Force row-level recomposition",
        "Force cell-level recomposition",
    ]
    assert not any(value for _, _, value in items)
    assert set(SETTING_LABELS) == set(Setting)


def test_settings_are_independent() -> None:
    configuration = Configuration()
    configuration.set_value(Setting.UPDATE_TOP_ROW_ONLY, True)

    assert configuration.update_top_row_only
    assert not configuration.pause_on_each_step
    assert not configuration.animations_enabled
    assert not configuration.recompose_highlighting
    for setting in Setting:
        if setting is not Setting.UPDATE_TOP_ROW_ONLY:
            assert configuration.value(setting) is False


def test_setting_changed_only_fires_on_real_change() -> None:
    configuration = Configuration()
    received: List[Tuple[str, bool]] = []
    configuration.setting_changed.connect(lambda key, value: received.append((key, value)))

    configuration.set_value(Setting.PAUSE_ON_EACH_STEP, True)
    configuration.set_value(Setting.PAUSE_ON_EACH_STEP, True)
    configuration.set_value("pause_on_each_step", False)

    assert received == [("pause_on_each_step", True), ("pause_on_each_step", False)]


def test_unknown_setting_is_rejected() -> None:
    configuration = Configuration()
    with pytest.raises(ValueError, match="Unknown setting"):
        configuration.set_value("turbo_mode", True)
    with pytest.raises(ValueError):
        configuration.value("turbo_mode")


def test_triggers_notify_with_new_value() -> None:
    triggers = RecompositionTriggers()
    top: List[int] = []
    row: List[int] = []
    cell: List[int] = []
    triggers.top_level_changed.connect(top.append)
    triggers.row_level_changed.connect(row.append)
    triggers.cell_level_changed.connect(cell.append)

    triggers.bump_top_level()
    triggers.bump_top_level()
    triggers.bump_row_level()
    triggers.bump_cell_level()

    assert top == [1, 2]
    assert row == [1]
    assert cell == [1]


def test_session_select_and_discard() -> None:
    session = Session()
    received: List[Optional[GridModel]] = []
    session.grid_changed.connect(received.append)

    grid = session.select_grid(3)
    assert session.grid is grid
    assert grid.describe() == "3x3 (9 cells)"

    session.discard_grid()
    session.discard_grid()

    assert session.grid is None
    assert received == [grid, None]
