from gridbench.app.state import Configuration, RecompositionTriggers, Session, Setting
from gridbench.app.ui.grid_view import GridView
from gridbench.app.ui.info import format_info
from gridbench.app.ui.main_window import MainWindow
from gridbench.app.ui.panels.configuration import ConfigurationPanel
from gridbench.app.ui.panels.grid_choice import GridChoicePanel
from gridbench.app.ui.panels.grid_scene import GridScenePanel
from gridbench.config import ANIMATION_SETTLE_MS, GRID_SIZES
from gridbench.model.grid import GridModel
from tests.test_utils import ScriptedRandom, spin


def test_format_info() -> None:
    assert format_info("25x25 (625 cells)", 3, 1234.4) == "Grid: 25x25 (625 cells), 3 s, 1234 FPS"


def test_configuration_panel_binds_both_ways() -> None:
    configuration = Configuration()
    panel = ConfigurationPanel(configuration, horizontal=True)

    panel.checkboxes[Setting.ANIMATIONS_ENABLED].setChecked(True)
    assert configuration.animations_enabled

    configuration.set_value(Setting.RECOMPOSE_HIGHLIGHTING, True)
    assert panel.checkboxes[Setting.RECOMPOSE_HIGHLIGHTING].isChecked()

    assert [box.text() for box in panel.checkboxes.values()][0] == "Pause on each step (100ms)"


def test_choice_panel_offers_every_size() -> None:
    panel = GridChoicePanel(Configuration(), Session())
    assert list(panel.size_buttons) == list(GRID_SIZES)
    assert panel.size_buttons[25].text() == "25x25 (625 cells)"


def test_main_window_switches_scenes() -> None:
    session = Session()
    window = MainWindow(Configuration(), session)

    window.choice_panel.size_buttons[25].click()

    assert session.grid is not None
    assert window.grid_scene is not None
    assert window.stack.currentWidget() is window.grid_scene
    assert window.grid_scene.grid is session.grid

    window.grid_scene.btn_start_stop.click()
    assert window.grid_scene.driver.is_running
    assert window.grid_scene.btn_start_stop.text() == "Stop"

    window.grid_scene.btn_back.click()

    assert session.grid is None
    assert window.grid_scene is None
    assert window.stack.currentWidget() is window.choice_panel
    window.close()


def test_grid_scene_buttons() -> None:
    configuration = Configuration()
    grid = GridModel(3, seed=5)
    scene = GridScenePanel(configuration, Session(), grid)

    for _ in range(20):
        grid.update_single_cell(restrict_to_first_row=False)
    scene.btn_clear.click()
    assert not grid.values().any()

    assert not scene.configuration_visible
    scene.btn_configuration.click()
    assert scene.configuration_visible
    assert scene.btn_configuration.text() == "Hide Configuration"
    scene.shutdown()


def test_grid_hidden_while_animation_mode_settles() -> None:
    configuration = Configuration()
    scene = GridScenePanel(configuration, Session(), GridModel(3))

    configuration.set_value(Setting.ANIMATIONS_ENABLED, True)
    assert not scene.grid_visible

    spin(ANIMATION_SETTLE_MS + 150)
    assert scene.grid_visible
    scene.shutdown()


def test_grid_view_counts_only_what_changed() -> None:
    configuration = Configuration()
    configuration.set_value(Setting.RECOMPOSE_HIGHLIGHTING, True)
    triggers = RecompositionTriggers()
    grid = GridModel(3, 3, rng=ScriptedRandom([1, 2]))
    view = GridView(grid, configuration, triggers)

    grid.update_single_cell(restrict_to_first_row=False)
    view.grab()

    assert view.tracker.cell_counts[1, 2] == 1
    assert int(view.tracker.cell_counts.sum()) == 1

    triggers.bump_row_level()
    triggers.bump_top_level()
    view.grab()

    assert view.tracker.row_counts.tolist() == [1, 1, 1]
    assert view.tracker.grid_count == 1
    assert int(view.tracker.cell_counts.sum()) == 1


def test_grid_view_paints_animations() -> None:
    configuration = Configuration()
    configuration.set_value(Setting.ANIMATIONS_ENABLED, True)
    grid = GridModel(2, 2, seed=11)
    view = GridView(grid, configuration, RecompositionTriggers())

    grid.update_single_cell(restrict_to_first_row=False)
    assert len(view._animations) == 1
    view.grab()

    spin(500)
    assert not view._animations

    grid.clear()
    assert view.grab().width() == view.width()
