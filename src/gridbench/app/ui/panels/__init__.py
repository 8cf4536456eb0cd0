"""
Scenes shown in the main window: size selection, the running grid, and the
configuration checkboxes shared by both.
"""
from gridbench.app.ui.panels.configuration import ConfigurationPanel
from gridbench.app.ui.panels.grid_choice import GridChoicePanel
from gridbench.app.ui.panels.grid_scene import GridScenePanel

__all__ = ["ConfigurationPanel", "GridChoicePanel", "GridScenePanel"]
