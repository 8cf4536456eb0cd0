"""
Configuration Checkboxes
Two-way binding between QCheckBoxes and the shared Configuration.
"""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QCheckBox, QGridLayout, QWidget

from gridbench.app.state import Configuration, Setting
from gridbench.config import SETTINGS_PER_ROW


class ConfigurationPanel(QWidget):
    """
    One checkbox per setting.

    Vertical: a single column (selection screen).
    Horizontal: rows of SETTINGS_PER_ROW checkboxes (grid scene).
    """
    def __init__(self, configuration: Configuration, horizontal: bool = False, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.configuration = configuration
        self.checkboxes: dict[Setting, QCheckBox] = {}

        layout = QGridLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignTop | Qt.AlignmentFlag.AlignLeft)

        for index, (setting, label, enabled) in enumerate(configuration.items()):
            box = QCheckBox(label)
            box.setChecked(enabled)
            box.toggled.connect(lambda checked, s=setting: self.configuration.set_value(s, checked))
            self.checkboxes[setting] = box

            if horizontal:
                layout.addWidget(box, index // SETTINGS_PER_ROW, index % SETTINGS_PER_ROW)
            else:
                layout.addWidget(box, index, 0)

        configuration.setting_changed.connect(self._on_setting_changed)

    def _on_setting_changed(self, key: str, enabled: bool) -> None:
        box = self.checkboxes[Setting(key)]
        if box.isChecked() != enabled:
            box.setChecked(enabled)
