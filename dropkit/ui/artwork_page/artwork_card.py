from __future__ import annotations
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QFrame, QVBoxLayout, QHBoxLayout, QLabel, QComboBox, QToolButton, QStyle, QWidget
)

from dropkit.core.formatting import format_bytes

from .cascade import SelectOption


def _fill_combo(combo: QComboBox, options: list[SelectOption], selected: Optional[str]) -> None:
    """ Replace every entry of combo with options, selecting the one whose value is selected. """
    combo.blockSignals(True)
    try:
        combo.clear()
        for opt in options:
            combo.addItem(opt.label, opt.value)
        idx = next((i for i, opt in enumerate(options) if opt.value == selected), 0)
        combo.setCurrentIndex(idx)
    finally:
        combo.blockSignals(False)


class ArtworkCard(QFrame):
    """
    One image layer in the grid: name, size, trait and trait value selectors, edit and delete.
    Emits the layer id with every request; the page decides what to do with it.
    """
    traitSelected = Signal(str, object)
    traitValueSelected = Signal(str, object)
    deleteRequested = Signal(str)
    editRequested = Signal(str)

    def __init__(self, layer, trait_options: list[SelectOption], trait_value_options: list[SelectOption],
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.layer_id: str = layer.id
        self.setFrameShape(QFrame.StyledPanel)
        self.setObjectName(f"card-{layer.id}")

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(4)

        # Preview stand-in; the asset itself is rendered elsewhere
        self._preview = QToolButton(self)
        self._preview.setText(layer.name)
        self._preview.setToolTip(f"View details for {layer.name}")
        self._preview.setMinimumSize(160, 160)
        self._preview.setToolButtonStyle(Qt.ToolButtonTextOnly)
        self._preview.clicked.connect(lambda: self.editRequested.emit(self.layer_id))
        root.addWidget(self._preview)

        row = QHBoxLayout()
        self.name_label = QLabel(layer.name, self)
        self.name_label.setTextInteractionFlags(Qt.NoTextInteraction)
        row.addWidget(self.name_label, 1)
        self.delete_button = QToolButton(self)
        self.delete_button.setIcon(self.style().standardIcon(QStyle.SP_TrashIcon))
        self.delete_button.setToolTip("Delete")
        self.delete_button.setAutoRaise(True)
        self.delete_button.clicked.connect(lambda: self.deleteRequested.emit(self.layer_id))
        row.addWidget(self.delete_button, 0)
        root.addLayout(row)

        self.size_label = QLabel(format_bytes(layer.bytes), self)
        self.size_label.setStyleSheet("color: #888;")
        root.addWidget(self.size_label)

        root.addWidget(QLabel("Associated Trait", self))
        self.trait_combo = QComboBox(self)
        self.trait_combo.setObjectName(f"{layer.id}-trait")
        _fill_combo(self.trait_combo, trait_options, layer.trait_id)
        self.trait_combo.activated.connect(self._on_trait_changed)
        root.addWidget(self.trait_combo)

        root.addWidget(QLabel("Associated Trait Value", self))
        self.trait_value_combo = QComboBox(self)
        self.trait_value_combo.setObjectName(f"{layer.id}-traitValue")
        _fill_combo(self.trait_value_combo, trait_value_options, layer.trait_value_id)
        self.trait_value_combo.activated.connect(self._on_trait_value_changed)
        root.addWidget(self.trait_value_combo)

    # ---------- public API ----------
    def set_trait_value_options(self, options: list[SelectOption]) -> None:
        """ Rebuild the trait value selector; the previous entries are dropped, unassigned is selected. """
        _fill_combo(self.trait_value_combo, options, None)

    def trait_value_labels(self) -> list[str]:
        return [self.trait_value_combo.itemText(i) for i in range(self.trait_value_combo.count())]

    # ---------- slots ----------
    # Bound to activated: user choices only, re-choosing the shown entry included.
    def _on_trait_changed(self, index: int) -> None:
        if index < 0:
            return
        self.traitSelected.emit(self.layer_id, self.trait_combo.itemData(index))

    def _on_trait_value_changed(self, index: int) -> None:
        if index < 0:
            return
        self.traitValueSelected.emit(self.layer_id, self.trait_value_combo.itemData(index))
