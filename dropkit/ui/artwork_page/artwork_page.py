from __future__ import annotations
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton, QScrollArea, QMessageBox
)

from dropkit.core.logging import get_logger
from dropkit.db.services import CatalogService, ArtworkService

from .artwork_card import ArtworkCard
from .cascade import SelectOption
from .controller import ArtworkPageController, ArtworkSnapshot, PageStatus
from .delete_workflow import DIALOG_TITLE

log = get_logger(__name__)


class ArtworkPage(QWidget):
    """
    Artwork of one collection as a grid of cards.
    Shows "Not Found" when the collection does not resolve and an empty state when it has no artwork.
    Navigation to the create/edit views is left to whoever listens to the request signals.
    """
    createRequested = Signal(str, str)         # project_id, collection_id
    editRequested = Signal(str, str, str)      # project_id, collection_id, image_layer_id
    loaded = Signal(object)                    # ArtworkSnapshot

    COLUMNS = 4

    def __init__(self, catalog: CatalogService, artwork: ArtworkService,
                 project_id: Optional[str], collection_id: Optional[str],
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._project_id = project_id or ""
        self._collection_id = collection_id or ""
        self._cards: dict[str, ArtworkCard] = {}
        self._content: Optional[QWidget] = None

        self._root = QVBoxLayout(self)
        self._root.setContentsMargins(0, 0, 0, 0)

        self.controller = ArtworkPageController(
            catalog, artwork, project_id, collection_id,
            on_loaded=self._render, on_options_changed=self._on_options_changed,
        )

    # ---------- public API ----------
    def reload(self) -> ArtworkSnapshot:
        return self.controller.load()

    def cards(self) -> dict[str, ArtworkCard]:
        return dict(self._cards)

    def status(self) -> PageStatus:
        return self.controller.snapshot.status

    # ---------- rendering ----------
    def _render(self, snap: ArtworkSnapshot) -> None:
        if self._content is not None:
            self._root.removeWidget(self._content)
            self._content.deleteLater()
        self._cards = {}

        match snap.status:
            case PageStatus.NOT_FOUND:
                self._content = self._build_not_found()
            case PageStatus.EMPTY:
                self._content = self._build_empty_state()
            case _:
                self._content = self._build_grid(snap)
        self._root.addWidget(self._content)
        self.loaded.emit(snap)

    def _build_not_found(self) -> QWidget:
        w = QWidget(self)
        lay = QVBoxLayout(w)
        lay.setContentsMargins(32, 48, 32, 48)
        lbl = QLabel("Not Found", w)
        lbl.setObjectName("not-found")
        lay.addWidget(lbl)
        lay.addStretch(1)
        return w

    def _build_empty_state(self) -> QWidget:
        w = QWidget(self)
        lay = QVBoxLayout(w)
        lay.setContentsMargins(32, 48, 32, 48)
        title = QLabel("No artwork", w)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-weight: bold;")
        msg = QLabel("Upload some layered artwork", w)
        msg.setAlignment(Qt.AlignCenter)
        btn = QPushButton("New Artwork", w)
        btn.setObjectName("new-artwork")
        btn.clicked.connect(self._request_create)
        lay.addStretch(1)
        lay.addWidget(title)
        lay.addWidget(msg)
        lay.addWidget(btn, 0, Qt.AlignHCenter)
        lay.addStretch(1)
        return w

    def _build_grid(self, snap: ArtworkSnapshot) -> QWidget:
        w = QWidget(self)
        lay = QVBoxLayout(w)

        top = QHBoxLayout()
        top.addStretch(1)
        btn_add = QPushButton("Add Artwork", w)
        btn_add.setObjectName("add-artwork")
        btn_add.clicked.connect(self._request_create)
        top.addWidget(btn_add)
        lay.addLayout(top)

        grid_host = QWidget()
        grid = QGridLayout(grid_host)
        grid.setHorizontalSpacing(16)
        grid.setVerticalSpacing(24)

        trait_opts = self.controller.trait_options()
        for i, layer in enumerate(snap.image_layers):
            card = ArtworkCard(layer, trait_opts, self.controller.trait_value_options(layer.id), grid_host)
            card.traitSelected.connect(self.controller.select_trait)
            card.traitValueSelected.connect(self.controller.select_trait_value)
            card.deleteRequested.connect(self._confirm_delete)
            card.editRequested.connect(self._request_edit)
            grid.addWidget(card, i // self.COLUMNS, i % self.COLUMNS)
            self._cards[layer.id] = card
        grid.setRowStretch(grid.rowCount(), 1)

        scroll = QScrollArea(w)
        scroll.setWidgetResizable(True)
        scroll.setWidget(grid_host)
        lay.addWidget(scroll, 1)
        return w

    # ---------- interactions ----------
    def _on_options_changed(self, image_layer_id: str, options: list[SelectOption]) -> None:
        card = self._cards.get(image_layer_id)
        if card is not None:
            card.set_trait_value_options(options)

    def _confirm_delete(self, image_layer_id: str) -> None:
        self.controller.request_delete(image_layer_id)
        workflow = self.controller.delete_workflow
        resp = QMessageBox.question(
            self, DIALOG_TITLE, workflow.dialog_message(),
            QMessageBox.Yes | QMessageBox.No, QMessageBox.No
        )
        if resp == QMessageBox.Yes:
            self.controller.confirm_delete()
        else:
            self.controller.cancel_delete()

    def _request_create(self) -> None:
        self.createRequested.emit(self._project_id, self._collection_id)

    def _request_edit(self, image_layer_id: str) -> None:
        self.editRequested.emit(self._project_id, self._collection_id, image_layer_id)
