from __future__ import annotations

from PySide6.QtCore import Qt, QByteArray
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow, QToolBar

from dropkit.core.config import Config
from dropkit.core.logging import get_logger
from dropkit.db.manager import DatabaseManager
from dropkit.db.services import CatalogService, ArtworkService

from .artwork_page import ArtworkPage

log = get_logger(__name__)


class MainWindow(QMainWindow):
    """ Hosts the artwork page of the routed collection. """

    def __init__(self, cfg: Config, dbm: DatabaseManager) -> None:
        super().__init__()
        self.setWindowTitle("Artwork")
        self.resize(1200, 800)

        self.config = cfg
        self.dbm = dbm
        self.catalog = CatalogService(self.dbm)
        self.artwork = ArtworkService(self.dbm)
        self.page: ArtworkPage | None = None

        tb = QToolBar("Main")
        tb.setMovable(False)
        self.addToolBar(Qt.TopToolBarArea, tb)
        act_reload = QAction("Reload", self)
        act_reload.triggered.connect(self.reload)
        tb.addAction(act_reload)

        geometry = cfg.ui.geometry.get("main")
        if geometry:
            self.restoreGeometry(QByteArray.fromHex(geometry.encode("ascii")))

        self.open_route(cfg.route.project_id, cfg.route.collection_id)

    def open_route(self, project_id: str, collection_id: str) -> ArtworkPage:
        """ Replace the current page with a freshly loaded one for the given route. """
        self.config.route.project_id = project_id or ""
        self.config.route.collection_id = collection_id or ""
        page = ArtworkPage(self.catalog, self.artwork, project_id, collection_id, self)
        page.createRequested.connect(lambda p, c: log.info("Create artwork requested for %s/%s", p, c))
        page.editRequested.connect(lambda p, c, i: log.info("Edit requested for image layer %s in %s/%s", i, p, c))
        self.setCentralWidget(page)
        self.page = page
        page.reload()
        return page

    def reload(self) -> None:
        if self.page is not None:
            self.page.reload()

    def closeEvent(self, event, /):
        self.config.ui.geometry["main"] = bytes(self.saveGeometry().toHex()).decode("ascii")
        super().closeEvent(event)
