from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from dropkit.core.logging import get_logger
from dropkit.db.models import Project, Collection, Trait, TraitValue, ImageLayer
from dropkit.db.services import CatalogService, ArtworkService, CollectionNotFound

from .cascade import CascadeController, SelectOption, trait_options
from .delete_workflow import DeleteWorkflow

log = get_logger(__name__)


class PageStatus(Enum):
    NOT_FOUND = "not found"
    EMPTY = "empty"
    READY = "ready"


@dataclass
class ArtworkSnapshot:
    """ Everything the artwork page shows, fetched once per load. """
    project_id: Optional[str] = None
    collection_id: Optional[str] = None
    project: Optional[Project] = None
    projects: list[Project] = field(default_factory=list)
    collection: Optional[Collection] = None
    image_layers: list[ImageLayer] = field(default_factory=list)
    traits: list[Trait] = field(default_factory=list)
    trait_values_by_trait: dict[str, list[TraitValue]] = field(default_factory=dict)

    @property
    def status(self) -> PageStatus:
        if self.collection is None:
            return PageStatus.NOT_FOUND
        if not self.image_layers:
            return PageStatus.EMPTY
        return PageStatus.READY

    def layer(self, image_layer_id: str) -> Optional[ImageLayer]:
        return next((l for l in self.image_layers if l.id == image_layer_id), None)


def load_snapshot(catalog: CatalogService, artwork: ArtworkService,
                  project_id: Optional[str], collection_id: Optional[str]) -> ArtworkSnapshot:
    """
    Fetch the page data for a route. A missing route segment, an unknown collection or any failure
    while fetching all give a snapshot without a collection, which renders as not found.
    """
    try:
        if project_id and collection_id:
            projects = catalog.list_projects()
            project = catalog.get_project(project_id)
            try:
                collection = catalog.require_collection(project_id, collection_id)
            except CollectionNotFound:
                log.info("Collection %s not found in project %s", collection_id, project_id)
                return ArtworkSnapshot(project_id=project_id, collection_id=collection_id,
                                       project=project, projects=projects)

            image_layers = artwork.list_all(project_id, collection_id)
            traits = catalog.list_traits(project_id, collection_id, "name")
            values_by_trait = catalog.trait_values_by_trait(project_id, collection_id, traits)
            return ArtworkSnapshot(
                project_id=project_id,
                collection_id=collection_id,
                project=project,
                projects=projects,
                collection=collection,
                image_layers=image_layers,
                traits=traits,
                trait_values_by_trait=values_by_trait,
            )
    except Exception:
        log.exception("Loading artwork page for %s/%s failed", project_id, collection_id)

    return ArtworkSnapshot()


class ArtworkPageController:
    """
    View state of one artwork page: the loaded snapshot, the trait cascade and the delete workflow.
    Every load builds both anew from the fresh snapshot.
    """

    def __init__(self, catalog: CatalogService, artwork: ArtworkService,
                 project_id: Optional[str], collection_id: Optional[str],
                 on_loaded: Callable[[ArtworkSnapshot], None] | None = None,
                 on_options_changed: Callable[[str, list[SelectOption]], None] | None = None) -> None:
        self._catalog = catalog
        self._artwork = artwork
        self._project_id = project_id
        self._collection_id = collection_id
        self._on_loaded = on_loaded
        self._on_options_changed = on_options_changed

        self._snapshot = ArtworkSnapshot()
        self._cascade: Optional[CascadeController] = None
        self._delete: Optional[DeleteWorkflow] = None

    # ---------- reads ----------
    @property
    def snapshot(self) -> ArtworkSnapshot:
        return self._snapshot

    @property
    def cascade(self) -> CascadeController:
        if self._cascade is None:
            raise RuntimeError("Page not loaded. Call ArtworkPageController.load() first.")
        return self._cascade

    @property
    def delete_workflow(self) -> DeleteWorkflow:
        if self._delete is None:
            raise RuntimeError("Page not loaded. Call ArtworkPageController.load() first.")
        return self._delete

    def trait_options(self) -> list[SelectOption]:
        return trait_options(self._snapshot.traits)

    def trait_value_options(self, image_layer_id: str) -> list[SelectOption]:
        return self.cascade.options_for(image_layer_id)

    def layer_name(self, image_layer_id: str) -> Optional[str]:
        layer = self._snapshot.layer(image_layer_id)
        return layer.name if layer is not None else None

    # ---------- loading ----------
    def load(self) -> ArtworkSnapshot:
        snap = load_snapshot(self._catalog, self._artwork, self._project_id, self._collection_id)
        self._snapshot = snap
        project_id = self._project_id or ""
        collection_id = self._collection_id or ""
        self._cascade = CascadeController(
            self._artwork, project_id, collection_id, snap.trait_values_by_trait,
            layers=snap.image_layers, on_options_changed=self._on_options_changed,
        )
        self._delete = DeleteWorkflow(
            self._artwork, project_id, collection_id, on_reload=self.load, name_lookup=self.layer_name,
        )
        log.debug("Loaded artwork page %s/%s: %s, %d layers", project_id, collection_id,
                  snap.status.value, len(snap.image_layers))
        if self._on_loaded:
            self._on_loaded(snap)
        return snap

    # ---------- user actions ----------
    def select_trait(self, image_layer_id: str, trait_id: Optional[str]) -> None:
        self.cascade.select_trait(image_layer_id, trait_id)

    def select_trait_value(self, image_layer_id: str, trait_value_id: Optional[str]) -> None:
        self.cascade.select_trait_value(image_layer_id, trait_value_id)

    def request_delete(self, image_layer_id: str) -> None:
        self.delete_workflow.request(image_layer_id)

    def cancel_delete(self) -> None:
        self.delete_workflow.cancel()

    def confirm_delete(self) -> bool:
        return self.delete_workflow.confirm()
