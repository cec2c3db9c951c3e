from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union

from dropkit.core.logging import get_logger

log = get_logger(__name__)

DIALOG_TITLE = "Delete Artwork"
UNKNOWN_NAME = "Unknown"


class RemovalStore(Protocol):
    def remove(self, image_layer_id: str, project_id: str, collection_id: str) -> bool:
        ...


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Confirming:
    pending_id: str


DeleteState = Union[Idle, Confirming]


class DeleteWorkflow:
    """
    Two-step confirm/cancel guard around removing one image layer. One per page, so at most one
    deletion is awaiting confirmation at a time; a new request replaces the pending one.

    Confirm always ends in Idle followed by a reload, whether or not the removal succeeded.
    """

    def __init__(self, store: RemovalStore, project_id: str, collection_id: str,
                 on_reload: Callable[[], None] | None = None,
                 name_lookup: Callable[[str], Optional[str]] | None = None) -> None:
        self._store = store
        self._project_id = project_id
        self._collection_id = collection_id
        self._on_reload = on_reload
        self._name_lookup = name_lookup
        self._state: DeleteState = Idle()

    # ---------- reads ----------
    @property
    def state(self) -> DeleteState:
        return self._state

    @property
    def pending_id(self) -> Optional[str]:
        return self._state.pending_id if isinstance(self._state, Confirming) else None

    @property
    def dialog_visible(self) -> bool:
        return isinstance(self._state, Confirming)

    def dialog_message(self) -> str:
        name = None
        if self.pending_id is not None and self._name_lookup:
            name = self._name_lookup(self.pending_id)
        return f"Are you sure you want to delete ‘{name or UNKNOWN_NAME}’? This action cannot be undone."

    # ---------- transitions ----------
    def request(self, image_layer_id: str) -> None:
        """ Idle -> Confirming. Nothing is written. """
        self._state = Confirming(image_layer_id)

    def cancel(self) -> None:
        """ Confirming -> Idle. Nothing is written. """
        self._state = Idle()

    def confirm(self) -> bool:
        """ Remove the pending layer (if any), return to Idle and reload. Returns the removal result. """
        pending = self.pending_id
        removed = False
        if pending is not None:
            removed = self._store.remove(pending, self._project_id, self._collection_id)
            if not removed:
                log.warning("Removal of image layer %s reported failure; reloading regardless", pending)
        else:
            log.debug("Delete confirmed with nothing pending")
        self._state = Idle()
        if self._on_reload:
            self._on_reload()
        return removed
