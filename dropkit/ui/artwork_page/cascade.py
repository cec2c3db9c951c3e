from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional, Protocol, Sequence

from dropkit.core.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class SelectOption:
    """ One entry of a selector. value None is the unassigned entry. """
    value: Optional[str]
    label: str


UNASSIGNED_TRAIT = SelectOption(None, "Unassigned")
UNASSIGNED_VALUE = SelectOption(None, "")


class AssociationStore(Protocol):
    """What the cascade needs from the store: a field-level write keyed by the image layer address."""
    def update(self, fields: dict, image_layer_id: str, project_id: str, collection_id: str) -> bool:
        ...


def trait_options(traits: Iterable) -> list[SelectOption]:
    return [UNASSIGNED_TRAIT] + [SelectOption(t.id, t.name) for t in traits]


def trait_value_options(trait_id: Optional[str], values_by_trait: Mapping[str, Sequence]) -> list[SelectOption]:
    """
    Options for the trait-value selector of a layer whose trait is trait_id: the unassigned entry
    followed by the values of that trait in catalog order. An unset or unknown trait yields only the
    unassigned entry.
    """
    if trait_id is None:
        return [UNASSIGNED_VALUE]
    values = values_by_trait.get(trait_id)
    if values is None:
        log.debug("Trait %s not in the trait value map; offering unassigned only", trait_id)
        return [UNASSIGNED_VALUE]
    return [UNASSIGNED_VALUE] + [SelectOption(v.id, v.name) for v in values]


class CascadeController:
    """
    Keeps the trait-value selector of each image layer in step with its selected trait.

    Choosing a trait and choosing a trait value are two separate writes. Choosing a trait writes
    only trait_id (a previously stored trait_value_id stays in the store) and rebuilds that layer's
    trait-value options from the map built at page load; the catalog is not queried again.
    Choosing a trait value writes only trait_value_id and is not checked against the trait.
    """

    def __init__(self, store: AssociationStore, project_id: str, collection_id: str,
                 values_by_trait: Mapping[str, Sequence], layers: Iterable = (),
                 on_options_changed: Callable[[str, list[SelectOption]], None] | None = None) -> None:
        self._store = store
        self._project_id = project_id
        self._collection_id = collection_id
        self._values_by_trait = values_by_trait
        self._on_options_changed = on_options_changed

        # Transient per-layer view state, seeded from the snapshot
        self._trait_by_layer: dict[str, Optional[str]] = {}
        self._options: dict[str, list[SelectOption]] = {}
        for layer in layers:
            self._trait_by_layer[layer.id] = layer.trait_id
            self._options[layer.id] = trait_value_options(layer.trait_id, values_by_trait)

    # ---------- reads ----------
    def options_for(self, image_layer_id: str) -> list[SelectOption]:
        opts = self._options.get(image_layer_id)
        if opts is None:
            return [UNASSIGNED_VALUE]
        return list(opts)

    def selected_trait(self, image_layer_id: str) -> Optional[str]:
        return self._trait_by_layer.get(image_layer_id)

    # ---------- user actions ----------
    def select_trait(self, image_layer_id: str, trait_id: Optional[str]) -> None:
        self._store.update({"trait_id": trait_id}, image_layer_id, self._project_id, self._collection_id)

        self._trait_by_layer[image_layer_id] = trait_id
        opts = trait_value_options(trait_id, self._values_by_trait)
        self._options[image_layer_id] = opts
        if self._on_options_changed:
            self._on_options_changed(image_layer_id, list(opts))

    def select_trait_value(self, image_layer_id: str, trait_value_id: Optional[str]) -> None:
        if trait_value_id is not None and not self._belongs_to_selected_trait(image_layer_id, trait_value_id):
            log.warning("Trait value %s is not a value of trait %s on image layer %s; storing it anyway",
                        trait_value_id, self._trait_by_layer.get(image_layer_id), image_layer_id)
        self._store.update({"trait_value_id": trait_value_id}, image_layer_id, self._project_id,
                           self._collection_id)

    # ---------- helpers ----------
    def _belongs_to_selected_trait(self, image_layer_id: str, trait_value_id: str) -> bool:
        trait_id = self._trait_by_layer.get(image_layer_id)
        values = self._values_by_trait.get(trait_id, ()) if trait_id is not None else ()
        return any(v.id == trait_value_id for v in values)
