from __future__ import annotations
from typing import Iterable

from dropkit.db.manager import DatabaseManager
from dropkit.db.models import Project, Collection, Trait, TraitValue
from dropkit.db.repositories import ProjectRepo, CollectionRepo, TraitRepo, TraitValueRepo

# Domain errors
class CollectionNotFound(Exception): ...


class CatalogService:
    """Read access to projects, collections and the trait catalog of a collection."""
    def __init__(self, db: DatabaseManager):
        self.db = db
        self.project_repo = ProjectRepo()
        self.collection_repo = CollectionRepo()
        self.trait_repo = TraitRepo()
        self.trait_value_repo = TraitValueRepo()

    # ---------- Projects / Collections ----------
    def list_projects(self) -> list[Project]:
        with self.db.session() as s:
            return self.project_repo.list_all(s)

    def get_project(self, project_id: str) -> Project | None:
        with self.db.session() as s:
            return self.project_repo.get(s, project_id)

    def get_collection(self, project_id: str, collection_id: str) -> Collection | None:
        with self.db.session() as s:
            return self.collection_repo.get(s, collection_id, project_id)

    def require_collection(self, project_id: str, collection_id: str) -> Collection:
        c = self.get_collection(project_id, collection_id)
        if c is None:
            raise CollectionNotFound(f"{project_id}/{collection_id}")
        return c

    # ---------- Traits ----------
    def list_traits(self, project_id: str, collection_id: str, order_by: str = "name") -> list[Trait]:
        with self.db.session() as s:
            return self.trait_repo.list(s, project_id, collection_id, order_by=order_by)

    def list_trait_values(self, project_id: str, collection_id: str, trait_id: str) -> list[TraitValue]:
        with self.db.session() as s:
            return self.trait_value_repo.list(s, project_id, collection_id, trait_id)

    def trait_values_by_trait(self, project_id: str, collection_id: str,
                              traits: Iterable[Trait]) -> dict[str, list[TraitValue]]:
        """ Eager trait id -> ordered values map, one lookup per trait. """
        return {t.id: self.list_trait_values(project_id, collection_id, t.id) for t in traits}
