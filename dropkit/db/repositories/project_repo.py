from __future__ import annotations
from sqlalchemy import select
from sqlalchemy.orm import Session

from dropkit.db.models import Project, Collection


class ProjectRepo:
    def get(self, s: Session, project_id: str) -> Project | None:
        return s.get(Project, project_id)

    def list_all(self, s: Session) -> list[Project]:
        return s.execute(select(Project).order_by(Project.name, Project.id)).scalars().all()


class CollectionRepo:
    def get(self, s: Session, collection_id: str, project_id: str) -> Collection | None:
        """ A collection only resolves under the project it belongs to. """
        return s.execute(
            select(Collection).where(Collection.id == collection_id, Collection.project_id == project_id)
        ).scalar_one_or_none()
