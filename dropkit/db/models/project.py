from __future__ import annotations
from typing import List

from sqlalchemy import String, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .mixins import Base, TimestampMixin, new_id


class Project(TimestampMixin, Base):
    __tablename__ = "project"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String, nullable=False)

    collections: Mapped[List["Collection"]] = relationship(
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Collection.name",
    )

    def __repr__(self) -> str:
        return f"<Project id={self.id} name='{self.name}'>"


class Collection(TimestampMixin, Base):
    """ A drop within a project. Owns its trait schema and its uploaded artwork. """
    __tablename__ = "collection"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    project_id: Mapped[str] = mapped_column(
        ForeignKey("project.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String, nullable=False)

    project: Mapped["Project"] = relationship(back_populates="collections")
    traits: Mapped[List["Trait"]] = relationship(
        back_populates="collection",
        cascade="all, delete-orphan",
        order_by="Trait.name",
    )
    image_layers: Mapped[List["ImageLayer"]] = relationship(
        back_populates="collection",
        cascade="all, delete-orphan",
        order_by="ImageLayer.name",
    )

    __table_args__ = (
        UniqueConstraint("project_id", "name", name="uq_collection_project_name"),
        Index("idx_collection_project", "project_id"),
    )

    def __repr__(self) -> str:
        return f"<Collection id={self.id} name='{self.name}' project={self.project_id}>"
