from __future__ import annotations
from typing import List

from sqlalchemy import String, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .mixins import Base, TimestampMixin, new_id


# ---------- Trait ----------
class Trait(TimestampMixin, Base):
    """ A classification axis of a collection, e.g. "Background". Names are unique within a collection. """
    __tablename__ = "trait"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    project_id: Mapped[str] = mapped_column(
        ForeignKey("project.id", ondelete="CASCADE"), nullable=False
    )
    collection_id: Mapped[str] = mapped_column(
        ForeignKey("collection.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String, nullable=False)

    collection: Mapped["Collection"] = relationship(back_populates="traits")
    values: Mapped[List["TraitValue"]] = relationship(
        back_populates="trait",
        cascade="all, delete-orphan",
        order_by="TraitValue.name",
    )

    __table_args__ = (
        UniqueConstraint("collection_id", "name", name="uq_trait_collection_name"),
        Index("ix_trait_project_collection", "project_id", "collection_id"),
    )

    def __repr__(self) -> str:
        return f"<Trait id={self.id} name={self.name!r} collection={self.collection_id}>"


# ---------- Trait value ----------
class TraitValue(TimestampMixin, Base):
    """ A value under exactly one trait, e.g. "Blue" under "Background". """
    __tablename__ = "trait_value"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    trait_id: Mapped[str] = mapped_column(
        ForeignKey("trait.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)

    trait: Mapped["Trait"] = relationship(back_populates="values")

    __table_args__ = (
        UniqueConstraint("trait_id", "name", name="uq_trait_value_trait_name"),
    )

    def __repr__(self) -> str:
        return f"<TraitValue id={self.id} name={self.name!r} trait={self.trait_id}>"
