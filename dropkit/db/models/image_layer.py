from __future__ import annotations
from typing import Optional

from sqlalchemy import String, Text, BigInteger, ForeignKey, Index, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .mixins import Base, TimestampMixin, new_id


class ImageLayer(TimestampMixin, Base):
    """
    One uploaded artwork asset of a collection, addressed by (project_id, collection_id, id).
    trait_id / trait_value_id are the optional tags; the pairing of the two is not checked here,
    a trait value belonging to another trait is stored as given.
    """
    __tablename__ = "image_layer"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=new_id)
    project_id: Mapped[str] = mapped_column(
        ForeignKey("project.id", ondelete="CASCADE"), nullable=False
    )
    collection_id: Mapped[str] = mapped_column(
        ForeignKey("collection.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    bytes: Mapped[int] = mapped_column(BigInteger, default=0, nullable=False)

    trait_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("trait.id", ondelete="SET NULL"), nullable=True
    )
    trait_value_id: Mapped[Optional[str]] = mapped_column(
        ForeignKey("trait_value.id", ondelete="SET NULL"), nullable=True
    )

    collection: Mapped["Collection"] = relationship(back_populates="image_layers")

    __table_args__ = (
        Index("ix_image_layer_address", "project_id", "collection_id"),
        Index("ix_image_layer_trait_id", "trait_id"),
        CheckConstraint("bytes >= 0", name="bytes_nonneg"),
    )

    def __repr__(self) -> str:
        return (f"<ImageLayer id={self.id} name={self.name!r} "
                f"trait={self.trait_id} value={self.trait_value_id}>")
