from __future__ import annotations
from sqlalchemy import select
from sqlalchemy.orm import Session

from dropkit.db.models import Trait, TraitValue


class TraitRepo:
    _ORDERINGS = {
        "name": (Trait.name, Trait.id),
        "created_at": (Trait.created_at, Trait.id),
    }

    def list(self, s: Session, project_id: str, collection_id: str, order_by: str = "name") -> list[Trait]:
        try:
            ordering = self._ORDERINGS[order_by]
        except KeyError:
            raise ValueError(f"Unsupported trait ordering: {order_by!r}") from None
        return s.execute(
            select(Trait)
            .where(Trait.project_id == project_id, Trait.collection_id == collection_id)
            .order_by(*ordering)
        ).scalars().all()


class TraitValueRepo:
    def list(self, s: Session, project_id: str, collection_id: str, trait_id: str) -> list[TraitValue]:
        """ Values of one trait, name ordered. Empty when the trait is not in the given collection. """
        return s.execute(
            select(TraitValue)
            .join(Trait, TraitValue.trait_id == Trait.id)
            .where(
                Trait.project_id == project_id,
                Trait.collection_id == collection_id,
                TraitValue.trait_id == trait_id,
            )
            .order_by(TraitValue.name, TraitValue.id)
        ).scalars().all()
