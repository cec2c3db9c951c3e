import pytest

from dropkit.db.models import ImageLayer
from dropkit.db.repositories import CollectionRepo, TraitRepo, TraitValueRepo, ImageLayerRepo


def test_collection_resolves_only_under_its_project(session, make_project, make_collection):
    p1 = make_project("Genesis")
    p2 = make_project("Other")
    c = make_collection(p1, "Apes")
    repo = CollectionRepo()

    assert repo.get(session, c.id, p1.id) is c
    assert repo.get(session, c.id, p2.id) is None
    assert repo.get(session, "missing", p1.id) is None


def test_traits_listed_by_name_within_collection(session, make_project, make_collection, make_trait):
    p = make_project()
    c1 = make_collection(p, "Apes")
    c2 = make_collection(p, "Cats")
    make_trait(c1, "Eyes")
    make_trait(c1, "Background")
    make_trait(c2, "Fur")

    names = [t.name for t in TraitRepo().list(session, p.id, c1.id, order_by="name")]
    assert names == ["Background", "Eyes"]


def test_trait_listing_rejects_unknown_ordering(session):
    with pytest.raises(ValueError):
        TraitRepo().list(session, "p", "c", order_by="colour")


def test_trait_values_scoped_to_collection(session, make_project, make_collection, make_trait, make_trait_value):
    p = make_project()
    c1 = make_collection(p, "Apes")
    c2 = make_collection(p, "Cats")
    t = make_trait(c1, "Background")
    make_trait_value(t, "Red")
    make_trait_value(t, "Blue")
    repo = TraitValueRepo()

    assert [v.name for v in repo.list(session, p.id, c1.id, t.id)] == ["Blue", "Red"]
    assert repo.list(session, p.id, c2.id, t.id) == []


def test_update_writes_only_given_field(session, make_project, make_collection, make_trait, make_trait_value,
                                        make_image_layer):
    c = make_collection(make_project())
    t1 = make_trait(c, "Background")
    t2 = make_trait(c, "Eyes")
    blue = make_trait_value(t1, "Blue")
    layer = make_image_layer(c, "a.png", trait_id=t1.id, trait_value_id=blue.id)
    repo = ImageLayerRepo()

    assert repo.update(session, {"trait_id": t2.id}, layer.id, c.project_id, c.id) == 1
    session.expire_all()
    fetched = session.get(ImageLayer, layer.id)
    assert fetched.trait_id == t2.id
    assert fetched.trait_value_id == blue.id  # untouched


def test_update_requires_full_address(session, make_project, make_collection, make_trait, make_image_layer):
    p = make_project()
    c = make_collection(p, "Apes")
    other = make_collection(p, "Cats")
    t = make_trait(c, "Background")
    layer = make_image_layer(c, "a.png")
    repo = ImageLayerRepo()

    assert repo.update(session, {"trait_id": t.id}, layer.id, p.id, other.id) == 0
    session.expire_all()
    assert session.get(ImageLayer, layer.id).trait_id is None


def test_update_rejects_unknown_fields(session, make_project, make_collection, make_image_layer):
    c = make_collection(make_project())
    layer = make_image_layer(c, "a.png")
    with pytest.raises(ValueError):
        ImageLayerRepo().update(session, {"name": "renamed"}, layer.id, c.project_id, c.id)


def test_remove_only_addressed_layer(session, make_project, make_collection, make_image_layer):
    c = make_collection(make_project())
    a = make_image_layer(c, "a.png")
    b = make_image_layer(c, "b.png")
    repo = ImageLayerRepo()

    assert repo.remove(session, a.id, c.project_id, c.id) == 1
    assert [l.id for l in repo.list_all(session, c.project_id, c.id)] == [b.id]
    assert repo.remove(session, "stale", c.project_id, c.id) == 0
