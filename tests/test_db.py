import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from dropkit.db.models import Collection, Trait, TraitValue, ImageLayer


# --- Project/Collection: inserts & constraints

def test_collection_names_unique_per_project(session, make_project, make_collection):
    p1 = make_project("Genesis")
    p2 = make_project("Second Drop")
    make_collection(p1, "Apes")
    make_collection(p2, "Apes")  # same name, other project -> OK
    session.commit()

    with pytest.raises(IntegrityError):
        make_collection(p1, "Apes")
        session.commit()


def test_ids_are_generated_and_opaque(session, make_project, make_collection):
    p = make_project("Genesis")
    c = make_collection(p, "Apes")
    session.commit()
    assert isinstance(p.id, str) and len(p.id) == 32
    assert c.id != p.id


# --- Trait/TraitValue

def test_trait_names_unique_per_collection(session, make_project, make_collection, make_trait):
    c = make_collection(make_project())
    make_trait(c, "Background")
    session.commit()

    with pytest.raises(IntegrityError):
        make_trait(c, "Background")
        session.commit()


def test_trait_values_ordered_by_name(session, make_project, make_collection, make_trait, make_trait_value):
    c = make_collection(make_project())
    t = make_trait(c, "Background")
    make_trait_value(t, "Red")
    make_trait_value(t, "Blue")
    make_trait_value(t, "Green")
    session.commit()
    session.expire(t)

    assert [v.name for v in t.values] == ["Blue", "Green", "Red"]


# --- ImageLayer: tags & cascades

def test_image_layer_tags_default_to_unassigned(session, make_project, make_collection, make_image_layer):
    c = make_collection(make_project())
    layer = make_image_layer(c, "a.png", size=2048)
    session.commit()

    fetched = session.get(ImageLayer, layer.id)
    assert fetched.trait_id is None
    assert fetched.trait_value_id is None
    assert fetched.bytes == 2048


def test_image_layer_negative_size_rejected(session, make_project, make_collection, make_image_layer):
    c = make_collection(make_project())
    with pytest.raises(IntegrityError):
        make_image_layer(c, "bad.png", size=-1)
        session.commit()


def test_image_layer_accepts_value_of_another_trait(session, make_project, make_collection, make_trait,
                                                    make_trait_value, make_image_layer):
    """ The store does not pair trait and trait value. """
    c = make_collection(make_project())
    t1 = make_trait(c, "Background")
    t2 = make_trait(c, "Eyes")
    green = make_trait_value(t2, "Green")
    layer = make_image_layer(c, "a.png", trait_id=t1.id, trait_value_id=green.id)
    session.commit()

    fetched = session.get(ImageLayer, layer.id)
    assert (fetched.trait_id, fetched.trait_value_id) == (t1.id, green.id)


def test_deleting_trait_unassigns_layers(session, make_project, make_collection, make_trait, make_trait_value,
                                         make_image_layer):
    c = make_collection(make_project())
    t = make_trait(c, "Background")
    v = make_trait_value(t, "Blue")
    layer = make_image_layer(c, "a.png", trait_id=t.id, trait_value_id=v.id)
    session.commit()

    session.delete(t)
    session.commit()
    session.expire_all()

    fetched = session.get(ImageLayer, layer.id)
    assert fetched.trait_id is None
    assert fetched.trait_value_id is None
    assert session.execute(select(TraitValue)).scalars().all() == []


def test_deleting_collection_removes_traits_and_layers(session, make_project, make_collection, make_trait,
                                                       make_image_layer):
    p = make_project()
    c = make_collection(p, "Apes")
    make_trait(c, "Background")
    make_image_layer(c, "a.png")
    session.commit()

    session.delete(c)
    session.commit()

    assert session.execute(select(Collection)).scalars().all() == []
    assert session.execute(select(Trait)).scalars().all() == []
    assert session.execute(select(ImageLayer)).scalars().all() == []
