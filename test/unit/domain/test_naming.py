import pytest

from protodice.domain.naming import Person, Starship, same_name


def test_starship_full_name_with_prefix():
    assert Starship(name="Enterprise", prefix="USS").full_name == "USS Enterprise"


def test_starship_full_name_without_prefix():
    assert Starship(name="Firefly").full_name == "Firefly"
    assert Starship(name="Firefly", prefix="").full_name == "Firefly"


def test_starship_equality_by_full_name():
    a = Starship(name="Enterprise", prefix="USS")
    b = Starship(name="Enterprise", prefix="USS")
    assert a == b
    assert a is not b
    assert Starship(name="Enterprise", prefix="USS") != Starship(name="Firefly")


def test_starship_equality_follows_mutation():
    a = Starship(name="Enterprise", prefix="USS")
    b = Starship(name="Enterprise")
    assert a != b
    b.prefix = "USS"
    assert a == b


def test_starship_not_equal_to_other_types():
    ship = Starship(name="Serenity")
    assert ship != "Serenity"
    assert ship != Person(full_name="Serenity")


def test_starship_unhashable():
    with pytest.raises(TypeError):
        hash(Starship(name="Serenity"))


def test_person_has_value_semantics():
    craig = Person(full_name="Craig Swanson")
    assert craig == Person(full_name="Craig Swanson")
    assert craig != Person(full_name="Penny Swanson")
    assert len({craig, Person(full_name="Craig Swanson")}) == 1


def test_same_name_across_types():
    assert same_name(Person(full_name="USS Enterprise"), Starship(name="Enterprise", prefix="USS"))
    assert not same_name(Person(full_name="Penny Swanson"), Starship(name="Firefly"))
