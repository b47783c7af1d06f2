import pytest

from game_prototype import CharacterRegistry, GameCharacter, Orc, Troll
from vehicle_factory import Car, Truck, VehicleFactory


# ===== Factory =====
def test_factory_builds_by_kind_any_case():
    car = VehicleFactory.get_vehicle("car", 150)
    truck = VehicleFactory.get_vehicle("TRUCK", 400)

    assert isinstance(car, Car)
    assert isinstance(truck, Truck)
    assert str(car) == "Type: Car, Horsepower: 150"
    assert str(truck) == "Type: Truck, Horsepower: 400"


def test_factory_rejects_unknown_kind():
    with pytest.raises(ValueError, match="car, truck"):
        VehicleFactory.get_vehicle("bicycle", 1)


@pytest.mark.parametrize("horsepower", [0, -5, True, "fast", None])
def test_factory_rejects_bad_horsepower(horsepower):
    with pytest.raises(ValueError):
        VehicleFactory.get_vehicle("car", horsepower)


# ===== Prototype =====
def test_defaults_match_the_character_kind():
    assert Orc().describe() == "Orc with Axe, Health: 100"
    assert Troll().describe() == "Troll with Club, Health: 150"


def test_registry_returns_independent_clones():
    registry = CharacterRegistry()
    prototype = Orc()
    registry.add_prototype("orc", prototype)

    first = registry.get_prototype("orc")
    second = registry.get_prototype("orc")

    assert first is not second
    assert first is not prototype
    assert first.describe() == second.describe() == "Orc with Axe, Health: 100"

    first.health = 10
    assert second.health == 100
    assert prototype.health == 100


def test_registry_clones_configured_prototypes():
    registry = CharacterRegistry()
    registry.add_prototype("boss", Troll(weapon="Hammer", health=500))

    assert registry.get_prototype("boss").describe() == "Troll with Hammer, Health: 500"
    assert "boss" in registry
    assert registry.keys() == ["boss"]


def test_registries_are_independent():
    one, two = CharacterRegistry(), CharacterRegistry()
    one.add_prototype("orc", Orc())

    assert "orc" in one
    assert "orc" not in two


def test_unknown_prototype_raises_key_error():
    with pytest.raises(KeyError, match="dragon"):
        CharacterRegistry().get_prototype("dragon")


def test_display_prints_description(capsys):
    Troll().display()
    assert capsys.readouterr().out == "Troll with Club, Health: 150\n"


def test_base_character_needs_weapon_and_health():
    with pytest.raises(ValueError):
        GameCharacter()
    assert GameCharacter(weapon="Bow", health=80).describe() == "GameCharacter with Bow, Health: 80"
