"""
Tests for sequential composition.

Tests cover:
- compose get/set against manual step-by-step application
- the User -> Address -> city scenario
- >> sugar, associativity, identity
- compose_all folding
"""

import pytest

from lenses import Lens, compose, compose_all, identity

from .model import (
    ADDRESS_ONE,
    ME,
    Building,
    User,
    address_building,
    address_city,
    address_street,
    building_id,
    user_address,
    user_name,
)

lens_user_city = compose(user_address, address_city)


# =============================================================================
# compose
# =============================================================================


class TestCompose:
    def test_get_reaches_through(self):
        assert lens_user_city.get(ME) == "NY"

    def test_set_updates_nested_field_only(self):
        updated = lens_user_city.set("Turin", ME)

        assert updated.address.city == "Turin"
        assert updated.address.street == "Street 01"
        assert updated.name == "Me"
        assert ME.address.city == "NY"

    def test_over_through_composition(self):
        assert lens_user_city.over(str.upper)(ME).address.city == "NY".upper()
        assert lens_user_city.over(str.capitalize)(ME).address.city == "Ny"

    def test_matches_manual_application(self):
        street = compose(user_address, address_street)
        manual = user_address.set(address_street.set("street update", user_address.get(ME)), ME)

        assert street.get(ME) == address_street.get(user_address.get(ME))
        assert street.set("street update", ME) == manual

    def test_optional_part(self):
        user_building = compose(user_address, address_building)

        updated = user_building.set(Building(id=1), ME)

        assert updated.address.building == Building(id=1)
        assert user_building.get(ME) is None

    def test_inputs_stay_reusable(self):
        compose(user_address, address_city).set("Turin", ME)

        assert address_city.set("new york city", ADDRESS_ONE).city == "new york city"
        assert user_address.get(ME) == ADDRESS_ONE

    def test_name_is_derived(self):
        assert lens_user_city.name == "address >> city"
        assert compose(Lens(lambda w: w, lambda p, w: p), address_city).name is None


# =============================================================================
# Infix sugar and algebra
# =============================================================================


class TestAlgebra:
    def test_rshift_is_compose(self):
        via_operator = user_address >> address_street

        assert via_operator.get(ME) == "Street 01"
        assert via_operator.set("new address", ME) == compose(user_address, address_street).set("new address", ME)

    def test_then_is_compose(self):
        assert user_address.then(address_city).set("Turin", ME) == lens_user_city.set("Turin", ME)

    def test_associativity(self):
        deep = User(name="Me", address=address_building.set(Building(id=7), ADDRESS_ONE))
        left = (user_address >> address_building) >> building_id
        right = user_address >> (address_building >> building_id)

        assert left.get(deep) == right.get(deep) == 7
        assert left.set(8, deep) == right.set(8, deep)
        assert left.set(8, deep).address.building == Building(id=8)

    def test_identity_is_neutral(self):
        for lens in (identity() >> lens_user_city, lens_user_city >> identity()):
            assert lens.get(ME) == lens_user_city.get(ME)
            assert lens.set("Turin", ME) == lens_user_city.set("Turin", ME)

    def test_identity_focuses_whole(self):
        other = User(name="You", address=ADDRESS_ONE)

        assert identity().get(ME) is ME
        assert identity().set(other, ME) is other


# =============================================================================
# compose_all
# =============================================================================


class TestComposeAll:
    def test_single_lens(self):
        assert compose_all(user_name).get(ME) == "Me"

    def test_folds_left(self):
        chained = compose_all(user_address, address_city)

        assert chained.get(ME) == "NY"
        assert chained.set("Turin", ME) == lens_user_city.set("Turin", ME)
        assert chained.name == "address >> city"

    def test_empty(self):
        with pytest.raises(ValueError, match="at least one"):
            compose_all()
