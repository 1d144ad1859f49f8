from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from lenses import Lens  # noqa: E402


@dataclass(frozen=True, slots=True)
class Building:
    id: int


@dataclass(frozen=True, slots=True)
class Address:
    street: str
    city: str
    building: Building | None = None


@dataclass(frozen=True, slots=True)
class User:
    name: str
    address: Address


ADDRESS_ONE = Address(street="Street 01", city="NY")
ME = User(name="Me", address=ADDRESS_ONE)


# Leaves are written by hand: one get, one set that rebuilds the record.

user_name = Lens[User, str](
    get=lambda user: user.name,
    set=lambda name, user: User(name=name, address=user.address),
    name="name",
)

user_address = Lens[User, Address](
    get=lambda user: user.address,
    set=lambda address, user: User(name=user.name, address=address),
    name="address",
)

address_street = Lens[Address, str](
    get=lambda address: address.street,
    set=lambda street, address: Address(street=street, city=address.city, building=address.building),
    name="street",
)

address_city = Lens[Address, str](
    get=lambda address: address.city,
    set=lambda city, address: Address(street=address.street, city=city, building=address.building),
    name="city",
)

address_building = Lens[Address, Building | None](
    get=lambda address: address.building,
    set=lambda building, address: Address(street=address.street, city=address.city, building=building),
    name="building",
)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
