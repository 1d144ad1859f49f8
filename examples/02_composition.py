from __future__ import annotations

from _infra import ME, Building, address_building, address_city, address_street, banner, user_address

from lenses import compose


def main() -> None:
    banner("02_composition: compose + >> + over")

    user_city = compose(user_address, address_city)
    print(f"{user_city!r}.get -> {user_city.get(ME)!r}")
    print(f"set 'Turin' -> {user_city.set('Turin', ME)!r}")
    print(f"over capitalize -> {user_city.over(str.capitalize)(ME)!r}")

    user_street = user_address >> address_street
    print(f"{user_street!r}.set -> {user_street.set('street update', ME)!r}")

    user_building = user_address >> address_building
    print(f"{user_building!r}.set -> {user_building.set(Building(id=1), ME)!r}")


if __name__ == "__main__":
    main()
