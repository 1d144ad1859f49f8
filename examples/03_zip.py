from __future__ import annotations

from _infra import ADDRESS_ONE, ME, address_building, address_city, address_street, banner, user_address

from lenses import zip2, zip_


def main() -> None:
    banner("03_zip: zip_ + & + zip2")

    city_street = zip_(address_city, address_street)
    print(f"{city_street!r}.get -> {city_street.get(ADDRESS_ONE)!r}")
    print(f"set ('C', 'S') -> {city_street.set(('C', 'S'), ADDRESS_ONE)!r}")

    # zip then compose: reach two fields of the nested address at once
    user_city_street = user_address >> (address_city & address_street)
    print(f"{user_city_street!r}.set -> {user_city_street.set(('Turin', 'Via Po'), ME)!r}")

    everything = zip2(address_city, address_street, address_building)
    print(f"zip2 get -> {everything.get(ADDRESS_ONE)!r}")


if __name__ == "__main__":
    main()
