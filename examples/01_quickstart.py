from __future__ import annotations

from _infra import ME, banner, user_name


def main() -> None:
    banner("01_quickstart: get + set + over")

    print(f"get: {user_name.get(ME)!r}")

    # set returns a new User, ME stays as it was
    renamed = user_name.set("mini Me", ME)
    print(f"set: {renamed!r}")
    print(f"original: {ME!r}")

    shout = user_name.over(str.upper)
    print(f"over: {shout(ME)!r}")


if __name__ == "__main__":
    main()
