from __future__ import annotations

from _infra import ME, User, address_city, banner, user_address

from kungfu import Error, Ok

from lenses import Lens, LawSuite, check_laws, verify

# get decorates the value, set ignores what it is given
broken_name = Lens[User, str](
    get=lambda user: user.name + "X",
    set=lambda name, user: user,
    name="broken",
)


def main() -> None:
    banner("04_laws: check_laws + verify")

    samples = [(ME, "Turin", "Rome")]
    user_city = user_address >> address_city

    report = check_laws(user_city, samples, LawSuite.all())
    print(f"{user_city!r}: passed={report.passed} ({len(report.outcomes)} probes)")

    for lens in (user_city, broken_name):
        match verify(lens, [(ME, "A", "B")]):
            case Ok(good):
                print(f"ok: {good!r}")
            case Error(err):
                print(f"error: {err}")


if __name__ == "__main__":
    main()
