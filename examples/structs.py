"""Records, mutating methods, computed properties and property observers."""

import warnings

from playkit import (
    Album,
    Employee,
    MutationError,
    Profile,
    Toddler,
    VacationLedger,
    freeze,
)


def main() -> None:
    red = Album(title="Red", artist="Taylor Swift", year=2012)
    wings = Album(title="Wings", artist="BTS", year=2016)
    print(red.title)
    print(wings.artist)
    print(red.summary())
    print(wings.summary())

    archer = Employee(name="Sterling Archer", vacation_remaining=14)
    archer.take_vacation(10)
    print(f"Days remaining: {archer.vacation_remaining}")
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        archer.take_vacation(10)
    for warning in caught:
        print(f"Oops! {warning.message}")

    constant_archer = freeze(archer)
    try:
        constant_archer.take_vacation(1)
    except MutationError as e:
        print(e)

    print(Profile(name="Taylor", age=26, city="Nashville").as_tuple())

    ledger = VacationLedger(name="Sterling Archer", vacation_allocated=14)
    ledger.vacation_taken += 4
    ledger.vacation_remaining = 5
    print(ledger.vacation_allocated)

    zadie = Toddler(age=3)
    zadie.sassiness_level = 3
    for remark in zadie.remarks:
        print(remark)


if __name__ == "__main__":
    main()
