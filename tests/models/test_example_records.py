"""Tests for the worked example records."""

import warnings

import pytest

from playkit import (
    Album,
    Employee,
    MutationError,
    Profile,
    Toddler,
    User,
    VacationLedger,
    add_listener,
    freeze,
    thaw,
)
from playkit.config import PlaygroundSettings


def test_album_summary():
    assert Album(title="Red", artist="Taylor Swift", year=2012).summary() == (
        "Red (2012) by Taylor Swift"
    )


def test_album_is_immutable():
    album = Album(title="Wings", artist="BTS", year=2016)

    with pytest.raises(AttributeError):
        album.year = 2017  # type: ignore[misc]


def test_take_vacation_deducts_days():
    archer = Employee(name="Sterling Archer", vacation_remaining=14)

    assert archer.take_vacation(10) is True
    assert archer.vacation_remaining == 4


@pytest.mark.parametrize("days", [10, 4], ids=["more-than-remaining", "exactly-remaining"])
def test_take_vacation_without_enough_days_warns(days):
    """Deduction needs strictly more days remaining than requested."""
    archer = Employee(name="Sterling Archer", vacation_remaining=4)

    with pytest.warns(UserWarning, match="only 4 remain"):
        assert archer.take_vacation(days) is False

    assert archer.vacation_remaining == 4


def test_frozen_employee_cannot_take_vacation():
    archer = freeze(Employee(name="Sterling Archer", vacation_remaining=14))

    with pytest.raises(MutationError, match="take_vacation"):
        archer.take_vacation(1)

    assert archer.vacation_remaining == 14


def test_direct_field_mutation_loses_original_grant():
    archer = Employee(name="Sterling Archer", vacation_remaining=14)
    archer.vacation_remaining -= 5
    archer.vacation_remaining -= 3

    assert archer.vacation_remaining == 6


def test_ledger_remaining_is_computed():
    ledger = VacationLedger(name="Sterling Archer", vacation_allocated=14, vacation_taken=10)

    ledger.vacation_taken += 4
    assert ledger.vacation_remaining == 0

    ledger.take(4)
    assert ledger.vacation_remaining == -4


def test_ledger_setter_redistributes_into_allocation():
    """Setting remaining days changes the allocation and keeps days taken."""
    ledger = VacationLedger(name="Sterling Archer", vacation_allocated=14)
    ledger.vacation_taken += 4

    ledger.vacation_remaining = 5

    assert ledger.vacation_allocated == 9
    assert ledger.vacation_taken == 4
    assert ledger.vacation_remaining == 5


def test_ledger_defaults_and_settings():
    assert VacationLedger(name="a").vacation_allocated == 14
    ledger = VacationLedger.from_settings("a", PlaygroundSettings(vacation_days=20))
    assert ledger.vacation_remaining == 20


def test_frozen_ledger_rejects_computed_assignment():
    ledger = freeze(VacationLedger(name="a"))

    with pytest.raises(MutationError):
        ledger.vacation_remaining = 3

    assert ledger.vacation_remaining == 14


def test_user_learns_through_methods_only():
    user = User(name="Taylor")

    assert user.learn("closures") is True
    assert user.learn("closures") is False
    assert user.learn("structs") is True

    assert user.learned == frozenset({"closures", "structs"})
    assert user.learned_count == 2
    assert user.has_learned("structs")
    assert not user.has_learned("access control")


def test_user_learned_is_read_only_snapshot():
    user = User(name="Taylor")
    user.learn("closures")

    with pytest.raises(AttributeError):
        user.learned = frozenset()  # type: ignore[misc]
    assert "_learned_sections" not in repr(user)


def test_user_private_set_not_an_init_argument():
    with pytest.raises(TypeError):
        User(name="Taylor", _learned_sections={"x"})  # type: ignore[call-arg]


def test_profile_as_tuple():
    assert Profile(name="Taylor", age=26, city="Nashville").as_tuple() == (
        "Taylor",
        26,
        "Nashville",
    )


def test_toddler_remarks_after_sassiness_changes():
    zadie = Toddler(age=3)

    zadie.sassiness_level = 3

    assert zadie.remarks == ["At age 3, Zadie is sassy always"]
    assert zadie.sassiness_level == 3


def test_toddler_initialisation_is_silent():
    assert Toddler(age=3, sassiness_level=9).remarks == []


@pytest.mark.parametrize("age", [0, 11], ids=["baby", "too-old"])
def test_toddler_outside_sassy_ages_makes_no_remark(age):
    child = Toddler(age=age)

    child.sassiness_level = 5

    assert child.remarks == []


def test_toddler_listener_sees_change():
    zadie = Toddler(age=3)
    changes = []
    add_listener(zadie, "sassiness_level", changes.append)

    zadie.sassiness_level = 4

    assert [c.to_dict() for c in changes] == [{"name": "sassiness_level", "old": 0, "new": 4}]


def test_employee_warning_names_employee():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        Employee(name="", vacation_remaining=0).take_vacation(10)

    assert "Employee requested 10 days" in str(caught[0].message)


def test_frozen_profile_still_converts_to_tuple():
    frozen = freeze(Profile(name="Taylor", age=26, city="Nashville"))

    assert frozen.as_tuple() == ("Taylor", 26, "Nashville")


def test_thawed_toddler_keeps_hooks_but_not_listeners():
    zadie = Toddler(age=3)
    changes = []
    add_listener(zadie, "sassiness_level", changes.append)

    copy_of_zadie = thaw(zadie)
    copy_of_zadie.sassiness_level = 9

    assert changes == []
    assert copy_of_zadie.remarks == ["At age 3, Zadie is sassy always"]
    assert zadie.remarks == []
