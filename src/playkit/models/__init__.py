"""Worked example records built on playkit.core."""

from playkit.models.album import Album
from playkit.models.employee import DEFAULT_VACATION_DAYS, Employee, VacationLedger
from playkit.models.toddler import Toddler
from playkit.models.user import Profile, User

__all__ = [
    "Album",
    "Employee",
    "VacationLedger",
    "DEFAULT_VACATION_DAYS",
    "User",
    "Profile",
    "Toddler",
]
