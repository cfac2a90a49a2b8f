"""Console menus."""

from deskapps.cli.grade_menu import GradeMenu
from deskapps.cli.hotel_menu import HotelMenu

__all__ = ["HotelMenu", "GradeMenu"]
