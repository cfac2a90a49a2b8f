"""Domain models."""

from deskapps.models.reservation import Reservation, ReservationView, count_nights
from deskapps.models.reservation_status import ReservationStatus
from deskapps.models.room import Room
from deskapps.models.student import Student

__all__ = [
    "Room",
    "Reservation",
    "ReservationView",
    "ReservationStatus",
    "Student",
    "count_nights",
]
