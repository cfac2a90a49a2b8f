"""Business services package."""

from deskapps.services.availability import AvailabilityEngine
from deskapps.services.booking_service import (
    AlreadyCancelled,
    BookingError,
    BookingService,
    ConfirmPayment,
    InvalidDateRange,
    PaymentDeclined,
    ReservationError,
    ReservationNotFound,
    RoomNotFound,
    RoomUnavailable,
)
from deskapps.services.catalog import SEED_ROOMS, RoomCatalog
from deskapps.services.context import HotelContext
from deskapps.services.gradebook_service import (
    EmptyStudentName,
    GradebookError,
    GradebookService,
    GradeOutOfRange,
    InvalidGradePosition,
    NoGrades,
    StudentAlreadyExists,
)
from deskapps.services.ledger import ReservationLedger

__all__ = [
    "AvailabilityEngine",
    "BookingService",
    "ConfirmPayment",
    "HotelContext",
    "RoomCatalog",
    "ReservationLedger",
    "SEED_ROOMS",
    "BookingError",
    "RoomNotFound",
    "RoomUnavailable",
    "InvalidDateRange",
    "PaymentDeclined",
    "ReservationError",
    "ReservationNotFound",
    "AlreadyCancelled",
    "GradebookService",
    "GradebookError",
    "EmptyStudentName",
    "StudentAlreadyExists",
    "GradeOutOfRange",
    "NoGrades",
    "InvalidGradePosition",
]
