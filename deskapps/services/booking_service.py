"""Booking workflow: reserve, cancel and look up reservations."""

from datetime import date
from typing import Callable

from structlog import get_logger

from deskapps.models.reservation import Reservation, ReservationView, count_nights
from deskapps.models.reservation_status import ReservationStatus
from deskapps.models.room import Room
from deskapps.services.availability import AvailabilityEngine
from deskapps.services.context import HotelContext

logger = get_logger(__name__)

# Called with (total_price, nights); only True lets the booking through
ConfirmPayment = Callable[[float, int], bool]

UNKNOWN_CATEGORY = "Unknown"


class BookingError(Exception):
    """Raised when a reservation cannot be made."""

    default_message = "Reservation not made."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class RoomNotFound(BookingError):
    default_message = "Room not found."


class RoomUnavailable(BookingError):
    default_message = "Room not available for selected dates."


class InvalidDateRange(BookingError):
    default_message = "Invalid dates: check-out must be after check-in."


class PaymentDeclined(BookingError):
    default_message = "Payment failed. Reservation not made."


class ReservationError(Exception):
    """Raised when an existing reservation cannot be acted on."""

    default_message = "Reservation error."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ReservationNotFound(ReservationError):
    default_message = "Reservation not found."


class AlreadyCancelled(ReservationError):
    default_message = "Reservation already cancelled."


class BookingService:
    """Books, cancels and shows reservations of one hotel context.

    Guests are identified by name only: whoever knows the reservation id
    and the exact guest name can cancel or view it.
    """

    def __init__(self, context: HotelContext, confirm: ConfirmPayment):
        """Initialize the service.

        Args:
            context: Session state holding the catalog and the ledger
            confirm: Blocking payment confirmation, see ConfirmPayment
        """
        self.context = context
        self.confirm = confirm
        self.availability = AvailabilityEngine(context.catalog, context.ledger)

    def book(
        self,
        guest_name: str,
        room_id: int,
        check_in: date,
        check_out: date,
    ) -> int:
        """Reserve a room for [check_in, check_out).

        Args:
            guest_name: Name the reservation is filed under
            room_id: Room to reserve
            check_in: First night
            check_out: Departure date, exclusive

        Returns:
            Id of the new reservation

        Raises:
            RoomNotFound: If the catalog has no such room
            InvalidDateRange: If check_out is not after check_in
            RoomUnavailable: If a confirmed reservation overlaps the range
            PaymentDeclined: If the confirmation step did not confirm
            StorageError: If the ledger could not be saved
        """
        log = logger.bind(room_id=room_id, check_in=check_in.isoformat(), check_out=check_out.isoformat())

        room = self.context.catalog.get(room_id)
        if room is None:
            log.info("Booking rejected, room not found")
            raise RoomNotFound()

        # Checked before availability so an inverted range never reads as a conflict
        nights = count_nights(check_in, check_out)
        if nights <= 0:
            log.info("Booking rejected, invalid date range", nights=nights)
            raise InvalidDateRange()

        available = self.availability.search(None, check_in, check_out)
        if room not in available:
            log.info("Booking rejected, room unavailable")
            raise RoomUnavailable()

        total_price = room.price * nights

        if not self.confirm(total_price, nights):
            log.info("Booking rejected, payment not confirmed", total_price=total_price)
            raise PaymentDeclined()

        reservation = self.context.ledger.add(
            guest_name=guest_name,
            room_id=room_id,
            check_in=check_in,
            check_out=check_out,
            total_price=total_price,
        )
        self.context.save_reservations()

        log.info(
            "Reservation confirmed",
            reservation_id=reservation.reservation_id,
            total_price=total_price,
        )
        return reservation.reservation_id

    def _lookup(self, reservation_id: int, guest_name: str) -> Reservation:
        reservation = self.context.ledger.find(reservation_id, guest_name)
        if reservation is None:
            logger.info("Reservation lookup failed", reservation_id=reservation_id)
            raise ReservationNotFound()
        return reservation

    def cancel(self, reservation_id: int, guest_name: str) -> None:
        """Cancel a confirmed reservation, freeing its dates.

        The reservation stays in the ledger with status cancelled.

        Raises:
            ReservationNotFound: If no reservation matches id and name
            AlreadyCancelled: If the reservation was cancelled before
            StorageError: If the ledger could not be saved
        """
        reservation = self._lookup(reservation_id, guest_name)
        if reservation.status == ReservationStatus.CANCELLED:
            raise AlreadyCancelled()

        reservation.status = ReservationStatus.CANCELLED
        self.context.save_reservations()

        logger.info("Reservation cancelled", reservation_id=reservation_id)

    def view_details(self, reservation_id: int, guest_name: str) -> ReservationView:
        """Show a reservation together with its room's category.

        Raises:
            ReservationNotFound: If no reservation matches id and name
        """
        reservation = self._lookup(reservation_id, guest_name)
        room = self.context.catalog.get(reservation.room_id)
        if room is None:
            logger.warning(
                "Reservation references a room missing from the catalog",
                reservation_id=reservation_id,
                room_id=reservation.room_id,
            )
        category = room.category if room is not None else UNKNOWN_CATEGORY
        return ReservationView.from_reservation(reservation, category)

    def search(self, category: str | None, check_in: date, check_out: date) -> list[Room]:
        """Shortcut to the availability search of this context."""
        return self.availability.search(category, check_in, check_out)
