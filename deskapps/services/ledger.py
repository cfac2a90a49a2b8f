"""Reservation ledger."""

from datetime import date

from structlog import get_logger

from deskapps.models.reservation import Reservation
from deskapps.models.reservation_status import ReservationStatus

logger = get_logger(__name__)


class ReservationLedger:
    """Full history of reservations, cancelled ones included.

    Entries are kept in insertion order and never removed. Ids are handed
    out from ``next_id``, which starts one past the highest id already in
    the ledger so ids are not reused across restarts.
    """

    def __init__(self, reservations: list[Reservation] | None = None):
        self._reservations: list[Reservation] = list(reservations or [])
        self.next_id = max((r.reservation_id for r in self._reservations), default=0) + 1

    def add(
        self,
        guest_name: str,
        room_id: int,
        check_in: date,
        check_out: date,
        total_price: float,
    ) -> Reservation:
        """Append a confirmed reservation under the next free id.

        Returns:
            The new reservation
        """
        reservation = Reservation(
            reservation_id=self.next_id,
            guest_name=guest_name,
            room_id=room_id,
            check_in=check_in,
            check_out=check_out,
            total_price=total_price,
            status=ReservationStatus.CONFIRMED,
        )
        self._reservations.append(reservation)
        self.next_id += 1

        logger.info(
            "Reservation added to ledger",
            reservation_id=reservation.reservation_id,
            room_id=room_id,
            nights=reservation.nights,
        )
        return reservation

    def find(self, reservation_id: int, guest_name: str) -> Reservation | None:
        """Find a reservation by id and exact, case-sensitive guest name."""
        for reservation in self._reservations:
            if (
                reservation.reservation_id == reservation_id
                and reservation.guest_name == guest_name
            ):
                return reservation
        return None

    def for_room(self, room_id: int) -> list[Reservation]:
        """Reservations of one room in insertion order, any status."""
        return [r for r in self._reservations if r.room_id == room_id]

    def all(self) -> list[Reservation]:
        return list(self._reservations)

    def __len__(self) -> int:
        return len(self._reservations)

    def __iter__(self):
        return iter(self._reservations)
