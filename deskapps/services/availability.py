"""Room availability search over the reservation ledger."""

from datetime import date

from structlog import get_logger

from deskapps.models.room import Room
from deskapps.services.catalog import RoomCatalog
from deskapps.services.ledger import ReservationLedger

logger = get_logger(__name__)


class AvailabilityEngine:
    """Finds rooms free of confirmed reservations for a date range."""

    def __init__(self, catalog: RoomCatalog, ledger: ReservationLedger):
        self.catalog = catalog
        self.ledger = ledger

    def is_available(self, room: Room, check_in: date, check_out: date) -> bool:
        """Check one room against the ledger entries for that room.

        Args:
            room: Room to check
            check_in: First night of the requested stay
            check_out: Exclusive end of the requested stay

        Returns:
            False if a confirmed reservation of the room overlaps the range
        """
        for reservation in self.ledger.for_room(room.room_id):
            if reservation.blocks(room.room_id, check_in, check_out):
                return False
        return True

    def search(
        self,
        category: str | None,
        check_in: date,
        check_out: date,
    ) -> list[Room]:
        """List the rooms bookable over [check_in, check_out).

        Args:
            category: Case-insensitive category filter, or None for any
            check_in: First night of the requested stay
            check_out: Exclusive end of the requested stay

        Returns:
            Matching rooms in catalog order; empty if none is free
        """
        rooms = [
            room
            for room in self.catalog
            if room.matches_category(category)
            and self.is_available(room, check_in, check_out)
        ]

        logger.debug(
            "Availability search",
            category=category,
            check_in=check_in.isoformat(),
            check_out=check_out.isoformat(),
            found=len(rooms),
        )
        return rooms
