"""Transformer between Reservation models and lines of the reservations file."""

from datetime import date

from pydantic import ValidationError

from deskapps.models.reservation import Reservation
from deskapps.models.reservation_status import ReservationStatus
from deskapps.transformers.errors import RecordFormatError

FIELD_COUNT = 7


class ReservationTransformer:
    """Encodes reservations as
    ``reservation_id,user_name,room_id,check_in,check_out,total_price,status``.

    Dates are ISO ``YYYY-MM-DD``. The guest name is written as-is, so a
    name containing a comma corrupts its line.
    """

    @staticmethod
    def _parse_date(value: str) -> date:
        return date.fromisoformat(value.strip())

    @staticmethod
    def to_line(reservation: Reservation) -> str:
        """Encode a reservation as one line (without newline).

        Args:
            reservation: Reservation to encode

        Returns:
            Comma-separated record, e.g.
            ``1,Alice,3,2024-01-01,2024-01-04,450.0,confirmed``
        """
        return ",".join(
            [
                str(reservation.reservation_id),
                reservation.guest_name,
                str(reservation.room_id),
                reservation.check_in.isoformat(),
                reservation.check_out.isoformat(),
                str(float(reservation.total_price)),
                reservation.status.value,
            ]
        )

    @staticmethod
    def from_line(line: str) -> Reservation:
        """Decode one line of the reservations file.

        Args:
            line: Record without trailing newline

        Returns:
            Decoded reservation

        Raises:
            RecordFormatError: On a wrong field count, bad numbers or dates,
                or an unknown status
        """
        parts = line.split(",")
        if len(parts) < FIELD_COUNT:
            raise RecordFormatError(line, f"expected {FIELD_COUNT} fields, got {len(parts)}")

        try:
            return Reservation(
                reservation_id=int(parts[0]),
                guest_name=parts[1],
                room_id=int(parts[2]),
                check_in=ReservationTransformer._parse_date(parts[3]),
                check_out=ReservationTransformer._parse_date(parts[4]),
                total_price=float(parts[5]),
                status=ReservationStatus(parts[6].strip()),
            )
        except (ValueError, ValidationError) as e:
            raise RecordFormatError(line, str(e)) from e
