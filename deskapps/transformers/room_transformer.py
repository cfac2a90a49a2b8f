"""Transformer between Room models and lines of the rooms file."""

from pydantic import ValidationError

from deskapps.models.room import Room
from deskapps.transformers.errors import RecordFormatError

FIELD_COUNT = 4


class RoomTransformer:
    """Encodes rooms as ``room_id,category,price,available``.

    Fields are not escaped, so a category containing a comma cannot be
    read back.
    """

    @staticmethod
    def to_line(room: Room) -> str:
        """Encode a room as one line (without newline).

        Args:
            room: Room to encode

        Returns:
            Comma-separated record, e.g. ``1,Standard,100.0,true``
        """
        available = "true" if room.available else "false"
        return f"{room.room_id},{room.category},{float(room.price)},{available}"

    @staticmethod
    def from_line(line: str) -> Room:
        """Decode one line of the rooms file.

        Any value other than ``true`` (case-insensitive) in the last
        field reads as not available.

        Args:
            line: Record without trailing newline

        Returns:
            Decoded room

        Raises:
            RecordFormatError: If the line has too few fields or bad numbers
        """
        parts = line.split(",")
        if len(parts) < FIELD_COUNT:
            raise RecordFormatError(line, f"expected {FIELD_COUNT} fields, got {len(parts)}")

        try:
            return Room(
                room_id=int(parts[0]),
                category=parts[1],
                price=float(parts[2]),
                available=parts[3].strip().lower() == "true",
            )
        except (ValueError, ValidationError) as e:
            raise RecordFormatError(line, str(e)) from e
