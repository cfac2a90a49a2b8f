"""Flat file record transformation package."""

from deskapps.transformers.errors import RecordFormatError
from deskapps.transformers.reservation_transformer import ReservationTransformer
from deskapps.transformers.room_transformer import RoomTransformer
from deskapps.transformers.student_transformer import StudentTransformer

__all__ = [
    "RecordFormatError",
    "RoomTransformer",
    "ReservationTransformer",
    "StudentTransformer",
]
