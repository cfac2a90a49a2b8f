"""Room catalog."""

from deskapps.models.room import Room

# Catalog written on first run, when no rooms file exists
SEED_ROOMS: tuple[Room, ...] = (
    Room(room_id=1, category="Standard", price=100.0),
    Room(room_id=2, category="Standard", price=100.0),
    Room(room_id=3, category="Deluxe", price=150.0),
    Room(room_id=4, category="Deluxe", price=150.0),
    Room(room_id=5, category="Suite", price=250.0),
    Room(room_id=6, category="Suite", price=250.0),
)


class RoomCatalog:
    """Fixed set of rooms, kept in insertion order."""

    def __init__(self, rooms: list[Room] | None = None):
        self._rooms: list[Room] = list(rooms or [])

    @classmethod
    def seeded(cls) -> "RoomCatalog":
        return cls(list(SEED_ROOMS))

    def get(self, room_id: int) -> Room | None:
        """Look up a room by id.

        Args:
            room_id: Room number

        Returns:
            The room, or None if the catalog has no such room
        """
        for room in self._rooms:
            if room.room_id == room_id:
                return room
        return None

    def all(self) -> list[Room]:
        return list(self._rooms)

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self):
        return iter(self._rooms)
