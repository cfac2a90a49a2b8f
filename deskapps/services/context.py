"""Hotel session context owning the catalog, the ledger and their files."""

from structlog import get_logger

from deskapps.config.settings import StorageSettings
from deskapps.services.catalog import RoomCatalog
from deskapps.services.ledger import ReservationLedger
from deskapps.storage import FlatFileStore, StorageError
from deskapps.transformers import ReservationTransformer, RoomTransformer

logger = get_logger(__name__)


class HotelContext:
    """State of one hotel console session.

    Built once at startup and handed to the services; nothing else holds
    rooms or reservations.
    """

    def __init__(
        self,
        catalog: RoomCatalog,
        ledger: ReservationLedger,
        store: FlatFileStore,
        storage: StorageSettings,
    ):
        """Initialize the context.

        Args:
            catalog: Rooms of the hotel
            ledger: All reservations, cancelled ones included
            store: Store used to persist both collections
            storage: File locations
        """
        self.catalog = catalog
        self.ledger = ledger
        self.store = store
        self.storage = storage

    @classmethod
    def load(cls, storage: StorageSettings, store: FlatFileStore | None = None) -> "HotelContext":
        """Load rooms and reservations from disk.

        When the rooms file does not exist the seed catalog is used and
        written out immediately.

        Args:
            storage: File locations
            store: Store to read with, a default FlatFileStore if omitted

        Returns:
            Ready-to-use context
        """
        store = store or FlatFileStore()

        if store.exists(storage.rooms_path):
            catalog = RoomCatalog(store.load(storage.rooms_path, RoomTransformer.from_line))
        else:
            catalog = RoomCatalog.seeded()
            logger.info("Seeding room catalog", path=str(storage.rooms_path), rooms=len(catalog))
            try:
                store.save(storage.rooms_path, catalog, RoomTransformer.to_line)
            except StorageError:
                logger.warning("Seed catalog kept in memory only", path=str(storage.rooms_path))

        ledger = ReservationLedger(
            store.load(storage.reservations_path, ReservationTransformer.from_line)
        )

        logger.info(
            "Hotel data loaded",
            rooms=len(catalog),
            reservations=len(ledger),
            next_reservation_id=ledger.next_id,
        )
        return cls(catalog=catalog, ledger=ledger, store=store, storage=storage)

    def save_rooms(self) -> None:
        self.store.save(self.storage.rooms_path, self.catalog, RoomTransformer.to_line)

    def save_reservations(self) -> None:
        """Rewrite the reservations file from the ledger.

        Raises:
            StorageError: If the file cannot be written
        """
        self.store.save(
            self.storage.reservations_path, self.ledger, ReservationTransformer.to_line
        )
