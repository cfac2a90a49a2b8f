"""Interactive console for the hotel reservation system."""

from structlog import get_logger

from deskapps.cli.prompts import (
    NO_COMMAS,
    InputFn,
    OutputFn,
    ask,
    has_field_delimiter,
    parse_date,
    parse_int,
)
from deskapps.config.settings import HotelSettings
from deskapps.services import (
    BookingError,
    BookingService,
    ConfirmPayment,
    HotelContext,
    ReservationError,
)
from deskapps.storage import StorageError

logger = get_logger(__name__).bind(app="hotel")

MENU = (
    "\nHotel Reservation System\n"
    "1. Search Rooms\n"
    "2. Make Reservation\n"
    "3. Cancel Reservation\n"
    "4. View Booking Details\n"
    "5. Exit"
)

INVALID_DATE = "Invalid date format. Use YYYY-MM-DD."


class HotelMenu:
    """Numbered menu driving a BookingService.

    Reads with ``read(prompt)`` and writes with ``write(text)`` so the
    loop can be scripted; both default to the terminal.
    """

    def __init__(
        self,
        context: HotelContext,
        hotel_settings: HotelSettings | None = None,
        read: InputFn = input,
        write: OutputFn = print,
        confirm: ConfirmPayment | None = None,
    ):
        self.hotel_settings = hotel_settings or HotelSettings()
        self.read = read
        self.write = write
        self.service = BookingService(context, confirm or self.confirm_payment)
        self.actions = {
            "1": self.search_rooms,
            "2": self.make_reservation,
            "3": self.cancel_reservation,
            "4": self.view_booking_details,
        }

    def money(self, amount: float) -> str:
        return f"{self.hotel_settings.currency_symbol}{amount:.2f}"

    def confirm_payment(self, total_price: float, nights: int) -> bool:
        """Simulated payment: the guest must type the confirmation word."""
        self.write(f"Simulating payment of {self.money(total_price)} for {nights} nights.")
        answer = ask(self.read, f"Enter '{self.hotel_settings.confirmation_word}' to confirm payment: ")
        return answer.lower() == self.hotel_settings.confirmation_word.lower()

    def run(self) -> int:
        """Loop until Exit or end of input.

        Returns:
            Process exit code
        """
        logger.info("Hotel console started")
        while True:
            self.write(MENU)
            try:
                choice = ask(self.read, "Choose an option: ")
            except EOFError:
                break

            if choice == "5":
                break

            action = self.actions.get(choice)
            if action is None:
                self.write("Invalid choice.")
                continue

            try:
                action()
            except EOFError:
                break
            except StorageError as e:
                self.write(str(e))

        self.write("Exiting...")
        logger.info("Hotel console stopped")
        return 0

    def search_rooms(self) -> None:
        category = ask(self.read, "Enter category (Standard/Deluxe/Suite) or leave blank: ") or None
        check_in_text = ask(self.read, "Enter check-in date (YYYY-MM-DD): ")
        check_out_text = ask(self.read, "Enter check-out date (YYYY-MM-DD): ")
        try:
            check_in = parse_date(check_in_text)
            check_out = parse_date(check_out_text)
        except ValueError:
            self.write(INVALID_DATE)
            return

        rooms = self.service.search(category, check_in, check_out)
        if not rooms:
            self.write("No rooms available.")
            return
        for room in rooms:
            self.write(
                f"Room ID: {room.room_id}, Category: {room.category}, "
                f"Price: {self.money(room.price)}/night"
            )

    def make_reservation(self) -> None:
        guest_name = ask(self.read, "Enter your name: ")
        if has_field_delimiter(guest_name):
            self.write(NO_COMMAS)
            return
        try:
            room_id = parse_int(ask(self.read, "Enter room ID: "))
        except ValueError:
            self.write("Invalid room ID.")
            return

        check_in_text = ask(self.read, "Enter check-in date (YYYY-MM-DD): ")
        check_out_text = ask(self.read, "Enter check-out date (YYYY-MM-DD): ")
        try:
            check_in = parse_date(check_in_text)
            check_out = parse_date(check_out_text)
        except ValueError:
            self.write(INVALID_DATE)
            return

        try:
            reservation_id = self.service.book(guest_name, room_id, check_in, check_out)
        except BookingError as e:
            self.write(str(e))
            return
        self.write(f"Reservation made successfully. ID: {reservation_id}")

    def _ask_reservation(self) -> tuple[int, str] | None:
        try:
            reservation_id = parse_int(ask(self.read, "Enter reservation ID: "))
        except ValueError:
            self.write("Invalid reservation ID.")
            return None
        guest_name = ask(self.read, "Enter your name: ")
        return reservation_id, guest_name

    def cancel_reservation(self) -> None:
        lookup = self._ask_reservation()
        if lookup is None:
            return
        try:
            self.service.cancel(*lookup)
        except ReservationError as e:
            self.write(str(e))
            return
        self.write("Reservation cancelled successfully.")

    def view_booking_details(self) -> None:
        lookup = self._ask_reservation()
        if lookup is None:
            return
        try:
            view = self.service.view_details(*lookup)
        except ReservationError as e:
            self.write(str(e))
            return
        self.write(view.render(self.hotel_settings.currency_symbol))
