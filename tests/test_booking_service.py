"""Tests for the booking workflow."""

from datetime import date

import pytest

from deskapps.models import ReservationStatus
from deskapps.services import (
    AlreadyCancelled,
    BookingService,
    HotelContext,
    InvalidDateRange,
    PaymentDeclined,
    ReservationNotFound,
    RoomNotFound,
    RoomUnavailable,
)
from deskapps.transformers import ReservationTransformer
from helpers import ConfirmStub

JAN_1 = date(2024, 1, 1)
JAN_4 = date(2024, 1, 4)


class TestBook:
    """Tests for BookingService.book."""

    def test_book_prices_by_nights(self, booking_service, hotel_context, confirm):
        """Test 3 nights in a 150.0 room cost 450.0."""
        reservation_id = booking_service.book("Alice", 3, JAN_1, JAN_4)

        assert reservation_id == 1
        reservation = hotel_context.ledger.find(1, "Alice")
        assert reservation.nights == 3
        assert reservation.total_price == 450.0
        assert reservation.status == ReservationStatus.CONFIRMED
        assert confirm.calls == [(450.0, 3)]

    def test_book_persists_the_ledger(self, booking_service, storage):
        booking_service.book("Alice", 3, JAN_1, JAN_4)

        lines = storage.reservations_path.read_text().splitlines()
        assert lines == ["1,Alice,3,2024-01-01,2024-01-04,450.0,confirmed"]

    def test_unknown_room(self, booking_service, confirm):
        with pytest.raises(RoomNotFound, match="Room not found."):
            booking_service.book("Alice", 99, JAN_1, JAN_4)
        assert confirm.calls == []

    @pytest.mark.parametrize("check_out", [JAN_1, date(2023, 12, 30)])
    def test_checkout_not_after_checkin(self, booking_service, check_out):
        with pytest.raises(InvalidDateRange):
            booking_service.book("Alice", 3, JAN_1, check_out)

    def test_invalid_range_wins_over_unavailable_room(self, booking_service):
        """Test an inverted range inside an existing stay still reports the dates."""
        booking_service.book("Alice", 3, JAN_1, date(2024, 1, 10))

        with pytest.raises(InvalidDateRange):
            booking_service.book("Bob", 3, date(2024, 1, 6), date(2024, 1, 3))

    def test_overlapping_booking_rejected(self, booking_service, hotel_context):
        booking_service.book("Alice", 3, JAN_1, JAN_4)

        with pytest.raises(RoomUnavailable, match="Room not available for selected dates."):
            booking_service.book("Bob", 3, date(2024, 1, 3), date(2024, 1, 5))
        assert len(hotel_context.ledger) == 1

    def test_same_day_turnover_allowed(self, booking_service):
        booking_service.book("Alice", 3, JAN_1, JAN_4)

        assert booking_service.book("Bob", 3, JAN_4, date(2024, 1, 6)) == 2

    def test_declined_payment_creates_nothing(self, hotel_context, storage):
        service = BookingService(hotel_context, ConfirmStub(answer=False))

        with pytest.raises(PaymentDeclined, match="Payment failed. Reservation not made."):
            service.book("Alice", 3, JAN_1, JAN_4)

        assert len(hotel_context.ledger) == 0
        assert hotel_context.ledger.next_id == 1
        assert not storage.reservations_path.exists()


class TestCancel:
    """Tests for BookingService.cancel."""

    def test_cancel_twice(self, booking_service, hotel_context):
        reservation_id = booking_service.book("Alice", 3, JAN_1, JAN_4)

        booking_service.cancel(reservation_id, "Alice")
        assert hotel_context.ledger.find(reservation_id, "Alice").status == ReservationStatus.CANCELLED

        with pytest.raises(AlreadyCancelled, match="Reservation already cancelled."):
            booking_service.cancel(reservation_id, "Alice")

    def test_cancel_frees_the_dates(self, booking_service):
        first = booking_service.book("Alice", 3, JAN_1, JAN_4)
        booking_service.cancel(first, "Alice")

        second = booking_service.book("Bob", 3, JAN_1, JAN_4)

        assert second == first + 1

    def test_cancel_keeps_the_entry_and_persists(self, booking_service, storage, hotel_context):
        reservation_id = booking_service.book("Alice", 3, JAN_1, JAN_4)

        booking_service.cancel(reservation_id, "Alice")

        assert len(hotel_context.ledger) == 1
        line = storage.reservations_path.read_text().strip()
        assert ReservationTransformer.from_line(line).status == ReservationStatus.CANCELLED

    def test_guest_name_is_case_sensitive(self, booking_service):
        reservation_id = booking_service.book("Alice", 3, JAN_1, JAN_4)

        with pytest.raises(ReservationNotFound, match="Reservation not found."):
            booking_service.cancel(reservation_id, "alice")

    def test_unknown_reservation(self, booking_service):
        with pytest.raises(ReservationNotFound):
            booking_service.cancel(12, "Alice")


class TestViewDetails:
    """Tests for BookingService.view_details."""

    def test_view_joins_room_category(self, booking_service):
        reservation_id = booking_service.book("Alice", 3, JAN_1, JAN_4)

        view = booking_service.view_details(reservation_id, "Alice")

        assert view.room_category == "Deluxe"
        assert view.render() == (
            "Reservation ID: 1\n"
            "User: Alice\n"
            "Room: Deluxe (ID: 3)\n"
            "Check-in: 2024-01-01\n"
            "Check-out: 2024-01-04\n"
            "Total Price: $450.00\n"
            "Status: confirmed"
        )

    def test_view_wrong_name(self, booking_service):
        reservation_id = booking_service.book("Alice", 3, JAN_1, JAN_4)

        with pytest.raises(ReservationNotFound):
            booking_service.view_details(reservation_id, "Mallory")

    def test_view_shows_cancelled_status(self, booking_service):
        reservation_id = booking_service.book("Alice", 3, JAN_1, JAN_4)
        booking_service.cancel(reservation_id, "Alice")

        assert booking_service.view_details(reservation_id, "Alice").status == ReservationStatus.CANCELLED


class TestReservationIds:
    """Tests for id allocation across cancellations and restarts."""

    def test_ids_increase_and_survive_restart(self, storage, store, confirm):
        service = BookingService(HotelContext.load(storage, store), confirm)
        first = service.book("Alice", 1, JAN_1, JAN_4)
        second = service.book("Bob", 2, JAN_1, JAN_4)
        service.cancel(second, "Bob")

        reopened = BookingService(HotelContext.load(storage, store), confirm)
        third = reopened.book("Carol", 2, JAN_1, JAN_4)

        assert first < second < third
        assert third == 3

    def test_next_id_follows_highest_loaded_id(self, fixture_storage, store, confirm):
        """Test the fixture ledger with ids 1, 2, 4 continues at 5."""
        service = BookingService(HotelContext.load(fixture_storage, store), confirm)

        assert service.book("Dave", 2, JAN_1, JAN_4) == 5
