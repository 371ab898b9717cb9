import json
import tempfile
import unittest
from dataclasses import asdict
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path

from hotel_engine.models.bookings import Booking, BookingStatus
from hotel_engine.models.guests import Guest
from hotel_engine.models.invoice import Invoice
from hotel_engine.models.rooms import Room, RoomType
from hotel_engine.repository.booking_repo import BookingRepository
from hotel_engine.repository.guest_repo import GuestRepository
from hotel_engine.repository.invoice_repo import InvoiceRepository
from hotel_engine.repository.room_repo import RoomRepository


class TestEntityRepositories(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self.tmp.name)

        self.booking = Booking(
            booking_id="BK-1234ABCD",
            guest_id="G-00000001",
            room_number="101",
            check_in=date(2030, 6, 15),
            check_out=date(2030, 6, 18),
            status=BookingStatus.CANCELLED,
            total_cost=Decimal("330.00"),
            refund_amount=Decimal("165.00"),
        )

    def tearDown(self):
        self.tmp.cleanup()

    def _document(self, name):
        return json.loads((self.data_dir / name).read_text(encoding="utf-8"))

    def test_booking_round_trip(self):
        repo = BookingRepository(self.data_dir / "bookings.json")
        repo.save(self.booking)

        repo.refresh()
        loaded = repo.find_by_id("BK-1234ABCD")

        self.assertEqual(asdict(loaded), asdict(self.booking))
        self.assertIsInstance(loaded.check_in, date)

    def test_booking_document_fields(self):
        repo = BookingRepository(self.data_dir / "bookings.json")
        repo.save(self.booking)

        item = self._document("bookings.json")[0]

        self.assertEqual(item["bookingId"], "BK-1234ABCD")
        self.assertEqual(item["guestId"], "G-00000001")
        self.assertEqual(item["roomNumber"], "101")
        self.assertEqual(item["checkInDate"], "2030-06-15")
        self.assertEqual(item["checkOutDate"], "2030-06-18")
        self.assertEqual(item["status"], "CANCELLED")
        self.assertEqual(item["totalCost"], "330.00")
        self.assertEqual(item["refundAmount"], "165.00")

    def test_booking_queries(self):
        repo = BookingRepository(self.data_dir / "bookings.json")
        repo.save(self.booking)
        repo.save(Booking("BK-2", "G-00000002", "101", date(2030, 7, 1), date(2030, 7, 3)))
        repo.save(Booking("BK-3", "G-00000001", "102", date(2030, 7, 1), date(2030, 7, 3)))

        self.assertEqual({b.booking_id for b in repo.find_by_guest("G-00000001")}, {"BK-1234ABCD", "BK-3"})
        self.assertEqual({b.booking_id for b in repo.find_by_room("101")}, {"BK-1234ABCD", "BK-2"})
        self.assertEqual([b.booking_id for b in repo.find_confirmed_for_room("101")], ["BK-2"])
        self.assertEqual(len(repo.find_by_status(BookingStatus.CONFIRMED)), 2)

    def test_room_round_trip_and_queries(self):
        repo = RoomRepository(self.data_dir / "rooms.json")
        suite = Room("301", RoomType.SUITE, Decimal("250.50"), available=True, refundable=False)
        repo.save(suite)
        repo.save(Room("101", RoomType.SINGLE, Decimal("80"), available=False))
        repo.save(Room("102", RoomType.SINGLE, Decimal("85")))

        repo.refresh()

        self.assertEqual(asdict(repo.find_by_id("301")), asdict(suite))
        self.assertEqual({r.room_number for r in repo.find_available()}, {"301", "102"})
        self.assertEqual(
            [r.room_number for r in repo.find_available_by_type(RoomType.SINGLE)], ["102"]
        )
        self.assertEqual(self._document("rooms.json")[0]["pricePerNight"], "250.50")

    def test_room_loads_integer_prices(self):
        (self.data_dir / "rooms.json").write_text(
            json.dumps([{"roomNumber": "101", "type": "SINGLE", "pricePerNight": 8000,
                         "available": True, "refundable": True}]),
            encoding="utf-8",
        )

        room = RoomRepository(self.data_dir / "rooms.json").find_by_id("101")

        self.assertEqual(room.price_per_night, Decimal("8000"))
        self.assertEqual(room.type, RoomType.SINGLE)

    def test_long_precision_amounts_survive_round_trip(self):
        repo = BookingRepository(self.data_dir / "bookings.json")
        self.booking.total_cost = Decimal("12345678901234567.89")
        self.booking.refund_amount = Decimal("55.0055")
        repo.save(self.booking)

        repo.refresh()
        loaded = repo.find_by_id("BK-1234ABCD")

        self.assertEqual(loaded.total_cost, Decimal("12345678901234567.89"))
        self.assertEqual(loaded.refund_amount, Decimal("55.0055"))
        self.assertEqual(
            self._document("bookings.json")[0]["totalCost"], "12345678901234567.89"
        )

    def test_guest_round_trip_and_queries(self):
        repo = GuestRepository(self.data_dir / "guests.json")
        guest = Guest("G001", "John Doe", "555-1234", "John@Example.com")
        repo.save(guest)
        repo.save(Guest("G002", "Jane Roe", "555-9876", "jane@example.com"))

        repo.refresh()

        self.assertEqual(asdict(repo.find_by_id("G001")), asdict(guest))
        self.assertEqual(repo.find_by_email("john@example.com").guest_id, "G001")
        self.assertEqual(repo.find_by_phone("555-9876").guest_id, "G002")
        self.assertIsNone(repo.find_by_phone("000"))
        self.assertEqual([g.guest_id for g in repo.search_by_name("ROE")], ["G002"])
        self.assertEqual(self._document("guests.json")[0]["id"], "G001")

    def test_invoice_round_trip(self):
        repo = InvoiceRepository(self.data_dir / "invoices.json")
        invoice = Invoice(
            invoice_id="INV-0000ABCD",
            booking_id="BK-1234ABCD",
            generated_at=datetime(2030, 6, 15, 10, 30, 0),
            subtotal=Decimal("300.00"),
            vat_rate=Decimal("0.10"),
            vat=Decimal("30.00"),
            total=Decimal("330.00"),
        )
        repo.save(invoice)

        repo.refresh()

        self.assertEqual(asdict(repo.find_by_id("INV-0000ABCD")), asdict(invoice))
        self.assertEqual(repo.find_by_booking_id("BK-1234ABCD").invoice_id, "INV-0000ABCD")
        self.assertIsNone(repo.find_by_booking_id("BK-other"))
        self.assertEqual(self._document("invoices.json")[0]["generatedAt"], "2030-06-15T10:30:00")


if __name__ == "__main__":
    unittest.main()
