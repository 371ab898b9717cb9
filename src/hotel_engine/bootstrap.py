import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from hotel_engine.config.settings import (
    HotelSettings,
    default_data_dir,
    default_settings_path,
    load_settings,
)
from hotel_engine.repository.booking_repo import BookingRepository
from hotel_engine.repository.guest_repo import GuestRepository
from hotel_engine.repository.invoice_repo import InvoiceRepository
from hotel_engine.repository.room_repo import RoomRepository
from hotel_engine.services.booking_service import BookingService
from hotel_engine.services.guest_service import GuestService
from hotel_engine.services.invoice_service import InvoiceService
from hotel_engine.services.room_service import RoomService

logger = logging.getLogger(__name__)


@dataclass
class HotelContext:
    data_dir: Path
    settings: HotelSettings
    room_repo: RoomRepository
    guest_repo: GuestRepository
    booking_repo: BookingRepository
    invoice_repo: InvoiceRepository
    room_service: RoomService
    guest_service: GuestService
    booking_service: BookingService
    invoice_service: InvoiceService

    def _repositories(self):
        return (self.room_repo, self.guest_repo, self.booking_repo, self.invoice_repo)

    def refresh_all(self):
        for repo in self._repositories():
            repo.refresh()

    def close(self):
        for repo in self._repositories():
            repo.flush()


def build_context(
    data_dir: Optional[Path] = None, settings: Optional[HotelSettings] = None
) -> HotelContext:
    data_dir = Path(data_dir) if data_dir else default_data_dir()
    if settings is None:
        settings = load_settings(default_settings_path(data_dir))

    room_repo = RoomRepository(data_dir / "rooms.json")
    guest_repo = GuestRepository(data_dir / "guests.json")
    booking_repo = BookingRepository(data_dir / "bookings.json")
    invoice_repo = InvoiceRepository(data_dir / "invoices.json")

    room_service = RoomService(room_repo, booking_repo)
    booking_service = BookingService(booking_repo, room_service, settings)

    logger.info(f"Opened hotel data in {data_dir}")
    return HotelContext(
        data_dir=data_dir,
        settings=settings,
        room_repo=room_repo,
        guest_repo=guest_repo,
        booking_repo=booking_repo,
        invoice_repo=invoice_repo,
        room_service=room_service,
        guest_service=GuestService(guest_repo),
        booking_service=booking_service,
        invoice_service=InvoiceService(
            invoice_repo, booking_service, room_service, settings
        ),
    )
