import logging
from typing import List, Optional

from hotel_engine.models.guests import Guest
from hotel_engine.repository.guest_repo import GuestRepository
from hotel_engine.schemas.details import GuestDetails, parse_details
from hotel_engine.utils.custom_exceptions import (
    GuestAlreadyExists,
    NotFoundException,
)
from hotel_engine.utils.identifiers import GUEST_PREFIX, generate_id

logger = logging.getLogger(__name__)


class GuestService:
    def __init__(self, guest_repo: GuestRepository):
        self.guest_repo = guest_repo

    def add_guest(self, details, guest_id: Optional[str] = None) -> Guest:
        details = parse_details(GuestDetails, details)
        guest_id = guest_id or generate_id(GUEST_PREFIX)
        if self.guest_repo.exists_by_id(guest_id):
            raise GuestAlreadyExists(f"Guest with ID {guest_id} already exists")

        guest = Guest(guest_id=guest_id, **details.model_dump())
        self.guest_repo.save(guest)
        logger.info(f"Added guest {guest_id}")
        return guest

    def update_guest(self, guest_id: str, details) -> Guest:
        details = parse_details(GuestDetails, details)
        if not self.guest_repo.exists_by_id(guest_id):
            raise NotFoundException("guest", guest_id)
        guest = Guest(guest_id=guest_id, **details.model_dump())
        self.guest_repo.save(guest)
        return guest

    def delete_guest(self, guest_id: str) -> bool:
        return self.guest_repo.delete(guest_id)

    def get_guest(self, guest_id: str) -> Guest:
        guest = self.guest_repo.find_by_id(guest_id)
        if guest is None:
            raise NotFoundException("guest", guest_id)
        return guest

    def get_all_guests(self) -> List[Guest]:
        return self.guest_repo.find_all()

    def search_by_name(self, term: str) -> List[Guest]:
        return self.guest_repo.search_by_name(term)

    def find_by_email(self, email: str) -> Optional[Guest]:
        return self.guest_repo.find_by_email(email)

    def find_by_phone(self, phone: str) -> Optional[Guest]:
        return self.guest_repo.find_by_phone(phone)

    def find_or_create_guest(self, details) -> Guest:
        details = parse_details(GuestDetails, details)
        existing = self.guest_repo.find_by_email(details.email)
        if existing is not None:
            return existing
        return self.add_guest(details)

    def get_guest_count(self) -> int:
        return self.guest_repo.count()
