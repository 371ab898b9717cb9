from pathlib import Path
from typing import List, Optional

from hotel_engine.models.guests import Guest
from hotel_engine.repository.json_store import JsonRecordStore


def guest_to_item(guest: Guest) -> dict:
    return {
        "id": guest.guest_id,
        "name": guest.name,
        "phone": guest.phone,
        "email": guest.email,
    }


def guest_from_item(item: dict) -> Guest:
    return Guest(
        guest_id=item["id"],
        name=item.get("name", ""),
        phone=item.get("phone", ""),
        email=item.get("email", ""),
    )


class GuestRepository(JsonRecordStore[Guest]):
    def __init__(self, path: Path):
        super().__init__(
            path,
            id_of=lambda guest: guest.guest_id,
            to_item=guest_to_item,
            from_item=guest_from_item,
        )

    def find_by_email(self, email: str) -> Optional[Guest]:
        matches = self._find_where(
            lambda guest: guest.email.lower() == email.lower()
        )
        return matches[0] if matches else None

    def find_by_phone(self, phone: str) -> Optional[Guest]:
        matches = self._find_where(lambda guest: guest.phone == phone)
        return matches[0] if matches else None

    def search_by_name(self, term: str) -> List[Guest]:
        term = term.lower()
        return self._find_where(lambda guest: term in guest.name.lower())
