from dataclasses import dataclass


@dataclass(eq=False)
class Guest:
    guest_id: str
    name: str
    phone: str
    email: str

    def __eq__(self, other):
        if not isinstance(other, Guest):
            return NotImplemented
        return self.guest_id == other.guest_id

    def __hash__(self):
        return hash(("guest", self.guest_id))
