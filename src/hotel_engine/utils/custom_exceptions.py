class InvalidDates(Exception):
    pass


class InvalidDetails(Exception):
    pass


class NotFoundException(Exception):
    def __init__(self, resource: str, identifier: str):
        super().__init__(resource, identifier)
        self.resource = resource
        self.identifier = identifier

    def __str__(self):
        return f"{self.resource} '{self.identifier}' not found"


class RoomNotAvailable(Exception):
    pass


class OverlappingBooking(Exception):
    pass


class InvalidStatusTransition(Exception):
    pass


class RoomAlreadyExists(Exception):
    pass


class GuestAlreadyExists(Exception):
    pass


class RoomInUse(Exception):
    pass


class StorageError(Exception):
    pass


class InvalidSettings(Exception):
    pass
