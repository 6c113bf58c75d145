from textual.message import Message

from ezsymlink.domain.links import SymlinkType


class CreateLinkRequest(Message):
    def __init__(
        self, source: str, destination: str, requested_type: SymlinkType
    ) -> None:
        super().__init__()
        self.source = source
        self.destination = destination
        self.requested_type = requested_type


class OpenLocationRequest(Message):
    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path


class BrowseRequest(Message):
    def __init__(self, field_id: str, start: str) -> None:
        super().__init__()
        self.field_id = field_id
        self.start = start
