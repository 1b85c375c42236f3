from dataclasses import dataclass


@dataclass
class ConnectionStatus:
    public_read: bool = False
    private_read: bool = False
    message: str = ""


class ConnectionCheckError(Exception):
    """Backend unreachable. Carries how far the check got."""

    def __init__(self, status: ConnectionStatus):
        super().__init__(status.message)
        self.status = status


@dataclass
class SeedOutput:
    members_inserted: int = 0
    site_content_written: bool = False
