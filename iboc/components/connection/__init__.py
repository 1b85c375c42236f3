"""
Connection component - Backend health probe and seeding.
"""

from .component import CONNECTED, run_check, run_seed
from .models import ConnectionCheckError, ConnectionStatus, SeedOutput
from .ports import CollectionReaderPort, MemberSeedPort, SiteContentWriterPort

__all__ = [
    "run_check",
    "run_seed",
    "CONNECTED",
    "ConnectionCheckError",
    "ConnectionStatus",
    "SeedOutput",
    "CollectionReaderPort",
    "MemberSeedPort",
    "SiteContentWriterPort",
]
