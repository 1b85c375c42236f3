"""
Connection component - Backend health probe and first-run seeding.
"""

import logging

from iboc.domain.defaults import initial_site_content, sample_members
from iboc.ports.documents import StorageError

from .models import ConnectionCheckError, ConnectionStatus, SeedOutput
from .ports import CollectionReaderPort, MemberSeedPort, SiteContentWriterPort

logger = logging.getLogger(__name__)

CONNECTED = "Conexão Estabelecida!"


def run_check(
    public_reader: CollectionReaderPort, private_reader: CollectionReaderPort
) -> ConnectionStatus:
    """
    Read a public collection, then a private one.

    Raises ConnectionCheckError with the partial status on the first failure.
    """
    status = ConnectionStatus()
    try:
        public_reader.fetch_all()
        status.public_read = True
        private_reader.fetch_all()
        status.private_read = True
    except StorageError as e:
        status.message = f"Erro: {e}"
        logger.error("Connection check failed: %s", e)
        raise ConnectionCheckError(status) from e
    status.message = CONNECTED
    return status


def run_seed(member_repo: MemberSeedPort, site_repo: SiteContentWriterPort) -> SeedOutput:
    """Insert sample members into an empty database and reset the site content."""
    result = SeedOutput()
    if not member_repo.fetch_all():
        for member in sample_members():
            member_repo.save(member)
            result.members_inserted += 1

    site_repo.save(initial_site_content())
    result.site_content_written = True
    logger.info("Database seeded: %d members inserted", result.members_inserted)
    return result
