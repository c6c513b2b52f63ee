"""Domain protocols (ports) implemented by the infrastructure layer."""

from docshelf.domain.protocols.archive_protocol import ArchiveProvider, DocArchive
from docshelf.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["ArchiveProvider", "DocArchive", "LoggerProtocol"]
