"""Application ports - interfaces for external adapters."""

from reviewdesk.application.ports.connectivity_source import (
    ConnectivityListener,
    ConnectivitySource,
)
from reviewdesk.application.ports.file_validator import FileValidation, FileValidator
from reviewdesk.application.ports.remote_authority import RemoteAuthority
from reviewdesk.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ConnectivityListener",
    "ConnectivitySource",
    "FileValidation",
    "FileValidator",
    "RemoteAuthority",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
