"""RecordStore contract and its storage engine variants."""
from abc import abstractmethod

from solidkit.domain.base.capability import Capability
from solidkit.domain.base.exceptions import OperationFailedError


class RecordStore(Capability):
    """Port for saving a record to some storage engine."""

    @abstractmethod
    def save(self, record: str) -> str:
        """Save a record.

        Args:
            record: Record to save

        Returns:
            Description of the simulated write

        Raises:
            OperationFailedError: If the record could not be saved
        """


class MySqlRecordStore(RecordStore):
    """Record store backed by a MySQL engine."""

    def save(self, record: str) -> str:
        if not record:
            raise OperationFailedError("save", "mysql refuses empty records")
        return f"mysql:{record}"


class PostgresRecordStore(RecordStore):
    """Record store backed by a PostgreSQL engine."""

    def save(self, record: str) -> str:
        if not record:
            raise OperationFailedError("save", "postgres refuses empty records")
        return f"postgres:{record}"
