"""Office device contracts - Interface Segregation lesson.

MultiFunctionDevice is the problem contract: a plain inkjet has to claim it
can scan and fax, and does so with methods that do nothing. The solution
splits the contract into Printer, Scanner and Fax so every device declares
only what it really does.
"""
from abc import abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from solidkit.domain.base.capability import Capability
from solidkit.domain.base.exceptions import OperationFailedError


class Document(BaseModel):
    """A document handed to an office device."""
    model_config = ConfigDict(frozen=True)

    title: str
    pages: int = Field(1, ge=1)

    def __str__(self) -> str:
        return f"{self.title} ({self.pages}p)"


def _require_title(operation: str, document: Document) -> None:
    if not document.title.strip():
        raise OperationFailedError(operation, "document has no title")


class MultiFunctionDevice(Capability):
    """Problem contract: too wide for a plain printer."""

    @abstractmethod
    def print_document(self, document: Document) -> str:
        pass

    @abstractmethod
    def scan_document(self, document: Document) -> str:
        pass

    @abstractmethod
    def fax_document(self, document: Document, number: str) -> str:
        pass


class BasicInkjet(MultiFunctionDevice):
    def print_document(self, document: Document) -> str:
        _require_title("print_document", document)
        return f"inkjet:printed {document}"

    def scan_document(self, document: Document) -> str:
        pass

    def fax_document(self, document: Document, number: str) -> str:
        return None


class Printer(Capability):
    """Port for devices that put documents on paper."""

    @abstractmethod
    def print_document(self, document: Document) -> str:
        """Print a document and describe the simulated output."""


class Scanner(Capability):
    """Port for devices that digitise paper documents."""

    @abstractmethod
    def scan_document(self, document: Document) -> str:
        """Scan a document and describe the simulated image."""


class Fax(Capability):
    """Port for devices that send documents over a phone line."""

    @abstractmethod
    def fax_document(self, document: Document, number: str) -> str:
        """Fax a document to a number and describe the simulated call."""


class OfficeMultiFunction(Printer, Scanner, Fax):
    """Office machine that prints, scans and faxes."""

    def print_document(self, document: Document) -> str:
        _require_title("print_document", document)
        return f"office:printed {document}"

    def scan_document(self, document: Document) -> str:
        _require_title("scan_document", document)
        return f"office:scanned {document}"

    def fax_document(self, document: Document, number: str) -> str:
        _require_title("fax_document", document)
        if not number or not number.replace("+", "").replace("-", "").isdigit():
            raise OperationFailedError("fax_document", f"invalid fax number {number!r}")
        return f"office:faxed {document} to {number}"


class LaserPrinter(Printer):
    """Printer only."""

    def print_document(self, document: Document) -> str:
        _require_title("print_document", document)
        return f"laser:printed {document}"


class FlatbedScanner(Scanner):
    """Scanner only."""

    def scan_document(self, document: Document) -> str:
        _require_title("scan_document", document)
        return f"flatbed:scanned {document}"
