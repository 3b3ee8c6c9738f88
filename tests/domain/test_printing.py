"""Tests for the printing domain."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from solidkit.domain.base import ContractViolationError, OperationFailedError
from solidkit.domain.printing import (
    BasicInkjet,
    Document,
    Fax,
    FlatbedScanner,
    LaserPrinter,
    OfficeMultiFunction,
    Printer,
    PrintJob,
    Scanner,
    ScanJob,
)


class TestDocument:
    """Test cases for Document."""

    def test_str(self, document):
        """Test the document display string."""
        assert str(document) == "Quarterly report (3p)"

    def test_pages_must_be_positive(self):
        """Test that a document needs at least one page."""
        with pytest.raises(PydanticValidationError):
            Document(title="Empty", pages=0)

    def test_is_frozen(self, document):
        """Test that documents cannot be changed."""
        with pytest.raises(PydanticValidationError):
            document.pages = 4


class TestDevices:
    """Test cases for the device variants."""

    def test_inkjet_prints_but_cannot_scan_or_fax(self, document):
        """Test that the inkjet only really prints."""
        inkjet = BasicInkjet()

        assert inkjet.print_document(document) == "inkjet:printed Quarterly report (3p)"
        assert inkjet.scan_document(document) is None
        assert inkjet.fax_document(document, "555-0100") is None

    def test_office_device_satisfies_every_narrow_contract(self, document):
        """Test that the office device fulfils every narrow contract."""
        office = OfficeMultiFunction()

        assert isinstance(office, Printer)
        assert isinstance(office, Scanner)
        assert isinstance(office, Fax)
        assert office.fax_document(document, "+1-555-0100") == "office:faxed Quarterly report (3p) to +1-555-0100"

    def test_invalid_fax_number_fails(self, document):
        """Test that a bad fax number is an operation failure."""
        with pytest.raises(OperationFailedError) as exc_info:
            OfficeMultiFunction().fax_document(document, "call me")

        assert exc_info.value.operation == "fax_document"

    def test_single_purpose_devices_declare_only_what_they_do(self):
        """Test that single-purpose devices declare one contract."""
        assert LaserPrinter.operations() == ("print_document",)
        assert FlatbedScanner.operations() == ("scan_document",)
        assert not isinstance(LaserPrinter(), Scanner)

    def test_untitled_document_fails(self):
        """Test that an untitled document fails to print."""
        with pytest.raises(OperationFailedError, match="document has no title"):
            LaserPrinter().print_document(Document(title="  "))


class TestJobs:
    """Test cases for PrintJob and ScanJob."""

    @pytest.mark.parametrize("printer, expected", [
        (OfficeMultiFunction(), "office:printed Quarterly report (3p)"),
        (LaserPrinter(), "laser:printed Quarterly report (3p)"),
    ])
    def test_print_job_with_any_printer(self, printer, expected, document):
        """Test submitting a print job to any printer."""
        assert PrintJob(printer).submit(document) == expected

    @pytest.mark.parametrize("scanner, expected", [
        (OfficeMultiFunction(), "office:scanned Quarterly report (3p)"),
        (FlatbedScanner(), "flatbed:scanned Quarterly report (3p)"),
    ])
    def test_scan_job_with_any_scanner(self, scanner, expected, document):
        """Test digitising with any scanner."""
        assert ScanJob(scanner).digitise(document) == expected

    def test_scan_job_rejects_printer_only_device(self):
        """Test that a printer-only device cannot back a scan job."""
        with pytest.raises(ContractViolationError):
            ScanJob(LaserPrinter())

    def test_wide_device_is_not_a_narrow_printer(self):
        """Test that the wide device does not satisfy Printer."""
        with pytest.raises(ContractViolationError):
            PrintJob(BasicInkjet())
