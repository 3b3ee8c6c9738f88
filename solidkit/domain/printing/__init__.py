"""Printing domain - Interface Segregation lesson."""

from .devices import (
    BasicInkjet,
    Document,
    Fax,
    FlatbedScanner,
    LaserPrinter,
    MultiFunctionDevice,
    OfficeMultiFunction,
    Printer,
    Scanner,
)
from .jobs import PrintJob, ScanJob

__all__ = [
    "Document",
    "MultiFunctionDevice",
    "BasicInkjet",
    "Printer",
    "Scanner",
    "Fax",
    "OfficeMultiFunction",
    "LaserPrinter",
    "FlatbedScanner",
    "PrintJob",
    "ScanJob",
]
