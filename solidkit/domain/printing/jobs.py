"""Print and scan jobs driven through narrow device ports."""
from solidkit.domain.base.consumer import Consumer
from solidkit.domain.printing.devices import Document, Printer, Scanner


class PrintJob(Consumer):
    """Sends documents to whichever printer it was given."""

    requires = Printer

    def __init__(self, printer: Printer):
        super().__init__(printer)

    def submit(self, document: Document) -> str:
        return self._run([("print_document", (document,))])[0]


class ScanJob(Consumer):
    """Digitises documents on whichever scanner it was given."""

    requires = Scanner

    def __init__(self, scanner: Scanner):
        super().__init__(scanner)

    def digitise(self, document: Document) -> str:
        return self._run([("scan_document", (document,))])[0]
