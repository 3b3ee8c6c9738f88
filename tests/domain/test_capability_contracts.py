"""Tests for capability contracts and the consumer base."""

from abc import abstractmethod

import pytest

from solidkit.domain.base import (
    Capability,
    Consumer,
    ContractViolationError,
    OperationFailedError,
)
from solidkit.domain.printing import OfficeMultiFunction, Printer
from solidkit.domain.users import MySqlRecordStore, PostgresRecordStore, RecordStore


class EngineX(RecordStore):
    def save(self, record):
        return f"X:{record}"


class EngineY(RecordStore):
    def save(self, record):
        return f"Y:{record}"


class Creator(Consumer):
    requires = RecordStore

    def create(self, record):
        return self._run([("save", (record,))])[0]


class Ledger(Capability):
    @abstractmethod
    def check(self, entry):
        pass

    @abstractmethod
    def post(self, entry):
        pass


class AuditedLedger(Ledger):
    @abstractmethod
    def audit(self, entry):
        pass


class PaperLedger(AuditedLedger):
    def __init__(self, reject=False):
        self.reject = reject
        self.posted = []

    def check(self, entry):
        if self.reject:
            raise OperationFailedError("check", f"{entry} rejected")
        return f"checked:{entry}"

    def post(self, entry):
        self.posted.append(entry)
        return f"posted:{entry}"

    def audit(self, entry):
        return f"audited:{entry}"


class Bookkeeper(Consumer):
    requires = Ledger

    def __init__(self, ledger: Ledger):
        super().__init__(ledger)

    def record(self, entry):
        return self._run([("check", (entry,)), ("post", (entry,))])

    def sneak_audit(self, entry):
        return self._run([("audit", (entry,))])


class TestCapability:
    """Test cases for Capability."""

    def test_operations_in_declaration_order(self):
        """Test that operations are listed in declaration order."""
        assert Ledger.operations() == ("check", "post")

    def test_sub_contract_operations_follow_base_contract(self):
        """Test that sub-contract operations follow the base ones."""
        assert AuditedLedger.operations() == ("check", "post", "audit")
        assert PaperLedger.operations() == ("check", "post", "audit")

    def test_multiple_contracts_merge_in_base_order(self):
        """Test that several contracts merge in base order."""
        assert OfficeMultiFunction.operations() == ("print_document", "scan_document", "fax_document")

    def test_contracts_most_specific_first(self):
        """Test that contracts are listed most specific first."""
        assert PaperLedger.contracts() == (AuditedLedger, Ledger)
        assert MySqlRecordStore.contracts() == (RecordStore,)

    def test_variant_is_not_a_contract(self):
        """Test that a concrete variant is not a contract."""
        assert RecordStore.is_contract()
        assert not MySqlRecordStore.is_contract()

    def test_contract_cannot_be_instantiated(self):
        """Test that a contract cannot be instantiated."""
        with pytest.raises(TypeError):
            RecordStore()


class TestConsumer:
    """Test cases for Consumer."""

    def test_same_record_through_two_engines(self):
        """Test one record saved through two engines."""
        assert Creator(EngineX()).create("r1") == "X:r1"
        assert Creator(EngineY()).create("r1") == "Y:r1"

    def test_rejects_dependency_outside_contract(self):
        """Test that a dependency outside the contract is refused."""
        with pytest.raises(ContractViolationError) as exc_info:
            Creator(OfficeMultiFunction())

        assert exc_info.value.contract is RecordStore
        assert "RecordStore" in str(exc_info.value)

    def test_rewire_changes_effect_not_code_path(self):
        """Test that rewiring changes the effect only."""
        creator = Creator(MySqlRecordStore())
        assert creator.create("bob") == "mysql:bob"

        creator.rewire(PostgresRecordStore())

        assert isinstance(creator.dependency, PostgresRecordStore)
        assert creator.create("bob") == "postgres:bob"

    def test_rewire_validates_contract(self):
        """Test that rewiring checks the contract."""
        creator = Creator(EngineX())

        with pytest.raises(ContractViolationError):
            creator.rewire(object())

        assert isinstance(creator.dependency, EngineX)

    def test_runs_sequence_in_order(self):
        """Test that steps run in order."""
        ledger = PaperLedger()

        assert Bookkeeper(ledger).record("e1") == ["checked:e1", "posted:e1"]
        assert ledger.posted == ["e1"]

    def test_failure_aborts_remaining_steps(self):
        """Test that a failure aborts the remaining steps."""
        ledger = PaperLedger(reject=True)

        with pytest.raises(OperationFailedError) as exc_info:
            Bookkeeper(ledger).record("e1")

        assert exc_info.value.operation == "check"
        assert exc_info.value.reason == "e1 rejected"
        assert ledger.posted == []

    def test_operation_outside_required_contract_is_refused(self):
        """Test that a step outside the contract is refused."""
        # PaperLedger can audit, but Bookkeeper only depends on Ledger
        with pytest.raises(ContractViolationError):
            Bookkeeper(PaperLedger()).sneak_audit("e1")

    def test_printer_consumer_accepts_multifunction_device(self):
        """Test that a printer consumer accepts a multifunction device."""
        class Printout(Consumer):
            requires = Printer

        assert isinstance(Printout(OfficeMultiFunction()).dependency, Printer)
