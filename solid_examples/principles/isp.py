"""The Interface Segregation Principle (ISP).

No client should be forced to depend on methods it does not use. Large
interfaces are split into smaller, more specific ones, so that clients only
know about the methods that are of interest to them. Such shrunken
interfaces are also called role interfaces.

``MachinePort`` bundles printing, scanning and faxing, so a device that can
only print still has to stub the rest. ``PrinterPort`` and ``ScannerPort``
are role interfaces that devices combine as needed.

Ref: https://en.wikipedia.org/wiki/Interface_segregation_principle
"""
from abc import ABC, abstractmethod
from typing import List, NewType, Sequence

from solid_examples.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

Document = NewType("Document", str)


# Wrong: one interface for every capability.
class MachinePort(ABC):
    """Monolithic machine interface."""

    @abstractmethod
    def print(self, documents: Sequence[Document]) -> None:
        """Print documents."""

    @abstractmethod
    def scan(self) -> List[Document]:
        """Scan documents."""

    @abstractmethod
    def fax(self, documents: Sequence[Document]) -> None:
        """Fax documents."""


class MultiFunctionMachine(MachinePort):
    def print(self, documents: Sequence[Document]) -> None:
        print("Printing...")

    def scan(self) -> List[Document]:
        print("Scanning...")
        return []

    def fax(self, documents: Sequence[Document]) -> None:
        print("Faxing...")


class OldFashionedPrinter(MachinePort):
    """Print-only device forced to carry scan and fax."""

    def print(self, documents: Sequence[Document]) -> None:
        print("Printing...")

    def scan(self) -> List[Document]:
        raise NotImplementedError("OldFashionedPrinter cannot scan")

    def fax(self, documents: Sequence[Document]) -> None:
        raise NotImplementedError("OldFashionedPrinter cannot fax")


def new_machine() -> MachinePort:
    return MultiFunctionMachine()


# Right: role interfaces, combined only where a device supports them.
class PrinterPort(ABC):
    """Role interface for printing."""

    @abstractmethod
    def print(self, documents: Sequence[Document]) -> None:
        """Print documents."""


class ScannerPort(ABC):
    """Role interface for scanning."""

    @abstractmethod
    def scan(self) -> List[Document]:
        """Scan documents."""


class ScannerPrinterPort(PrinterPort, ScannerPort):
    """Devices that both print and scan."""


class Printer(PrinterPort):
    def print(self, documents: Sequence[Document]) -> None:
        print("Printing...")


class Scanner(ScannerPort):
    def scan(self) -> List[Document]:
        print("Scanning...")
        return []


class ScannerPrinter(ScannerPrinterPort):
    def print(self, documents: Sequence[Document]) -> None:
        print("Printing...")

    def scan(self) -> List[Document]:
        print("Scanning...")
        return []


def new_scanner_printer() -> ScannerPrinterPort:
    return ScannerPrinter()


def run() -> None:
    print("The wrong way...")
    machine = new_machine()
    machine.print([])
    machine.scan()
    machine.fax([])

    old_printer = OldFashionedPrinter()
    old_printer.print([])
    try:
        old_printer.scan()
    except NotImplementedError as e:
        logger.debug("Stubbed capability called", device="OldFashionedPrinter", error=str(e))
        print(f"{e}, yet it has to declare scan()")

    print()
    print("The right way...")
    scanner_printer = new_scanner_printer()
    scanner_printer.print([])
    scanner_printer.scan()

    printer = Printer()
    printer.print([])


def main() -> None:
    run()


if __name__ == "__main__":
    main()
