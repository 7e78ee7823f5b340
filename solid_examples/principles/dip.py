"""The Dependency Inversion Principle (DIP).

High-level modules should not depend on low-level modules; both should
depend on abstractions. Abstractions should not depend on details; details
should depend on abstractions.

``SpecificManager`` keeps a list per concrete worker type and must grow a new
list and a new loop for every kind of worker. ``Manager`` only knows the
``Worker`` abstraction, so new kinds of worker need no change to it.

Ref: https://en.wikipedia.org/wiki/Dependency_inversion_principle
"""
from abc import ABC, abstractmethod
from typing import List

from solid_examples.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Worker(ABC):
    """Anything that can be handed work."""

    @abstractmethod
    def perform(self) -> None:
        """Do the work."""


class RegularWorker(Worker):
    def perform(self) -> None:
        print("Working...")


class SpecialWorker(Worker):
    def perform(self) -> None:
        print("Especially working...")


class ContractWorker(Worker):
    """Added after Manager was written; Manager did not change."""

    def perform(self) -> None:
        print("Working on contract...")


# Wrong: the manager depends on every concrete worker type.
class SpecificManager:
    def __init__(self):
        self.regular_workers: List[RegularWorker] = []
        self.special_workers: List[SpecialWorker] = []

    def add_regular_worker(self, worker: RegularWorker) -> None:
        self.regular_workers.append(worker)

    def add_special_worker(self, worker: SpecialWorker) -> None:
        self.special_workers.append(worker)

    def delegate_work(self) -> None:
        for worker in self.regular_workers:
            worker.perform()

        for worker in self.special_workers:
            worker.perform()


# Right: the manager depends on the abstraction only.
class Manager:
    def __init__(self):
        self.workers: List[Worker] = []

    def add_worker(self, worker: Worker) -> None:
        self.workers.append(worker)

    def delegate_work(self) -> None:
        """Call ``perform`` once on every worker, in registration order."""
        logger.debug("Delegating work", workers=len(self.workers))
        for worker in self.workers:
            worker.perform()


def run() -> None:
    print("The wrong way, no abstractions")

    specific_manager = SpecificManager()
    specific_manager.add_regular_worker(RegularWorker())
    specific_manager.add_special_worker(SpecialWorker())
    specific_manager.delegate_work()

    print()
    print("The right way")

    manager = Manager()
    manager.add_worker(RegularWorker())
    manager.add_worker(SpecialWorker())
    manager.add_worker(ContractWorker())
    manager.delegate_work()


def main() -> None:
    run()


if __name__ == "__main__":
    main()
