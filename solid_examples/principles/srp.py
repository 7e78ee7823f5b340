"""The Single Responsibility Principle (SRP).

A class should have responsibility over a single part of the functionality
provided by the software; it should have only one reason to change. This is
also referred to as high cohesion.

Here, keeping a log (accumulating entries) and persisting it (writing the
entries to a file) are two responsibilities. ``SelfSavingLogJournal`` mixes
them; ``LogJournal`` and ``LogFileWriter`` keep them apart.

Ref: https://en.wikipedia.org/wiki/Single_responsibility_principle
"""
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from solid_examples.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


# Wrong: the journal also knows how to store itself.
class SelfSavingLogJournal:
    """Log journal that also persists itself, violating SRP."""

    def __init__(self):
        self._entries: List[str] = []

    def log(self, entry: str) -> None:
        self._entries.append(entry)

    def save(self, filename: PathLike) -> None:
        """Write every entry to ``filename``, one per line."""
        try:
            with open(filename, "w", encoding="utf-8") as f:
                for entry in self._entries:
                    f.write(f"{entry}\n")
        except OSError as e:
            logger.error("Failed to save log journal", filename=str(filename), error=str(e))
            raise
        logger.debug("Saved log journal", filename=str(filename), entries=len(self._entries))


# Better: accumulating entries and persisting them are separate classes.
class LogJournal:
    """Ordered, append-only collection of log entries."""

    def __init__(self):
        self._entries: List[str] = []

    def log(self, entry: str) -> None:
        """Append an entry to the journal."""
        self._entries.append(entry)

    @property
    def entries(self) -> Tuple[str, ...]:
        """Snapshot of the entries in append order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class LogFileWriter:
    """Persists log entries to plain-text files."""

    def save(self, entries: Iterable[str], filename: PathLike) -> None:
        """
        Write entries to a file, one newline-terminated line per entry.

        The file is created or truncated. It is closed on every exit path.

        Args:
            entries: Entries to write, in order
            filename: Destination file

        Raises:
            OSError: If the destination cannot be opened for writing
        """
        count = 0
        try:
            with open(filename, "w", encoding="utf-8") as f:
                for entry in entries:
                    f.write(f"{entry}\n")
                    count += 1
        except OSError as e:
            logger.error("Failed to save log entries", filename=str(filename), error=str(e))
            raise
        logger.debug("Saved log entries", filename=str(filename), entries=count)


def run(
    output_dir: PathLike = ".",
    wrong_filename: str = "wrong.log",
    better_filename: str = "better.log",
) -> Tuple[Path, Path]:
    """
    Log two entries and save them through both designs.

    Returns:
        Paths of the files written by the wrong and the better design
    """
    print("Single Responsibility Principle")

    directory = Path(output_dir)
    wrong_path = directory / wrong_filename
    better_path = directory / better_filename

    journal = SelfSavingLogJournal()
    journal.log("entry1")
    journal.log("entry2")
    # The journal saves itself.
    journal.save(wrong_path)
    print(f"The wrong way: the journal saved itself to {wrong_path}")

    log_journal = LogJournal()
    log_journal.log("entry1")
    log_journal.log("entry2")
    # A dedicated writer saves the journal.
    LogFileWriter().save(log_journal.entries, better_path)
    print(f"The better way: a writer saved the journal to {better_path}")

    return wrong_path, better_path


def main() -> None:
    run()


if __name__ == "__main__":
    main()
