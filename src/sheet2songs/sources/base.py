from abc import ABC, abstractmethod


class SheetSource(ABC):
    """Abstract base class for the places a chord sheet can be read from."""

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Return True if this source can read the given location."""

    @abstractmethod
    def fetch(self, location: str) -> str:
        """Return the raw text of the chord sheet at *location*.

        Raises SourceError (or FetchError for HTTP failures) if the sheet
        cannot be read.
        """

    def read(self, location: str) -> list[str]:
        """Fetch the sheet and split it into lines.

        Line terminators are stripped and zero-length lines are dropped.
        Whitespace-only lines are kept; the converter classifies them as
        empty.
        """
        text = self.fetch(location)
        lines = (line.rstrip("\r") for line in text.split("\n"))
        return [line for line in lines if line]
