from pathlib import Path

from ..exceptions import SourceError
from .base import SheetSource


class FileSource(SheetSource):
    """Chord sheet stored as a UTF-8 text file on the local filesystem."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return "://" not in location

    def fetch(self, location: str) -> str:
        path = Path(location)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise SourceError(location, "no such file") from exc
        except IsADirectoryError as exc:
            raise SourceError(location, "is a directory") from exc
        except UnicodeDecodeError as exc:
            raise SourceError(location, "not valid UTF-8 text") from exc
        except OSError as exc:
            raise SourceError(location, exc.strerror or str(exc)) from exc
