from .exceptions import UnsupportedSourceError
from .sources.base import SheetSource
from .sources.file import FileSource
from .sources.web import HttpSource

_SOURCES: list[type[SheetSource]] = [
    HttpSource,
    FileSource,
]


def get_source(location: str) -> SheetSource:
    """Return an instantiated source for the given path or URL.

    Raises UnsupportedSourceError if no source matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(location):
            return cls()
    raise UnsupportedSourceError(location)
