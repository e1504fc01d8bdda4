class Sheet2SongsError(Exception):
    """Base exception for sheet2songs."""


class MalformedLineError(Sheet2SongsError):
    """Raised when a token cannot be located in the line it was split from."""

    def __init__(self, line: str, token: str, index: int | None = None):
        self.line = line
        self.token = token
        self.index = index
        where = f"line {index}" if index is not None else "line"
        super().__init__(f"Malformed {where} {line!r}: cannot locate token {token!r}")


class SourceError(Sheet2SongsError):
    """Raised when a chord sheet cannot be read from its source."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Cannot read {location}: {reason}")


class FetchError(Sheet2SongsError):
    """Raised when an HTTP request fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class UnsupportedSourceError(Sheet2SongsError):
    """Raised when no source matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No source found for: {location}")
