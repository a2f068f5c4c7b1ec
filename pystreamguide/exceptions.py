class PlaylistError(Exception):
    """Base class for failures while obtaining or reading a playlist."""


class PlaylistFetchError(PlaylistError):
    pass


class PlaylistParseError(PlaylistError):
    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}")
