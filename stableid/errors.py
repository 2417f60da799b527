class StableIdError(Exception):
    """Base class for errors raised by stableid."""


class InvalidInputError(StableIdError, ValueError):
    """The given path, URI or identifier cannot be identified/parsed."""

    def __init__(self, message: str, value=None) -> None:
        super().__init__(message)
        self.value = value
