"""Track source exceptions for error handling."""


class TrackSourceError(Exception):
    """Base exception for backend transport failures."""

    def __init__(self, source_name: str, message: str):
        self.source_name = source_name
        super().__init__(f"{source_name}: {message}")


class InvalidLocatorError(TrackSourceError):
    """Raised when a backend is asked to load an empty or unusable locator."""

    def __init__(self, source_name: str, locator: str):
        self.locator = locator
        super().__init__(source_name, f"invalid locator {locator!r}")
