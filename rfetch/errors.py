"""
Exception hierarchy for rfetch.

Every error that is allowed to abort a run derives from RFetchError.
The CLI catches RFetchError, prints str(error) to stderr, and exits 1.
The gatherer, colors and the renderer degrade instead of raising.
"""


class RFetchError(Exception):
    """Base class. Subclasses set `prefix` to name the failure kind."""

    prefix = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class ConfigError(RFetchError):
    prefix = "Configuration error"


class SystemInfoError(RFetchError):
    prefix = "System information error"


class DisplayError(RFetchError):
    prefix = "Display error"


class FileAccessError(RFetchError):
    prefix = "IO error"


class ThemeParseError(RFetchError):
    prefix = "Parse error"
