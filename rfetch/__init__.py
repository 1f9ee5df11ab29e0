"""rFetch — fast, themeable system information for the terminal"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("rfetch")
except PackageNotFoundError:
    __version__ = "dev"

__author__ = "rFetch Team"
