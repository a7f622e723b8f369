"""AI-powered commit message and pull request generator."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("git-relax")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
