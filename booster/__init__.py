"""booster — configuration and metadata holder for Booster applications."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("booster")
except PackageNotFoundError:
    __version__ = "0.1.0"  # fallback for development
