"""bonebake - bakes keyframed skeletal animations into per-tick frame tables."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bonebake")
except PackageNotFoundError:
    __version__ = "unknown"
