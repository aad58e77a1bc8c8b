from .core import GitAttributes
from .config import Settings

__all__ = ["GitAttributes", "Settings"]
