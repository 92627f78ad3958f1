"""
auto-barrel - generate per-directory re-export aggregators
"""

__version__ = "1.0.0"

from .config import BarrelConfig, BarrelConfigError
from .naming import derive_identifier
from .walker import BarrelGenerator, Entry

__all__ = [
    '__version__',
    'BarrelConfig',
    'BarrelConfigError',
    'BarrelGenerator',
    'Entry',
    'derive_identifier',
]
