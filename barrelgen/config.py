"""
Run configuration for auto-barrel.

Values come from BARREL_* environment variables and can be overridden by
command-line flags.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional, Mapping

from barrelgen.ignore.constants import IGNORE_FILENAME, AGGREGATOR_FILENAME

TRUE_VALUES = ('true', '1', 'yes', 'on')
FALSE_VALUES = ('false', '0', 'no', 'off', '')


class BarrelConfigError(ValueError):
    """Raised for an invalid configuration value"""


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise BarrelConfigError(f"{name} must be a boolean, got {value!r}")


def _check_filename(name: str, value: str) -> str:
    if not value or '/' in value or os.sep in value or value in ('.', '..'):
        raise BarrelConfigError(f"{name} must be a plain file name, got {value!r}")
    return value


@dataclass(frozen=True)
class BarrelConfig:
    """Settings for one barrel run"""
    ignore_filename: str = IGNORE_FILENAME
    aggregator_filename: str = AGGREGATOR_FILENAME
    sort_entries: bool = False

    def __post_init__(self):
        _check_filename('ignore_filename', self.ignore_filename)
        _check_filename('aggregator_filename', self.aggregator_filename)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'BarrelConfig':
        """
        Build a config from environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)
        """
        env = os.environ if environ is None else environ
        sort_entries = env.get('BARREL_SORT_ENTRIES')
        return cls(
            ignore_filename=env.get('BARREL_IGNORE_FILENAME') or IGNORE_FILENAME,
            aggregator_filename=env.get('BARREL_OUTPUT_FILENAME') or AGGREGATOR_FILENAME,
            sort_entries=_parse_bool('BARREL_SORT_ENTRIES', sort_entries) if sort_entries is not None else False,
        )

    def with_overrides(self, **overrides) -> 'BarrelConfig':
        """Return a copy with every non-None override applied"""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self
