"""
Ignore file processing for auto-barrel

Each directory may carry a .barrelignore file with gitignore-style patterns.
Rules apply to the directory that holds them and, through path prefixing,
to every directory below it.
"""

from .constants import IGNORE_FILENAME, AGGREGATOR_FILENAME
from .context import IgnoreContext
from .rule_engine import IgnoreRuleEngine
from .file_loader import IgnoreFileLoader, RuleFileReport
from .init import init_ignore_file, generate_ignore_content

__all__ = [
    'IGNORE_FILENAME',
    'AGGREGATOR_FILENAME',
    'IgnoreContext',
    'IgnoreRuleEngine',
    'IgnoreFileLoader',
    'RuleFileReport',
    'init_ignore_file',
    'generate_ignore_content',
]
