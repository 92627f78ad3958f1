"""
Directory-scoped ignore rules that cascade to descendants
"""

import os
from typing import Optional

import pathspec

from barrelgen.utils import get_logger
from .constants import NEVER_IGNORED, RULE_PATH_SEPARATOR
from .file_loader import IgnoreFileLoader
from .rule_engine import IgnoreRuleEngine

logger = get_logger(__name__)


class IgnoreContext:
    """
    Exclusion scope of one directory during a barrel walk

    A context only knows its parent. Paths it cannot decide locally are
    handed to the parent prefixed with this directory's name, so a rule in
    an ancestor's file applies to descendants the way nested .gitignore
    files do.
    """

    def __init__(self,
                 folder_name: str,
                 parent: Optional['IgnoreContext'] = None,
                 loader: Optional[IgnoreFileLoader] = None,
                 engine: Optional[IgnoreRuleEngine] = None):
        """
        Args:
            folder_name: Directory name with a trailing separator; for the
                root this is the starting path
            parent: Context of the enclosing directory
            loader: Rule file loader (inherited from parent when omitted)
            engine: Rule engine (inherited from parent when omitted)
        """
        self.parent = parent
        self.folder_name = folder_name
        self.full_path = parent.full_path + folder_name if parent else folder_name

        if parent is not None:
            loader = loader or parent.loader
            engine = engine or parent.engine
        self.engine = engine or IgnoreRuleEngine()
        self.loader = loader or IgnoreFileLoader(engine=self.engine)

        self._rules: Optional[pathspec.PathSpec] = None
        self._rules_loaded = False

    @classmethod
    def root(cls, path: str, **kwargs) -> 'IgnoreContext':
        """Create the context for the starting directory of a walk"""
        return cls(os.path.join(path, ''), **kwargs)

    @property
    def rules(self) -> Optional[pathspec.PathSpec]:
        return self._rules

    def child(self, name: str) -> 'IgnoreContext':
        """Create the context of a sub-directory"""
        return IgnoreContext(name + RULE_PATH_SEPARATOR, parent=self)

    def load_rules(self) -> Optional[pathspec.PathSpec]:
        """
        Read and compile this directory's rule file, once

        A missing or unreadable file leaves the context without local rules.
        """
        if not self._rules_loaded:
            self._rules_loaded = True
            text = self.loader.read(self.full_path)
            if text:
                self._rules = self.engine.compile(text)
                if self._rules is not None:
                    logger.debug(f"Loaded {self.loader.ignore_filename} for {self.full_path}")
        return self._rules

    def ignored(self, path: str) -> bool:
        """
        Check whether a path relative to this directory is excluded

        Args:
            path: '/'-separated path relative to this directory

        Returns:
            True if this directory or an ancestor has a matching rule
        """
        if path in NEVER_IGNORED:
            return False

        if self._rules is not None and self.engine.test(self._rules, path):
            logger.trace(f"{self.full_path}{path} excluded by rules in {self.full_path}")
            return True

        if self.parent is None:
            return False

        return self.parent.ignored(self.folder_name + path)

    def __repr__(self):
        return f"IgnoreContext({self.full_path!r})"
