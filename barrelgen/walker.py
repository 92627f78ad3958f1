"""
Depth-first barrel generation

Every directory that holds at least one eligible file, or a sub-directory
that produced its own aggregator, gets an aggregator file re-exporting each
of them under a derived namespace.
"""

import os
import stat
import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import List, Optional

from barrelgen.config import BarrelConfig
from barrelgen.ignore import IgnoreContext, IgnoreFileLoader, IgnoreRuleEngine
from barrelgen.ignore.constants import HIDDEN_PREFIX, DEPENDENCY_DIRNAME, RULE_PATH_SEPARATOR
from barrelgen.naming import derive_identifier
from barrelgen.utils import get_logger, log_with_context

logger = get_logger(__name__)


@dataclass
class Entry:
    """One re-export line of an aggregator"""
    identifier: str
    relative_path: str

    def render(self) -> str:
        return f"export * as {self.identifier} from './{self.relative_path}';\n"


class BarrelGenerator:
    """
    Walks a directory tree and writes one aggregator per directory

    The walk is strictly sequential. Rule files that cannot be read are
    treated as empty; any other filesystem error propagates and stops the
    walk, leaving already written aggregators in place.
    """

    def __init__(self, config: Optional[BarrelConfig] = None):
        self.config = config or BarrelConfig()
        self.engine = IgnoreRuleEngine()
        self.loader = IgnoreFileLoader(self.config.ignore_filename, engine=self.engine)
        self.written: List[str] = []
        self.visited = 0

    def run(self, root: str = '.') -> bool:
        """
        Generate aggregators for the tree under root

        Returns:
            True if an aggregator was written for root itself
        """
        self.written = []
        self.visited = 0
        context = IgnoreContext.root(str(root), loader=self.loader, engine=self.engine)
        produced = self.barrel(context)
        log_with_context(
            logger, logging.INFO,
            f"Wrote {len(self.written)} {self.config.aggregator_filename} file(s) "
            f"across {self.visited} director{'y' if self.visited == 1 else 'ies'}",
            root=context.full_path,
            written=len(self.written),
            visited=self.visited,
        )
        return produced

    def barrel(self, context: IgnoreContext) -> bool:
        """
        Generate the aggregator of one directory, recursing first

        Args:
            context: Ignore context of the directory

        Returns:
            True if an aggregator was written
        """
        context.load_rules()
        self.visited += 1

        entries = []
        for name in self._list(context.full_path):
            mode = os.lstat(context.full_path + name).st_mode

            if stat.S_ISDIR(mode):
                if self.barrel(context.child(name)):
                    entries.append(Entry(
                        identifier=derive_identifier(name),
                        relative_path=name + RULE_PATH_SEPARATOR + self.config.aggregator_filename,
                    ))
                else:
                    logger.trace(f"Skipping {context.full_path}{name}: nothing to export")
                continue

            if not stat.S_ISREG(mode):
                logger.trace(f"Skipping {context.full_path}{name}: not a regular file")
                continue

            if context.ignored(name):
                logger.debug(f"Ignored {context.full_path}{name}")
                continue

            entries.append(Entry(identifier=derive_identifier(name), relative_path=name))

        if not entries:
            logger.debug(f"No entries in {context.full_path}, nothing written")
            return False

        self._warn_collisions(context, entries)
        self._write(context.full_path + self.config.aggregator_filename, entries)
        return True

    def _list(self, directory: str) -> List[str]:
        """List candidate names, skipping hidden, dependency, rule and output entries"""
        names = os.listdir(directory)
        if self.config.sort_entries:
            names.sort()
        return [
            name for name in names
            if not name.startswith(HIDDEN_PREFIX)
            and name != DEPENDENCY_DIRNAME
            and name != self.config.aggregator_filename
            and name != self.config.ignore_filename
        ]

    def _write(self, path: str, entries: List[Entry]):
        source = ''.join(entry.render() for entry in entries)
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(source)
        self.written.append(path)
        logger.debug(f"Wrote {path} ({len(entries)} exports)")

    def _warn_collisions(self, context: IgnoreContext, entries: List[Entry]):
        by_identifier = defaultdict(list)
        for entry in entries:
            by_identifier[entry.identifier].append(entry.relative_path)

        for identifier, paths in by_identifier.items():
            if len(paths) > 1:
                logger.warning(
                    f"Duplicate export name {identifier!r} in {context.full_path}: "
                    f"{', '.join(paths)}"
                )
