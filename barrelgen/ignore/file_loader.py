"""
Reading rule files and checking them for patterns that will misbehave
"""

import os
from pathlib import Path
from typing import List, Optional, Union
from dataclasses import dataclass, field

from barrelgen.utils import get_logger
from .constants import IGNORE_FILENAME, HIDDEN_PREFIX, DEPENDENCY_DIRNAME, NEVER_IGNORED
from .rule_engine import IgnoreRuleEngine, parse_pattern_lines

logger = get_logger(__name__)


@dataclass
class RuleProblem:
    line: int
    pattern: str
    message: str
    is_error: bool = False


@dataclass
class RuleFileReport:
    """Findings for one rule file, as the walk would read it"""
    path: Path
    patterns: List[str] = field(default_factory=list)
    problems: List[RuleProblem] = field(default_factory=list)

    @property
    def errors(self) -> List[RuleProblem]:
        return [p for p in self.problems if p.is_error]

    @property
    def warnings(self) -> List[RuleProblem]:
        return [p for p in self.problems if not p.is_error]


class IgnoreFileLoader:
    """
    Reads per-directory rule files
    """

    def __init__(self, ignore_filename: str = IGNORE_FILENAME,
                 engine: Optional[IgnoreRuleEngine] = None):
        self.ignore_filename = ignore_filename
        self._engine = engine or IgnoreRuleEngine()

    def read(self, directory: str) -> Optional[str]:
        """
        Read the rule file of a directory

        Args:
            directory: Directory path ending with a separator

        Returns:
            File contents, or None when the file is absent or unreadable
        """
        file_path = directory + self.ignore_filename
        try:
            return _read_text(file_path)
        except FileNotFoundError:
            logger.trace(f"No {self.ignore_filename} in {directory}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read {file_path}, treating as empty: {e}")
            return None

    def check_file(self, file_path: Union[str, Path]) -> RuleFileReport:
        """
        Report what the walk would make of a rule file

        An unreadable file or a pattern the engine rejects is an error;
        both are silently dropped during generation. Patterns that compile
        but cannot affect the output are warnings.
        """
        report = RuleFileReport(path=Path(file_path))
        try:
            text = _read_text(str(file_path))
        except (OSError, UnicodeDecodeError) as e:
            report.problems.append(RuleProblem(0, "", f"Unreadable, treated as empty: {e}", is_error=True))
            return report

        for line_num, pattern in parse_pattern_lines(text):
            is_valid, error = self._engine.validate_pattern(pattern)
            if is_valid:
                report.patterns.append(pattern)
            else:
                report.problems.append(RuleProblem(line_num, pattern, f"Skipped: {error}", is_error=True))

            for message in self._pattern_warnings(pattern):
                report.problems.append(RuleProblem(line_num, pattern, message))

        return report

    def find_ignore_files(self, root_path: Union[str, Path]) -> List[Path]:
        """
        Find the rule files in every directory a barrel walk would visit,
        ordered from root to leaves
        """
        ignore_files = []

        for dirpath, dirnames, filenames in os.walk(root_path):
            dirnames[:] = sorted(
                d for d in dirnames
                if not d.startswith(HIDDEN_PREFIX) and d != DEPENDENCY_DIRNAME
            )
            if self.ignore_filename in filenames:
                ignore_files.append(Path(dirpath) / self.ignore_filename)

        ignore_files.sort(key=lambda p: len(p.parts))
        return ignore_files

    def _pattern_warnings(self, pattern: str) -> List[str]:
        warnings = []
        bare = pattern.lstrip('!').strip('/')

        if '\\' in pattern and not pattern.startswith('\\'):
            warnings.append("Backslash is an escape, not a separator; use '/'")

        if pattern in ('*', '**', '**/*'):
            warnings.append("Excludes every file in this directory and below")

        if bare in NEVER_IGNORED:
            warnings.append(f"'{bare}' is never matched by rules")
        elif bare.startswith(HIDDEN_PREFIX):
            warnings.append("Hidden entries are always skipped; no effect")

        return warnings


def _read_text(file_path: str) -> str:
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()
