"""
Rule engine for pattern compilation and matching
"""

from typing import List, Dict, Optional, Tuple

import pathspec
from barrelgen.utils import get_logger

logger = get_logger(__name__)


def parse_pattern_lines(text: str) -> List[Tuple[int, str]]:
    """
    Extract (line number, pattern) pairs from rule file text

    Blank lines and '#' comments are dropped; surrounding whitespace is
    stripped.
    """
    patterns = []
    for line_num, line in enumerate(text.splitlines(), 1):
        stripped = line.strip()
        if not stripped or stripped.startswith('#'):
            continue
        patterns.append((line_num, stripped))
    return patterns


def parse_patterns(text: str) -> List[str]:
    return [pattern for _, pattern in parse_pattern_lines(text)]


class IgnoreRuleEngine:
    """
    Compiles gitignore-style rule text and tests paths against it
    """

    def __init__(self):
        self._compiled_cache: Dict[str, pathspec.PathSpec] = {}

    def compile(self, text: str) -> Optional[pathspec.PathSpec]:
        """
        Compile the contents of one rule file

        Args:
            text: Raw rule file contents

        Returns:
            Compiled spec, or None if the text holds no valid pattern
        """
        return self.compile_patterns(parse_patterns(text))

    def compile_patterns(self, patterns: List[str]) -> Optional[pathspec.PathSpec]:
        """
        Compile a list of patterns with caching

        Invalid patterns are skipped with a warning; the rest still compile.
        """
        if not patterns:
            return None

        cache_key = '\n'.join(patterns)
        if cache_key in self._compiled_cache:
            return self._compiled_cache[cache_key]

        valid_patterns = []
        for pattern in patterns:
            is_valid, error = self.validate_pattern(pattern)
            if is_valid:
                valid_patterns.append(pattern)
            else:
                logger.warning(f"Skipping invalid pattern '{pattern}': {error}")

        if not valid_patterns:
            return None

        spec = pathspec.GitIgnoreSpec.from_lines(valid_patterns)
        self._compiled_cache[cache_key] = spec
        return spec

    def test(self, spec: pathspec.PathSpec, path: str) -> bool:
        """
        Check a '/'-separated path, relative to the rule owner, against a spec
        """
        return spec.match_file(path)

    def validate_pattern(self, pattern: str) -> Tuple[bool, Optional[str]]:
        """
        Validate a single pattern

        Args:
            pattern: Pattern to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            test_pattern = pattern[1:] if pattern.startswith('!') else pattern
            pathspec.GitIgnoreSpec.from_lines([test_pattern])
            return True, None
        except Exception as e:
            return False, str(e)

    def clear_cache(self):
        """Clear the compiled pattern cache"""
        self._compiled_cache.clear()
