"""
Initialize .barrelignore files with a commented template
"""

from pathlib import Path
from typing import Optional, List
from datetime import datetime

from .constants import IGNORE_FILENAME, AGGREGATOR_FILENAME


def generate_ignore_content(custom_patterns: Optional[List[str]] = None,
                            ignore_filename: str = IGNORE_FILENAME) -> str:
    """
    Generate content for a rule file

    Args:
        custom_patterns: Patterns to include below the header
        ignore_filename: Name the file will be written under

    Returns:
        Content for the rule file
    """
    lines = [
        f"# {ignore_filename} - auto-barrel exclusion patterns",
        f"# Generated on {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        "#",
        "# This file uses gitignore syntax to keep files out of the generated",
        f"# {AGGREGATOR_FILENAME} re-exports. Patterns are matched relative to the",
        "# location of this file and also apply to every sub-directory.",
        "# Use ! to negate patterns and re-include files.",
        "",
    ]

    if custom_patterns:
        lines.extend([
            "# Custom patterns",
            "# ---------------",
        ])
        lines.extend(custom_patterns)
        lines.append("")

    lines.extend([
        "# Examples:",
        "# *.test.ts             # Test files",
        "# *.d.ts                # Declaration files",
        "# fixtures/             # Everything below fixtures/",
        "# /main.ts              # Only main.ts next to this file",
        "#",
        "# Hidden entries, node_modules and the generated file itself are",
        "# always skipped and need no pattern.",
        "",
    ])

    return '\n'.join(lines)


def init_ignore_file(path: Path,
                     force: bool = False,
                     custom_patterns: Optional[List[str]] = None,
                     ignore_filename: str = IGNORE_FILENAME) -> bool:
    """
    Initialize a rule file in the given directory

    Args:
        path: Directory where to create the rule file
        force: Overwrite existing file
        custom_patterns: Additional patterns to include
        ignore_filename: Rule file name

    Returns:
        True if file was created, False if already exists and not forced
    """
    ignore_path = Path(path) / ignore_filename

    if ignore_path.exists() and not force:
        return False

    content = generate_ignore_content(custom_patterns=custom_patterns,
                                      ignore_filename=ignore_filename)
    ignore_path.write_text(content, encoding='utf-8')
    return True
