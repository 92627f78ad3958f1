"""
Central configuration for ignore file processing and barrel output
"""

# Per-directory rule file, gitignore syntax
IGNORE_FILENAME = ".barrelignore"

# Generated aggregator written into every directory with at least one entry
AGGREGATOR_FILENAME = "mod.ts"

# Structural names: never rule-matched
VCS_DIRNAME = ".git"
DEPENDENCY_DIRNAME = "node_modules"
NEVER_IGNORED = frozenset({VCS_DIRNAME, DEPENDENCY_DIRNAME})

# Entries starting with this marker are never candidates
HIDDEN_PREFIX = "."

# Separator used when reconstructing paths for ancestor rules
RULE_PATH_SEPARATOR = "/"
