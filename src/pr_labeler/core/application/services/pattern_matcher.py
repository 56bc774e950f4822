"""Glob matching shared by exclusion, categories, risk and complexity filters.

Patterns follow ``fnmatch`` rules on forward-slash paths with three
extensions: ``{a,b}`` alternatives, a leading ``**/`` that also matches at
the repository root, and (for exclusion) basename matching of patterns
without a slash.
"""

import re
from collections.abc import Iterable
from fnmatch import fnmatchcase

from pr_labeler.core.domain.config.default_excludes import DEFAULT_EXCLUDE_PATTERNS

_BRACES = re.compile(r"\{([^{}]*)\}")


def normalize_path(path: str) -> str:
    normalized = path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


def expand_braces(pattern: str) -> list[str]:
    match = _BRACES.search(pattern)
    if not match:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def _variants(pattern: str) -> list[str]:
    variants = []
    for candidate in expand_braces(normalize_path(pattern)):
        variants.append(candidate)
        if candidate.startswith("**/"):
            variants.append(candidate[3:])
    return variants


def matches_pattern(path: str, pattern: str, *, match_base: bool = False) -> bool:
    """True when ``path`` matches ``pattern``.

    With ``match_base`` a pattern without ``/`` is tried against the
    basename too, so ``*.lock`` excludes ``sub/dir/poetry.lock``.
    """
    if not pattern:
        return False
    normalized = normalize_path(path)
    basename = normalized.rsplit("/", 1)[-1]
    for candidate in _variants(pattern):
        if fnmatchcase(normalized, candidate):
            return True
        if match_base and "/" not in candidate and fnmatchcase(basename, candidate):
            return True
    return False


def matches_any(path: str, patterns: Iterable[str], *, match_base: bool = False) -> bool:
    return any(matches_pattern(path, pattern, match_base=match_base) for pattern in patterns)


def is_excluded(path: str, patterns: Iterable[str]) -> bool:
    return matches_any(path, patterns, match_base=True)


def exclusion_patterns(additional: Iterable[str] = ()) -> list[str]:
    """Built-in exclusion globs followed by user ones, without duplicates or blanks."""
    merged: list[str] = []
    for pattern in [*DEFAULT_EXCLUDE_PATTERNS, *additional]:
        pattern = pattern.strip()
        if pattern and pattern not in merged:
            merged.append(pattern)
    return merged


def filter_files(paths: Iterable[str], patterns: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split ``paths`` into (kept, excluded)."""
    pattern_list = list(patterns)
    kept: list[str] = []
    excluded: list[str] = []
    for path in paths:
        (excluded if is_excluded(path, pattern_list) else kept).append(path)
    return kept, excluded


def is_test_file(path: str, test_patterns: Iterable[str] = ()) -> bool:
    normalized = normalize_path(path)
    segments = normalized.split("/")
    if "__tests__" in segments[:-1] or "tests" in segments[:-1]:
        return True
    basename = segments[-1]
    if ".test." in basename or ".spec." in basename:
        return True
    return matches_any(normalized, test_patterns, match_base=True)
