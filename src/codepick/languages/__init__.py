"""Language detection and per-language extraction patterns."""

from .detect import (
    EXTENSION_MAP,
    FALLBACK_LANGUAGE,
    LANGUAGES,
    detect_language,
    get_supported_extensions,
    resolve_language,
)
from .patterns import (
    COMMENT_SYNTAX,
    PATTERNS,
    VARIABLE_SKIP_PREFIXES,
    CommentSyntax,
    Rule,
    rules_for,
    supported_languages,
)

__all__ = [
    "COMMENT_SYNTAX",
    "EXTENSION_MAP",
    "FALLBACK_LANGUAGE",
    "LANGUAGES",
    "PATTERNS",
    "VARIABLE_SKIP_PREFIXES",
    "CommentSyntax",
    "Rule",
    "detect_language",
    "get_supported_extensions",
    "resolve_language",
    "rules_for",
    "supported_languages",
]
