"""Per-language regex tables, keyed by (kind, language).

Each rule pairs a compiled pattern with the capture group(s) that hold the
element name. Rules for one (kind, language) are tried in order and the first
one that matches a line wins.
"""

from __future__ import annotations

import re
from typing import NamedTuple


class Rule(NamedTuple):
    regex: re.Pattern
    # Group index, or indices tried in order; () means "use the line text".
    name_group: int | tuple[int, ...] = 1
    # Captured names that make the rule count as not matching.
    skip_names: frozenset[str] = frozenset()

    def name_for(self, match: re.Match) -> str | None:
        groups = self.name_group if isinstance(self.name_group, tuple) else (self.name_group,)
        for group in groups:
            value = match.group(group)
            if value:
                return value
        return None


class CommentSyntax(NamedTuple):
    single_line: re.Pattern
    block_start: re.Pattern
    block_end: re.Pattern


# ── Comments ──────────────────────────────────────────────────────────

_C_COMMENTS = CommentSyntax(
    single_line=re.compile(r"//(.*)"),
    block_start=re.compile(r"/\*(?P<body>.*)"),
    block_end=re.compile(r"(?P<body>.*?)\*/"),
)

COMMENT_SYNTAX = {
    "javascript": _C_COMMENTS,
    "typescript": _C_COMMENTS,
    "java": _C_COMMENTS,
    "go": _C_COMMENTS,
    "python": CommentSyntax(
        single_line=re.compile(r"#(.*)"),
        block_start=re.compile(r"('''|\"\"\")(?P<body>.*)"),
        block_end=re.compile(r"(?P<body>.*?)('''|\"\"\")"),
    ),
}


# ── Functions ─────────────────────────────────────────────────────────

_C_FUNCTIONS = (
    # function name() {}
    Rule(re.compile(r"function\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*\([^)]*\)\s*\{")),
    # name = function() {}
    Rule(re.compile(r"([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*function\s*\([^)]*\)\s*\{")),
    # name = () => {}
    Rule(re.compile(r"([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*\([^)]*\)\s*=>")),
    # name() {}  (method shorthand; also matches `if (x) {`)
    Rule(re.compile(r"([a-zA-Z_$][a-zA-Z0-9_$]*)\s*\([^)]*\)\s*\{"),
         skip_names=frozenset({"function"})),
    # name: function() {}
    Rule(re.compile(r"\b([a-zA-Z_$][a-zA-Z0-9_$]*)\s*:\s*function\s*\([^)]*\)\s*\{")),
)

_FUNCTIONS = {
    "javascript": _C_FUNCTIONS,
    "typescript": _C_FUNCTIONS,
    "python": (
        Rule(re.compile(r"def\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\([^)]*\)\s*(?:->\s*[^:]+)?:")),
    ),
    "java": (
        Rule(re.compile(
            r"(public|private|protected)?\s*(static)?\s*\w+\s+"
            r"([a-zA-Z_$][a-zA-Z0-9_$]*)\s*\([^)]*\)\s*\{"
        ), 3),
    ),
    "go": (
        Rule(re.compile(r"func\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\([^)]*\)\s*\w*")),
    ),
}


# ── Classes ───────────────────────────────────────────────────────────

_C_CLASSES = (
    Rule(re.compile(r"class\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")),
)

_PY_CLASS = Rule(re.compile(r"class\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(?.*\)?\s*:"))

_CLASSES = {
    "javascript": _C_CLASSES,
    "typescript": _C_CLASSES,
    "python": (_PY_CLASS,),
    "java": (
        Rule(re.compile(r"(public|private)?\s*class\s+([a-zA-Z_$][a-zA-Z0-9_$]*)"), 2),
    ),
    # Go has no classes; struct types stand in for them
    "go": (
        Rule(re.compile(r"type\s+([a-zA-Z_][a-zA-Z0-9_]*)\s+struct\s*\{")),
    ),
}


# ── Imports ───────────────────────────────────────────────────────────

_C_IMPORTS = (
    Rule(re.compile(r"import\s+.*from\s+['\"](.*)['\"]")),
    Rule(re.compile(r"import\s+['\"](.*)['\"]")),
    Rule(re.compile(
        r"export\s+(default\s+)?(class|function|const|let|var)\s+"
        r"([a-zA-Z_$][a-zA-Z0-9_$]*)"
    ), 3),
    Rule(re.compile(r"export\s+\{.*\}"), ()),
    Rule(re.compile(r"require\(['\"](.*)['\"]\)")),
)

_IMPORTS = {
    "javascript": _C_IMPORTS,
    "typescript": _C_IMPORTS,
    "python": (
        # `from` first, so `from pkg import name` is named after pkg
        Rule(re.compile(r"from\s+([a-zA-Z_][a-zA-Z0-9_.]*)\s+import\s+.*")),
        Rule(re.compile(r"import\s+([a-zA-Z_][a-zA-Z0-9_.]*)")),
    ),
    "java": (
        Rule(re.compile(r"import\s+([a-zA-Z0-9_.*]+)")),
    ),
    "go": (
        Rule(re.compile(r"import\s+['\"](.*)['\"]")),
        Rule(re.compile(r"import\s+\([^)]*\)", re.DOTALL), ()),
    ),
}


# ── Variables ─────────────────────────────────────────────────────────

_C_VARIABLES = (
    Rule(re.compile(r"(const|let|var)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)"), 2),
)

_VARIABLES = {
    "javascript": _C_VARIABLES,
    "typescript": _C_VARIABLES,
    "python": (
        Rule(re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\s*=(?!=)")),
    ),
    "java": (
        Rule(re.compile(
            r"(final)?\s*(public|private|protected)?\s*\w+\s+"
            r"([a-zA-Z_$][a-zA-Z0-9_$]*)\s*(=|;)"
        ), 3),
    ),
    "go": (
        Rule(re.compile(r"(var|const)\s+([a-zA-Z_][a-zA-Z0-9_]*)"), 2),
        Rule(re.compile(r"([a-zA-Z_][a-zA-Z0-9_]*)\s*:=")),
    ),
}

# Lines starting with these are never variable declarations
VARIABLE_SKIP_PREFIXES = ("import", "function", "class", "export")


# ── Types ─────────────────────────────────────────────────────────────

_TYPES = {
    # JSDoc annotations are the closest JavaScript has to type definitions
    "javascript": (
        Rule(re.compile(r"@typedef\s+\{[^}]+\}\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")),
        Rule(re.compile(r"@param\s+\{[^}]+\}\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")),
    ),
    "typescript": (
        Rule(re.compile(r"interface\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")),
        Rule(re.compile(r"type\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=")),
        Rule(re.compile(r"enum\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")),
    ),
    "python": (
        _PY_CLASS,
        Rule(re.compile(r"from\s+typing\s+import\s+.*"), ()),
        Rule(re.compile(r"import\s+typing"), ()),
    ),
    "java": (
        Rule(re.compile(r"interface\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")),
        Rule(re.compile(r"enum\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")),
    ),
    "go": (
        Rule(re.compile(r"type\s+([a-zA-Z_][a-zA-Z0-9_]*)\s+(interface|struct)")),
    ),
}


PATTERNS: dict[tuple[str, str], tuple[Rule, ...]] = {}
for _kind, _table in (
    ("functions", _FUNCTIONS),
    ("classes", _CLASSES),
    ("imports", _IMPORTS),
    ("variables", _VARIABLES),
    ("types", _TYPES),
):
    for _language, _rules in _table.items():
        PATTERNS[(_kind, _language)] = _rules


def rules_for(kind: str, language: str) -> tuple[Rule, ...]:
    """Ordered rules for (kind, language); empty when the pair is unsupported."""
    return PATTERNS.get((kind, language), ())


def supported_languages(kind: str) -> list[str]:
    if kind == "comments":
        return sorted(COMMENT_SYNTAX)
    return sorted(lang for k, lang in PATTERNS if k == kind)
