"""Line-by-line extraction of functions, classes, imports, variables and types."""

from __future__ import annotations

from codepick.extract.elements import (
    CLASS,
    FUNCTION,
    IMPORT,
    TYPE,
    VARIABLE,
    ExtractedElement,
)
from codepick.languages.patterns import VARIABLE_SKIP_PREFIXES, Rule, rules_for


def scan_lines(text: str, rules: tuple[Rule, ...], element_type: str,
               skip_prefixes: tuple[str, ...] = ()) -> list[ExtractedElement]:
    """Test each line against *rules* in order; the first matching rule wins.

    The element is named from the rule's capture group, or after the whole
    trimmed line when the rule has no usable group.
    """
    if not rules:
        return []

    elements: list[ExtractedElement] = []
    for line_no, line in enumerate(text.split("\n"), 1):
        stripped = line.strip()
        if skip_prefixes and stripped.startswith(skip_prefixes):
            continue

        for rule in rules:
            match = rule.regex.search(line)
            if match is None:
                continue
            name = rule.name_for(match)
            if name in rule.skip_names:
                continue
            elements.append(ExtractedElement(
                type=element_type,
                name=name or stripped,
                line=line_no,
                content=stripped,
            ))
            break

    return elements


def extract_functions(text: str, language: str) -> list[ExtractedElement]:
    return scan_lines(text, rules_for("functions", language), FUNCTION)


def extract_classes(text: str, language: str) -> list[ExtractedElement]:
    return scan_lines(text, rules_for("classes", language), CLASS)


def extract_imports(text: str, language: str) -> list[ExtractedElement]:
    return scan_lines(text, rules_for("imports", language), IMPORT)


def extract_variables(text: str, language: str) -> list[ExtractedElement]:
    """Variable declarations, skipping import/function/class/export lines."""
    return scan_lines(
        text, rules_for("variables", language), VARIABLE,
        skip_prefixes=VARIABLE_SKIP_PREFIXES,
    )


def extract_types(text: str, language: str) -> list[ExtractedElement]:
    return scan_lines(text, rules_for("types", language), TYPE)
