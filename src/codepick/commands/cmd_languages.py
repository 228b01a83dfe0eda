"""Show supported languages, their extensions and extraction kinds."""

from __future__ import annotations

import click

from codepick.extract import KINDS
from codepick.languages import (
    FALLBACK_LANGUAGE,
    LANGUAGES,
    get_supported_extensions,
    supported_languages,
)
from codepick.output.formatter import format_table, json_envelope, to_json


def language_matrix() -> list[dict]:
    rows = []
    for language in LANGUAGES:
        rows.append({
            "language": language,
            "extensions": get_supported_extensions(language),
            "kinds": [k for k in KINDS if language in supported_languages(k)],
        })
    return rows


@click.command("languages")
@click.pass_context
def languages(ctx):
    """List supported languages and what can be extracted from each."""
    json_mode = ctx.obj.get("json") if ctx.obj else False
    matrix = language_matrix()

    if json_mode:
        click.echo(to_json(json_envelope(
            "languages",
            summary={"verdict": f"{len(matrix)} languages", "fallback": FALLBACK_LANGUAGE},
            languages=matrix,
        )))
        return

    rows = [
        [m["language"], " ".join(m["extensions"]), ", ".join(m["kinds"])]
        for m in matrix
    ]
    click.echo(format_table(["Language", "Extensions", "Kinds"], rows))
    click.echo()
    click.echo(f"Files with other extensions use {FALLBACK_LANGUAGE} patterns "
               "unless --language is given.")
