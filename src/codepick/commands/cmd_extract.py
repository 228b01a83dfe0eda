"""Extract code elements from one or more source files."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from codepick.config import load_settings
from codepick.exit_codes import CodepickError, exit_code_for
from codepick.extract import KINDS
from codepick.extract.runner import ExtractRequest, describe_request, run_extraction
from codepick.languages import LANGUAGES
from codepick.output.formatter import FORMATS, json_envelope, to_json
from codepick.workspace import find_project_root

log = logging.getLogger(__name__)


@click.command("extract")
@click.argument("kind", type=click.Choice(KINDS))
@click.argument("files", nargs=-1)
@click.option("--file", "single_file", default=None,
              help="A single file to extract from (ignored when FILES are given)")
@click.option("-f", "--format", "fmt", type=click.Choice(FORMATS), default=None,
              help="Output format (default: list, or the project config)")
@click.option("-l", "--language", type=click.Choice(LANGUAGES), default=None,
              help="Source language (detected from the extension if omitted)")
@click.option("--include-docstrings", is_flag=True, help="Reserved; currently has no effect")
@click.option("--include-signatures", is_flag=True, help="Reserved; currently has no effect")
@click.option("--root", type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=None, help="Workspace root (default: enclosing git repository)")
@click.pass_context
def extract_cmd(ctx, kind, files, single_file, fmt, language,
                include_docstrings, include_signatures, root):
    """Extract KIND elements from FILES.

    \b
    KIND is one of: comments, functions, classes, imports, variables, types.
    Files must lie inside the workspace root.

    \b
    examples:
      codepick extract functions src/app.js
      codepick extract classes a.py b.py --format tree
      codepick extract comments notes.txt --language python
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False
    root = root.resolve() if root else find_project_root()

    request = ExtractRequest(
        kind=kind,
        files=list(files) or ([single_file] if single_file else []),
        language=language,
        format=fmt,
        include_docstrings=include_docstrings,
        include_signatures=include_signatures,
    )
    log.info(describe_request(request, root))

    result = run_extraction(request, root, settings=load_settings(root))

    if json_mode:
        click.echo(to_json(json_envelope(
            "extract",
            summary={
                "verdict": result.return_display,
                "files": len(result.results),
                "elements": result.total_elements,
            },
            results=[r.to_dict() for r in result.results],
            **({"error": result.error} if result.error else {}),
        )))
        if result.error:
            ctx.exit(exit_code_for(result.error["type"]))
        return

    if result.error:
        raise CodepickError(result.error["message"],
                            exit_code=exit_code_for(result.error["type"]))

    click.echo(result.llm_content)
