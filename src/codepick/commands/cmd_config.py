"""Manage per-project codepick configuration (.codepick/config.json)."""

from __future__ import annotations

import os
from dataclasses import asdict

import click

from codepick.config import (
    ENV_FORMAT,
    ENV_LANGUAGE,
    ENV_MAX_FILE_BYTES,
    _load_project_config,
    get_config_path,
    load_settings,
    write_project_config,
)
from codepick.languages import LANGUAGES
from codepick.output.formatter import FORMATS, json_envelope, to_json
from codepick.workspace import find_project_root


@click.command("config")
@click.option("--set-format", "fmt", type=click.Choice(FORMATS), default=None,
              help="Default output format for `codepick extract`.")
@click.option("--set-language", "language", type=click.Choice(LANGUAGES), default=None,
              help="Language used when a file's extension is not recognised.")
@click.option("--set-max-file-bytes", "max_file_bytes", type=click.IntRange(min=1),
              default=None, help="Refuse to read files larger than this.")
@click.option("--show", is_flag=True, help="Print current configuration.")
@click.pass_context
def config(ctx, fmt, language, max_file_bytes, show):
    """Manage per-project codepick configuration (.codepick/config.json).

    Settings saved here apply to every `codepick extract` run inside the
    project. Environment variables take precedence over the file:

    \b
      CODEPICK_FORMAT          default output format
      CODEPICK_LANGUAGE        fallback language
      CODEPICK_MAX_FILE_BYTES  read size limit
    """
    json_mode = ctx.obj.get("json") if ctx.obj else False
    root = find_project_root()

    updates = {}
    if fmt is not None:
        updates["default_format"] = fmt
    if language is not None:
        updates["default_language"] = language
    if max_file_bytes is not None:
        updates["max_file_bytes"] = max_file_bytes

    if updates:
        config_path = write_project_config(updates, root)
        if json_mode:
            click.echo(to_json(json_envelope("config",
                summary={"verdict": "saved", **updates},
                config_path=str(config_path),
            )))
            return
        for key, value in updates.items():
            click.echo(f"Saved {key} = {value!r}")
        click.echo(f"Config written to {config_path}")
        if not show:
            return

    current = _load_project_config(root)
    effective = asdict(load_settings(root))
    if json_mode:
        click.echo(to_json(json_envelope("config",
            summary={"verdict": "ok"},
            config=current,
            effective=effective,
        )))
        return

    if not current:
        click.echo("No .codepick/config.json found (using defaults).")
    else:
        click.echo(f"Config: {get_config_path(root)}")
        for k, v in current.items():
            click.echo(f"  {k} = {v!r}")
    click.echo("Effective settings:")
    for k, v in effective.items():
        click.echo(f"  {k} = {v!r}")
    overridden = [name for name in (ENV_FORMAT, ENV_LANGUAGE, ENV_MAX_FILE_BYTES)
                  if name in os.environ]
    if overridden:
        click.echo(f"Overridden by environment: {', '.join(overridden)}")
