"""Click CLI entry point with lazy-loaded subcommands."""

from __future__ import annotations

import logging
import os
import sys

# Fix Unicode output on Windows consoles (cp1253, cp1252, etc.)
if sys.platform == "win32" and not os.environ.get("PYTHONIOENCODING"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

import click


# Lazy-loading command group: imports command modules only when invoked.
# Keeps `codepick mcp` from loading fastmcp for every other command.
_COMMANDS = {
    "extract":   ("codepick.commands.cmd_extract",   "extract_cmd"),
    "languages": ("codepick.commands.cmd_languages", "languages"),
    "config":    ("codepick.commands.cmd_config",    "config"),
    "mcp":       ("codepick.mcp_server",             "mcp_cmd"),
}

# Command categories for organized --help display
_CATEGORIES = {
    "Extraction": ["extract", "languages"],
    "Setup": ["config", "mcp"],
}


class LazyGroup(click.Group):
    """A Click group that lazy-loads command modules on first access."""

    def list_commands(self, ctx):
        return sorted(_COMMANDS.keys())

    def get_command(self, ctx, cmd_name):
        if cmd_name not in _COMMANDS:
            return None
        module_path, attr_name = _COMMANDS[cmd_name]
        import importlib
        mod = importlib.import_module(module_path)
        return getattr(mod, attr_name)

    def invoke(self, ctx):
        """Map unexpected exceptions to EXIT_ERROR instead of a traceback.

        CodepickError subclasses carry their own exit_code and are handled by
        Click's ClickException machinery.
        """
        try:
            return super().invoke(ctx)
        except click.exceptions.Exit:
            raise
        except (click.Abort, click.ClickException, SystemExit):
            raise
        except Exception as exc:
            from codepick.exit_codes import EXIT_ERROR
            logging.getLogger(__name__).debug("Unhandled error", exc_info=True)
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(EXIT_ERROR)

    def format_help(self, ctx, formatter):
        """Categorized help display instead of flat alphabetical list."""
        self.format_usage(ctx, formatter)
        formatter.write("\n")
        if self.help:
            formatter.write(self.help + "\n\n")

        for cat_name, cmds in _CATEGORIES.items():
            valid_cmds = [c for c in cmds if c in _COMMANDS]
            if not valid_cmds:
                continue
            formatter.write(f"  {cat_name}:\n")
            for cmd_name in valid_cmds:
                cmd = self.get_command(ctx, cmd_name)
                help_text = cmd.get_short_help_str(limit=60) if cmd else ""
                formatter.write(f"    {cmd_name:12s} {help_text}\n")
            formatter.write("\n")

        formatter.write("  Run `codepick <command> --help` for details on any command.\n")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group(cls=LazyGroup)
@click.version_option(package_name="codepick")
@click.option('--json', 'json_mode', is_flag=True, help='Output in JSON format')
@click.option('-v', '--verbose', is_flag=True, help='Log debug details to stderr')
@click.pass_context
def cli(ctx, json_mode, verbose):
    """codepick: pull comments, functions, classes, imports, variables
    and types out of source files."""
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['json'] = json_mode
    ctx.obj['verbose'] = verbose
