"""MCP (Model Context Protocol) server for codepick.

Exposes code element extraction as a structured MCP tool so that AI coding
agents can pull functions, classes, comments and so on out of files without
reading them whole.

Usage:
    codepick mcp                    # stdio (for Claude Code, Cursor, etc.)
    codepick mcp --transport sse    # SSE on localhost:8000
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import click

try:
    from fastmcp import FastMCP
except ImportError:
    FastMCP = None


# ---------------------------------------------------------------------------
# Server instance
# ---------------------------------------------------------------------------

if FastMCP is not None:
    mcp = FastMCP(
        "codepick",
        instructions=(
            "Extracts specific elements (comments, functions, classes, imports, "
            "variables, types) from source code files without reading entire "
            "files or writing regex patterns. Matching is heuristic: expect "
            "occasional false positives such as control-flow blocks reported "
            "as functions."
        ),
    )
else:
    mcp = None


_REGISTERED_TOOLS: list[str] = []


def _tool_title(name: str) -> str:
    """Convert codepick tool name to a human title."""
    short = name.removeprefix("codepick_").replace("_", " ")
    return short.title()


def _tool_annotations(name: str) -> dict:
    return {
        "title": _tool_title(name),
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": False,
    }


def _tool(name: str, description: str = ""):
    """Register an MCP tool, falling back for FastMCP versions without annotations."""
    def decorator(fn):
        if mcp is None:
            return fn
        _REGISTERED_TOOLS.append(name)
        kwargs: dict = {"name": name, "title": _tool_title(name)}
        if description:
            kwargs["description"] = description
        kwargs["annotations"] = _tool_annotations(name)

        legacy = dict(kwargs)
        for key in ("annotations", "title"):
            legacy.pop(key, None)

        last_error: Exception | None = None
        for attempt in (kwargs, legacy):
            try:
                return mcp.tool(**attempt)(fn)
            except TypeError as exc:
                last_error = exc
        raise last_error
    return decorator


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

_ERROR_HINTS: dict[str, str] = {
    "invalid-params": "check the tool parameters against the schema.",
    "no-files-specified": "pass `file` or `files`.",
    "path-not-in-workspace": "use paths inside the workspace root.",
    "file-read-error": "check the file exists, is text, and is readable.",
    "aborted": "retry the request.",
    "unknown": "check the error message for details.",
}


def _structured_error(error_dict: dict) -> dict:
    """Wrap error dict with MCP-compliant structured error fields."""
    error_dict["isError"] = True
    error_dict.setdefault("hint", _ERROR_HINTS["unknown"])
    error_dict["suggested_action"] = error_dict["hint"]
    return error_dict


def _error_code(kind: str) -> str:
    return kind.upper().replace("-", "_")


def _extract_payload(params: dict, root: str = ".") -> dict:
    """Validate *params*, run the extraction and build the tool response."""
    from codepick.extract.runner import ExtractRequest, run_extraction, validate_params
    from codepick.exit_codes import ErrorKind

    problem = validate_params(params)
    if problem:
        return _structured_error({
            "command": "extract",
            "error": problem,
            "error_code": _error_code(ErrorKind.INVALID_PARAMS),
            "hint": _ERROR_HINTS[ErrorKind.INVALID_PARAMS],
        })

    request = ExtractRequest.from_params(params)
    result = run_extraction(request, Path(root))
    payload = {
        "command": "extract",
        "summary": {
            "verdict": result.return_display,
            "files": len(result.results),
            "elements": result.total_elements,
        },
    }
    payload.update(result.to_dict())
    if result.error is None:
        return payload

    kind = result.error["type"]
    payload.update({
        "error": result.error["message"],
        "error_code": _error_code(kind),
        "hint": _ERROR_HINTS.get(kind, _ERROR_HINTS["unknown"]),
    })
    if "reason" in result.error:
        payload["reason"] = result.error["reason"]
    return _structured_error(payload)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@_tool(name="codepick_extract",
       description=("Extract comments, functions, classes, imports, variables or "
                    "types from one or more source files. Formats: list, tree, "
                    "json, summary. Language is detected from the extension "
                    "(javascript when unknown) unless given."))
async def extract(type: str, file: str = "", files: list[str] | None = None,
                  format: str = "list", language: str = "",
                  includeDocstrings: bool = False, includeSignatures: bool = False,
                  root: str = ".") -> dict:
    """Extract code elements.

    type:
        comments | functions | classes | imports | variables | types
    file / files:
        Path(s) relative to *root*; ``files`` wins when both are given.
    format:
        list (default) | tree | json | summary
    language:
        javascript | typescript | python | java | go; detected when empty.
    includeDocstrings / includeSignatures:
        Reserved, currently ignored.
    """
    params = {
        "type": type,
        "file": file,
        "files": files,
        "format": format or None,
        "language": language or None,
        "includeDocstrings": includeDocstrings,
        "includeSignatures": includeSignatures,
    }
    return await asyncio.to_thread(_extract_payload, params, root)


# ---------------------------------------------------------------------------
# CLI command
# ---------------------------------------------------------------------------


@click.command()
@click.option('--transport', type=click.Choice(['stdio', 'sse', 'streamable-http']), default='stdio',
              help='transport protocol (default: stdio)')
@click.option('--host', default='127.0.0.1', help='host for network transports')
@click.option('--port', type=int, default=8000, help='port for network transports')
@click.option('--list-tools', is_flag=True, help='list registered tools and exit')
@click.option('--list-tools-json', is_flag=True,
              help='list registered tools with metadata as JSON and exit')
def mcp_cmd(transport, host, port, list_tools, list_tools_json):
    """Start the codepick MCP server.

    \b
    usage:
      codepick mcp                    # stdio (for Claude Code, Cursor, etc.)
      codepick mcp --transport sse    # SSE on localhost:8000
      codepick mcp --list-tools       # show registered tools

    \b
    requires:
      pip install codepick[mcp]
    """
    if mcp is None:
        click.echo(
            "error: fastmcp is required for the MCP server.\n"
            "install it with:  pip install codepick[mcp]",
            err=True,
        )
        raise SystemExit(1)

    if list_tools_json:
        async def _collect_tools():
            return await mcp.list_tools()

        tools = asyncio.run(_collect_tools())
        payload_tools = []
        for tool in sorted(tools, key=lambda t: t.name):
            ann = tool.annotations.model_dump(exclude_none=True) if tool.annotations else {}
            payload_tools.append({
                "name": tool.name,
                "title": tool.title,
                "description": tool.description,
                "annotations": ann,
            })
        payload = {
            "server": "codepick",
            "tool_count": len(payload_tools),
            "tools": payload_tools,
        }
        click.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    if list_tools:
        click.echo(f"{len(_REGISTERED_TOOLS)} tools registered:\n")
        for t in sorted(_REGISTERED_TOOLS):
            click.echo(f"  {t}")
        return

    if transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=transport, host=host, port=port)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    if mcp is None:
        raise SystemExit(
            "fastmcp is required for the MCP server.\n"
            "Install it with:  pip install codepick[mcp]"
        )
    mcp.run()
