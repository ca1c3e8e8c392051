# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Describe one function declaration as a documentation block and record."""

import logging

from funcdoc.model import DescribeOptions, FunctionRecord
from funcdoc.render import UnsupportedHandler, render_fields
from funcdoc.syntax import CallExpr, FuncDecl, node_text, walk

logger = logging.getLogger(__name__)

CALLS_LABEL = "## Function calls from other packages"
CODE_FENCE_OPEN = "```go\n"
CODE_FENCE_CLOSE = "```\n"


def describe_function(
    fn: FuncDecl,
    source: bytes,
    package: str,
    is_test: bool,
    options: DescribeOptions | None = None,
    on_unsupported: UnsupportedHandler | None = None,
) -> tuple[str, FunctionRecord]:
    """Render the documentation block of a function declaration.

    Args:
        fn: Function declaration node.
        source: Exact bytes the declaration was parsed from.
        package: Package declared by the owning file.
        is_test: Whether the owning file is a test file.
        options: Optional body rendering settings.
        on_unsupported: Called for every unrenderable type expression.

    Returns:
        The rendered block and the matching function record.
    """
    options = options or DescribeOptions()
    name = fn.name.name
    parts: list[str] = []

    if fn.doc is not None:
        parts.extend(comment.text + "\n" for comment in fn.doc.comments)
    parts.append(f"## {name}\n\n")
    if fn.recv is not None:
        parts.append(f"## Receiver\n\n{render_fields(fn.recv, on_unsupported)}\n\n")
    if fn.params is not None:
        parts.append(f"##Parameters {render_fields(fn.params, on_unsupported)}\n")
    if fn.results is not None:
        parts.append(f"##Return {render_fields(fn.results, on_unsupported)}\n")
    parts.append(_render_calls(fn, source))
    if options.include_body:
        parts.append(_render_body(fn, source, options.repeat_body))
    parts.append(f"`###End of function with name {name}  ###`\n\n")

    documentation = "".join(parts)
    logger.debug(f"Described function (name={name} package={package})")
    return documentation, FunctionRecord(
        name=name,
        documentation=documentation,
        package=package,
        is_test_function=is_test,
    )


def _render_calls(fn: FuncDecl, source: bytes) -> str:
    lines = [f"{CALLS_LABEL}\n\n", CODE_FENCE_OPEN]
    for node in walk(fn):
        if isinstance(node, CallExpr):
            lines.append(f"  {node_text(source, node)}\n")
    lines.append(CODE_FENCE_CLOSE)
    return "".join(lines)


def _render_body(fn: FuncDecl, source: bytes, repeat_body: bool) -> str:
    body = node_text(source, fn)
    text = (
        f"####Function Body of function {fn.name.name}\n\n"
        f"{CODE_FENCE_OPEN}{body}{CODE_FENCE_CLOSE}"
    )
    if repeat_body:
        text += body + "\n"
    return text
