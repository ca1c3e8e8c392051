# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Render type expressions and field lists into canonical Go text."""

import logging
from typing import Callable

from funcdoc.syntax import (
    ArrayType,
    BasicLit,
    Expr,
    FieldList,
    Ident,
    MapType,
    PointerType,
    QualifiedName,
    SliceType,
    UnsupportedExpr,
)

logger = logging.getLogger(__name__)

UnsupportedHandler = Callable[[UnsupportedExpr], None]


def render_expr(expr: Expr, on_unsupported: UnsupportedHandler | None = None) -> str:
    """Render a type expression.

    Args:
        expr: Expression node.
        on_unsupported: Called once for every unsupported variant met.

    Returns:
        Canonical text, or an empty string for an unsupported variant.

    Raises:
        TypeError: If ``expr`` is not an expression node.
    """
    if isinstance(expr, PointerType):
        return "*" + render_expr(expr.elem, on_unsupported)
    if isinstance(expr, Ident):
        return expr.name
    if isinstance(expr, BasicLit):
        return expr.value
    if isinstance(expr, ArrayType):
        length = render_expr(expr.length, on_unsupported)
        return f"[{length}]{render_expr(expr.elem, on_unsupported)}"
    if isinstance(expr, SliceType):
        return "[]" + render_expr(expr.elem, on_unsupported)
    if isinstance(expr, MapType):
        key = render_expr(expr.key, on_unsupported)
        return f"map[{key}]{render_expr(expr.value, on_unsupported)}"
    if isinstance(expr, QualifiedName):
        owner = render_expr(expr.owner, on_unsupported)
        return f"{owner}.{render_expr(expr.member, on_unsupported)}"
    if isinstance(expr, UnsupportedExpr):
        logger.warning(f"Unknown expression variant (kind={expr.kind} pos={expr.pos})")
        if on_unsupported is not None:
            on_unsupported(expr)
        return ""
    raise TypeError(f"Not an expression node: {type(expr).__name__}")


def render_fields(
    field_list: FieldList, on_unsupported: UnsupportedHandler | None = None
) -> str:
    """Render a receiver, parameter or result list.

    Each group renders as its comma-joined names, a space and its type; a
    group without names renders as the type alone.

    Args:
        field_list: Field list node.
        on_unsupported: Forwarded to :func:`render_expr`.

    Returns:
        Comma-joined groups; empty for an empty list.
    """
    parts: list[str] = []
    for field in field_list.fields:
        rendered_type = render_expr(field.type, on_unsupported)
        if field.names:
            names = ", ".join(name.name for name in field.names)
            parts.append(f"{names} {rendered_type}")
        else:
            parts.append(rendered_type)
    return ", ".join(parts)
