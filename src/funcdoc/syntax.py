# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Typed Go syntax model consumed by the declaration extractor.

Every node carries ``pos`` and ``end``: 1-based byte offsets into the exact
source bytes that were parsed, with ``end`` pointing one past the node's last
byte. The text of a node is therefore ``source[pos - 1 : end - 1]``.
"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Ident:
    """Identifier, including type and package names."""

    name: str
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class BasicLit:
    """Literal value, e.g. the length of a fixed-size array."""

    value: str
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class PointerType:
    """Pointer type ``*T``."""

    elem: "Expr"
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class ArrayType:
    """Fixed-size array type ``[N]T``."""

    length: "Expr"
    elem: "Expr"
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class SliceType:
    """Slice type ``[]T``."""

    elem: "Expr"
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class MapType:
    """Map type ``map[K]V``."""

    key: "Expr"
    value: "Expr"
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class QualifiedName:
    """Qualified name ``owner.member``, e.g. ``http.Request``."""

    owner: "Expr"
    member: Ident
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class UnsupportedExpr:
    """Expression variant outside the renderable set.

    Attributes:
        kind: Grammar node type the expression was parsed from.
        calls: Call expressions written inside the expression, e.g. in an
            array length.
    """

    kind: str
    pos: int = 0
    end: int = 0
    calls: tuple["CallExpr", ...] = ()


Expr = (
    Ident
    | BasicLit
    | PointerType
    | ArrayType
    | SliceType
    | MapType
    | QualifiedName
    | UnsupportedExpr
)


@dataclass(frozen=True)
class Field:
    """One comma-group of a field list: names sharing one type."""

    names: tuple[Ident, ...]
    type: Expr
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class FieldList:
    """Receiver, parameter or result list."""

    fields: tuple[Field, ...]
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class Comment:
    """Single comment token, text kept verbatim including its markers."""

    text: str
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class CommentGroup:
    """Adjacent comments forming one documentation block."""

    comments: tuple[Comment, ...]
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class CallExpr:
    """Call expression and the calls nested inside it."""

    calls: tuple["CallExpr", ...]
    pos: int
    end: int


@dataclass(frozen=True)
class FuncBody:
    """Function body, reduced to the top-most calls it contains."""

    calls: tuple[CallExpr, ...]
    pos: int
    end: int


@dataclass(frozen=True)
class FuncDecl:
    """Function or method declaration."""

    name: Ident
    doc: CommentGroup | None
    recv: FieldList | None
    params: FieldList | None
    results: FieldList | None
    body: FuncBody | None
    pos: int
    end: int


@dataclass(frozen=True)
class GenDecl:
    """Import, type, var or const declaration."""

    kind: str
    pos: int
    end: int


Decl = FuncDecl | GenDecl


@dataclass(frozen=True)
class SourceFile:
    """Parsed Go source file."""

    package: Ident
    decls: tuple[Decl, ...]
    pos: int
    end: int


Node = (
    Expr
    | Field
    | FieldList
    | Comment
    | CommentGroup
    | CallExpr
    | FuncBody
    | FuncDecl
    | GenDecl
    | SourceFile
)


def _children(node: Node) -> tuple[Node | None, ...]:
    if isinstance(node, SourceFile):
        return (node.package, *node.decls)
    if isinstance(node, FuncDecl):
        return (node.doc, node.recv, node.name, node.params, node.results, node.body)
    if isinstance(node, (FuncBody, CallExpr, UnsupportedExpr)):
        return node.calls
    if isinstance(node, CommentGroup):
        return node.comments
    if isinstance(node, FieldList):
        return node.fields
    if isinstance(node, Field):
        return (*node.names, node.type)
    if isinstance(node, (PointerType, SliceType)):
        return (node.elem,)
    if isinstance(node, ArrayType):
        return (node.length, node.elem)
    if isinstance(node, MapType):
        return (node.key, node.value)
    if isinstance(node, QualifiedName):
        return (node.owner, node.member)
    return ()


def walk(node: Node) -> Iterator[Node]:
    """Traverse a syntax tree in pre-order.

    Children are visited in declaration order: doc comment, receiver, name,
    parameters, results, body.

    Args:
        node: Root of the traversal.

    Yields:
        The node itself followed by every descendant.
    """
    yield node
    for child in _children(node):
        if child is not None:
            yield from walk(child)


def node_text(source: bytes, node: Node) -> str:
    """Return the exact source text covered by a node.

    Args:
        source: The same bytes the tree was parsed from.
        node: Node with 1-based ``pos``/``end`` byte offsets.

    Returns:
        Decoded source slice.
    """
    return source[node.pos - 1 : node.end - 1].decode("utf-8")
