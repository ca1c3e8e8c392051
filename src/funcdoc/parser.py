# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Go parser adapter building the typed syntax model from tree-sitter trees."""

import logging

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from funcdoc.errors import ParseFailure
from funcdoc.syntax import (
    ArrayType,
    BasicLit,
    CallExpr,
    Comment,
    CommentGroup,
    Expr,
    Field,
    FieldList,
    FuncBody,
    FuncDecl,
    GenDecl,
    Ident,
    MapType,
    PointerType,
    QualifiedName,
    SliceType,
    SourceFile,
    UnsupportedExpr,
)

logger = logging.getLogger(__name__)

_FUNCTION_DECLARATIONS: frozenset[str] = frozenset(
    {"function_declaration", "method_declaration"}
)
_GENERAL_DECLARATIONS: frozenset[str] = frozenset(
    {"import_declaration", "type_declaration", "var_declaration", "const_declaration"}
)
_PARAMETER_DECLARATIONS: frozenset[str] = frozenset(
    {"parameter_declaration", "variadic_parameter_declaration"}
)
# go/ast reports conversions to composite types as calls too.
_CALLS: frozenset[str] = frozenset({"call_expression", "type_conversion_expression"})
_IDENTIFIERS: frozenset[str] = frozenset(
    {"identifier", "type_identifier", "field_identifier", "package_identifier"}
)
_LITERALS: frozenset[str] = frozenset(
    {
        "int_literal",
        "float_literal",
        "imaginary_literal",
        "rune_literal",
        "interpreted_string_literal",
        "raw_string_literal",
    }
)


class GoParser:
    """Parse Go source bytes into :class:`funcdoc.syntax.SourceFile` trees."""

    def __init__(self, keep_empty_lists: bool = False) -> None:
        """Initialize the tree-sitter Go parser.

        Args:
            keep_empty_lists: Keep ``()`` parameter and result lists as
                present-but-empty lists instead of dropping them.
        """
        self._parser = Parser(Language(tree_sitter_go.language()))
        self._keep_empty_lists = keep_empty_lists

    def parse(self, source: bytes, file_name: str = "<source>") -> SourceFile:
        """Parse one Go file.

        Args:
            source: Raw file content. Node positions index into these bytes.
            file_name: Name used in failure messages.

        Returns:
            The typed syntax tree.

        Raises:
            ParseFailure: If the source is not a complete, valid Go file.
        """
        root = self._parser.parse(source).root_node
        if root.has_error:
            row, column = _first_error_point(root)
            raise ParseFailure(f"{file_name}:{row + 1}:{column + 1}: syntax error")

        package: Ident | None = None
        decls: list[FuncDecl | GenDecl] = []
        for child in root.named_children:
            if child.type == "comment":
                continue
            if child.type == "package_clause" and package is None:
                package = self._ident(_first_named_child(child), source)
                continue
            if package is None:
                raise ParseFailure(f"{file_name}: expected 'package', found {child.type}")
            if child.type in _FUNCTION_DECLARATIONS:
                decls.append(self._func_decl(child, source))
            elif child.type in _GENERAL_DECLARATIONS:
                decls.append(GenDecl(child.type, *_span(child)))
            else:
                raise ParseFailure(
                    f"{file_name}:{child.start_point[0] + 1}: "
                    f"non-declaration statement outside function body ({child.type})"
                )
        if package is None:
            raise ParseFailure(f"{file_name}: expected 'package'")

        logger.debug(
            f"Parsed Go file (file_name={file_name} package={package.name} decls={len(decls)})"
        )
        return SourceFile(package, tuple(decls), *_span(root))

    def _func_decl(self, node: Node, source: bytes) -> FuncDecl:
        recv_node = node.child_by_field_name("receiver")
        params_node = node.child_by_field_name("parameters")
        result_node = node.child_by_field_name("result")
        body_node = node.child_by_field_name("body")
        return FuncDecl(
            name=self._ident(node.child_by_field_name("name"), source),
            doc=self._doc_comment(node, source),
            recv=self._field_list(recv_node, source) if recv_node is not None else None,
            params=self._optional_field_list(params_node, source),
            results=self._results(result_node, source),
            body=(
                FuncBody(self._calls(body_node), *_span(body_node))
                if body_node is not None
                else None
            ),
            pos=node.start_byte + 1,
            end=node.end_byte + 1,
        )

    def _doc_comment(self, node: Node, source: bytes) -> CommentGroup | None:
        """Collect the comment group ending on the line above a declaration."""
        comments: list[Node] = []
        candidate = node.prev_named_sibling
        expected_end_row = node.start_point[0] - 1
        while candidate is not None and candidate.type == "comment":
            end_row = candidate.end_point[0]
            if end_row < expected_end_row:
                break
            if not comments and end_row != expected_end_row:
                break
            if _is_trailing_comment(candidate):
                break
            comments.append(candidate)
            expected_end_row = candidate.start_point[0] - 1
            candidate = candidate.prev_named_sibling
        if not comments:
            return None
        comments.reverse()
        return CommentGroup(
            tuple(
                Comment(_text(comment, source).rstrip("\r"), *_span(comment))
                for comment in comments
            ),
            pos=comments[0].start_byte + 1,
            end=comments[-1].end_byte + 1,
        )

    def _optional_field_list(self, node: Node | None, source: bytes) -> FieldList | None:
        if node is None:
            return None
        field_list = self._field_list(node, source)
        if field_list.fields or self._keep_empty_lists:
            return field_list
        return None

    def _results(self, node: Node | None, source: bytes) -> FieldList | None:
        if node is None:
            return None
        if node.type == "parameter_list":
            return self._optional_field_list(node, source)
        return FieldList((Field((), self._expr(node, source), *_span(node)),), *_span(node))

    def _field_list(self, node: Node, source: bytes) -> FieldList:
        fields = tuple(
            self._field(child, source)
            for child in node.named_children
            if child.type in _PARAMETER_DECLARATIONS
        )
        return FieldList(fields, *_span(node))

    def _field(self, node: Node, source: bytes) -> Field:
        names = tuple(
            self._ident(name, source) for name in node.children_by_field_name("name")
        )
        field_type: Expr
        if node.type == "variadic_parameter_declaration":
            ellipsis = next((c for c in node.children if c.type == "..."), node)
            field_type = UnsupportedExpr(
                "ellipsis", ellipsis.start_byte + 1, node.end_byte + 1
            )
        else:
            field_type = self._expr(node.child_by_field_name("type"), source)
        return Field(names, field_type, *_span(node))

    def _expr(self, node: Node | None, source: bytes) -> Expr:
        if node is None:
            return UnsupportedExpr("missing")
        kind = node.type
        if kind in _IDENTIFIERS:
            return self._ident(node, source)
        if kind in _LITERALS:
            return BasicLit(_text(node, source), *_span(node))
        if kind == "pointer_type":
            return PointerType(self._expr(_first_named_child(node), source), *_span(node))
        if kind == "array_type":
            return ArrayType(
                self._expr(node.child_by_field_name("length"), source),
                self._expr(node.child_by_field_name("element"), source),
                *_span(node),
            )
        if kind == "slice_type":
            return SliceType(
                self._expr(node.child_by_field_name("element"), source), *_span(node)
            )
        if kind == "map_type":
            return MapType(
                self._expr(node.child_by_field_name("key"), source),
                self._expr(node.child_by_field_name("value"), source),
                *_span(node),
            )
        if kind == "qualified_type":
            return QualifiedName(
                self._ident(node.child_by_field_name("package"), source),
                self._ident(node.child_by_field_name("name"), source),
                *_span(node),
            )
        if kind == "selector_expression":
            return QualifiedName(
                self._expr(node.child_by_field_name("operand"), source),
                self._ident(node.child_by_field_name("field"), source),
                *_span(node),
            )
        return UnsupportedExpr(kind, *_span(node), calls=self._calls_in(node))

    def _ident(self, node: Node, source: bytes) -> Ident:
        return Ident(_text(node, source), *_span(node))

    def _calls_in(self, node: Node) -> tuple[CallExpr, ...]:
        """Collect call expressions at or below ``node``."""
        if node.type in _CALLS:
            return (CallExpr(self._calls(node), *_span(node)),)
        return self._calls(node)

    def _calls(self, node: Node) -> tuple[CallExpr, ...]:
        """Collect call expressions below ``node``, nesting inner calls."""
        calls: list[CallExpr] = []
        for child in node.children:
            calls.extend(self._calls_in(child))
        return tuple(calls)


def _span(node: Node) -> tuple[int, int]:
    return node.start_byte + 1, node.end_byte + 1


def _text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8")


def _first_named_child(node: Node) -> Node:
    for child in node.named_children:
        if child.type != "comment":
            return child
    raise ParseFailure(f"Empty {node.type} node at byte {node.start_byte}")


def _is_trailing_comment(comment: Node) -> bool:
    """Check whether a comment follows code on the same line."""
    previous = comment.prev_named_sibling
    return (
        previous is not None
        and previous.type != "comment"
        and previous.end_point[0] == comment.start_point[0]
    )


def _first_error_point(root: Node) -> tuple[int, int]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0], node.start_point[1]
        stack.extend(reversed(node.children))
    return root.start_point[0], root.start_point[1]
