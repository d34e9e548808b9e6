"""C# front-end: turns C# source into structural declarations.

Uses the tree-sitter C# grammar from ``tree-sitter-language-pack``. Only
syntax is inspected; base types are recorded by name as written and never
resolved.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from ..core.exceptions import InitializationError, ParsingError
from ..core.file_discovery import FileDiscovery
from ..core.models import (
    Assignment,
    BaseTypeRef,
    BinaryOperation,
    CalleeKind,
    ClassDeclaration,
    DeclarationSet,
    Invocation,
    InterfaceDeclaration,
    Member,
    MethodDeclaration,
    ParameterDeclaration,
    PropertyDeclaration,
    VariableDeclaration,
)

# Declarations whose metrics are computed
CLASS_NODE_TYPES = {"class_declaration"}
INTERFACE_NODE_TYPES = {"interface_declaration"}

# Type declarations whose members belong to an enclosing class subtree
NESTED_TYPE_NODE_TYPES = {
    "class_declaration",
    "struct_declaration",
    "record_declaration",
    "record_struct_declaration",
    "interface_declaration",
}

PARAMETER_NODE_TYPES = {"parameter", "implicit_parameter"}

CALLEE_KINDS = {
    "identifier": CalleeKind.IDENTIFIER,
    "member_access_expression": CalleeKind.MEMBER_ACCESS,
}


def _text(node) -> str:
    return node.text.decode("utf-8", errors="replace")


def _iter_subtree(node):
    """Pre-order walk of ``node``'s descendants (``node`` itself excluded)."""
    stack = list(reversed(node.children))
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))


class CSharpDeclarationReader:
    """Reads C# sources into a ``DeclarationSet``."""

    def __init__(self) -> None:
        """Initialize C# reader.

        Raises:
            InitializationError: If the tree-sitter C# grammar is unavailable
        """
        self.language = "csharp"
        self._parser = None
        self._initialize_parser()

    def _initialize_parser(self) -> None:
        """Initialize Tree-sitter parser for C#."""
        try:
            from tree_sitter_language_pack import get_parser

            self._parser = get_parser("csharp")
            logger.debug(
                "C# Tree-sitter parser initialized via tree-sitter-language-pack"
            )
        except Exception as e:
            raise InitializationError(
                f"Could not load the tree-sitter C# grammar: {e}"
            ) from e

    def get_supported_extensions(self) -> list[str]:
        """Get supported file extensions."""
        return [".cs"]

    # -- Entry points ---------------------------------------------------------

    def parse_source(self, content: str, file_path: Path | None = None) -> DeclarationSet:
        """Parse C# source text into class and interface declarations.

        Classes and interfaces are returned in document pre-order, so an outer
        class precedes the classes nested inside it.
        """
        label = str(file_path) if file_path else "<source>"
        if not content.strip():
            return DeclarationSet(source_files=(label,))

        tree = self._parser.parse(content.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            logger.warning(f"Syntax errors in {label}; metrics use the recovered tree")

        built: dict[tuple[int, int], ClassDeclaration | InterfaceDeclaration] = {}
        classes: list[ClassDeclaration] = []
        interfaces: list[InterfaceDeclaration] = []

        for node in _iter_subtree(root):
            if node.type in CLASS_NODE_TYPES:
                classes.append(self._build_type(node, built))
            elif node.type in INTERFACE_NODE_TYPES:
                interfaces.append(self._build_type(node, built))

        logger.debug(
            f"{label}: {len(classes)} classes, {len(interfaces)} interfaces"
        )
        return DeclarationSet(
            classes=tuple(classes),
            interfaces=tuple(interfaces),
            source_files=(label,),
        )

    def read_file(self, file_path: Path) -> DeclarationSet:
        """Read and parse a single C# file.

        Raises:
            ParsingError: If the file cannot be read
        """
        try:
            with open(file_path, encoding="utf-8-sig", errors="replace") as f:
                content = f.read()
        except OSError as e:
            raise ParsingError(
                f"Failed to read file {file_path}: {e}",
                context={"path": str(file_path)},
            ) from e
        return self.parse_source(content, file_path)

    def read_directory(
        self, root: Path, discovery: FileDiscovery | None = None
    ) -> DeclarationSet:
        """Read every C# file below ``root`` into one declaration set.

        Unreadable files are logged and skipped.
        """
        discovery = discovery or FileDiscovery(
            root, file_extensions=set(self.get_supported_extensions())
        )
        classes: list[ClassDeclaration] = []
        interfaces: list[InterfaceDeclaration] = []
        source_files: list[str] = []
        for path in discovery.find_files():
            try:
                declarations = self.read_file(path)
            except ParsingError as e:
                logger.error(str(e))
                continue
            classes.extend(declarations.classes)
            interfaces.extend(declarations.interfaces)
            source_files.extend(declarations.source_files)
        return DeclarationSet(
            classes=tuple(classes),
            interfaces=tuple(interfaces),
            source_files=tuple(source_files),
        )

    # -- Type declarations ----------------------------------------------------

    def _build_type(
        self, node, built: dict[tuple[int, int], ClassDeclaration | InterfaceDeclaration]
    ) -> ClassDeclaration | InterfaceDeclaration:
        """Build (or fetch the already built) declaration for a type node.

        Nested declarations are shared between the enclosing declaration's
        members and the top-level lists, so each node maps to one object.
        """
        key = (node.start_byte, node.end_byte)
        if key in built:
            return built[key]

        name = self._get_node_name(node)
        members = tuple(self._build_members(node, built))

        declaration: ClassDeclaration | InterfaceDeclaration
        if node.type in INTERFACE_NODE_TYPES:
            declaration = InterfaceDeclaration(name=name, members=members)
        else:
            declaration = ClassDeclaration(
                name=name, members=members, base_types=self._extract_base_types(node)
            )
        built[key] = declaration
        return declaration

    def _build_members(self, node, built) -> list[Member]:
        body = node.child_by_field_name("body")
        if body is None:
            body = next((c for c in node.children if c.type == "declaration_list"), None)
        if body is None:
            return []

        members: list[Member] = []
        for child in body.named_children:
            if child.type == "method_declaration":
                members.append(self._build_method(child))
            elif child.type == "property_declaration":
                members.append(self._build_property(child))
            elif child.type in NESTED_TYPE_NODE_TYPES:
                members.append(self._build_type(child, built))
        return members

    def _get_node_name(self, node) -> str:
        """Extract name from AST node."""
        name_node = node.child_by_field_name("name")
        if name_node is not None:
            return _text(name_node)
        for child in node.children:
            if child.type == "identifier":
                return _text(child)
        return "unknown"

    def _extract_base_types(self, node) -> tuple[BaseTypeRef, ...] | None:
        """Return base-type references in written order, or None without a base list."""
        base_list = next((c for c in node.children if c.type == "base_list"), None)
        if base_list is None:
            return None

        refs: list[BaseTypeRef] = []
        for child in base_list.named_children:
            if child.type == "argument_list":
                continue  # primary-constructor arguments: Base(x)
            if child.type == "primary_constructor_base_type":
                type_node = child.child_by_field_name("type")
                if type_node is None:
                    type_node = child.named_children[0]
            else:
                type_node = child
            refs.append(
                BaseTypeRef(name=_text(type_node), is_simple=type_node.type == "identifier")
            )
        return tuple(refs)

    def _extract_modifiers(self, node) -> frozenset[str]:
        return frozenset(_text(c) for c in node.children if c.type == "modifier")

    def _extract_type_name(self, node) -> str | None:
        type_node = node.child_by_field_name("type")
        return _text(type_node) if type_node is not None else None

    # -- Members --------------------------------------------------------------

    def _build_property(self, node) -> PropertyDeclaration:
        return PropertyDeclaration(
            name=self._get_node_name(node),
            type_name=self._extract_type_name(node),
            modifiers=self._extract_modifiers(node),
        )

    def _build_method(self, node) -> MethodDeclaration:
        """Collect the syntactic shapes of a method's whole subtree."""
        parameters: list[ParameterDeclaration] = []
        variables: list[VariableDeclaration] = []
        invocations: list[Invocation] = []
        assignments: list[Assignment] = []
        binary_operations: list[BinaryOperation] = []

        for child in _iter_subtree(node):
            node_type = child.type
            if node_type in PARAMETER_NODE_TYPES:
                parameters.append(self._parse_parameter(child))
            elif node_type == "variable_declaration":
                variables.append(self._parse_variable_declaration(child))
            elif node_type == "invocation_expression":
                invocations.append(self._parse_invocation(child))
            elif node_type == "assignment_expression":
                assignments.append(Assignment(operator=self._operator_text(child, "=")))
            elif node_type == "binary_expression":
                binary_operations.append(
                    BinaryOperation(operator=self._operator_text(child, ""))
                )

        return MethodDeclaration(
            name=self._get_node_name(node),
            modifiers=self._extract_modifiers(node),
            parameters=tuple(parameters),
            variables=tuple(variables),
            invocations=tuple(invocations),
            assignments=tuple(assignments),
            binary_operations=tuple(binary_operations),
        )

    def _parse_parameter(self, node) -> ParameterDeclaration:
        if node.type == "implicit_parameter":
            return ParameterDeclaration(name=_text(node))
        return ParameterDeclaration(
            name=self._get_node_name(node), type_name=self._extract_type_name(node)
        )

    def _parse_variable_declaration(self, node) -> VariableDeclaration:
        names = tuple(
            self._get_node_name(c)
            for c in node.named_children
            if c.type == "variable_declarator"
        )
        return VariableDeclaration(names=names, type_name=self._extract_type_name(node))

    def _parse_invocation(self, node) -> Invocation:
        function = node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")
        argument_count = (
            sum(1 for c in arguments.named_children if c.type == "argument")
            if arguments is not None
            else 0
        )
        callee = (
            CALLEE_KINDS.get(function.type, CalleeKind.OTHER)
            if function is not None
            else CalleeKind.OTHER
        )
        return Invocation(
            argument_count=argument_count,
            callee=callee,
            callee_text=_text(function) if function is not None else None,
        )

    def _operator_text(self, node, default: str) -> str:
        operator = node.child_by_field_name("operator")
        if operator is not None:
            return _text(operator)
        # Fall back to the first anonymous token between the operands
        for child in node.children:
            if not child.is_named:
                return _text(child)
        return default
