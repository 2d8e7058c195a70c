"""
Mini-C Abstract Syntax Tree (AST) Definitions
=============================================

This module defines the AST node types produced by the Mini-C parser
and consumed by the printer and the code generator.

Node Hierarchy
--------------
ASTNode (base)
├── ProgramNode - root node containing all top-level statements
├── Statements
│   ├── Declaration - int x;
│   ├── Assignment - x = expr;
│   ├── IfStatement - if (cond) { ... }
│   └── Body - statement list of an if
└── Expressions
    ├── Condition - term == term
    ├── BinaryOp - term + term, term - term
    ├── Identifier - variable reference
    └── NumberLiteral - integer constant, kept as its digit text

Printed Form
------------
Every node has a tag, the label printed for it in the AST dump. Leaf
payloads (identifier names, number digits) print one level below their
tag, so `x = 5;` prints as:

    Assignment
      Identifier
        x
      Number
        5

Design Notes
------------
- All nodes are frozen dataclasses: the tree is read-only after parsing
- Child sequences are tuples for the same reason
- Tags are class-level constants, except BinaryOp whose tag is its operator
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union


# =============================================================================
# AST Node Base Class
# =============================================================================

@dataclass(frozen=True)
class ASTNode:
    """
    Base class for all AST nodes.

    Attributes:
        TAG: Label used for this node in the printed tree
    """
    TAG: ClassVar[str] = ""

    @property
    def tag(self) -> str:
        return self.TAG


# =============================================================================
# Expression Nodes
# =============================================================================

@dataclass(frozen=True)
class Identifier(ASTNode):
    """
    Variable reference.

    Attributes:
        name: Variable name
    """
    TAG: ClassVar[str] = "Identifier"
    name: str = ""


@dataclass(frozen=True)
class NumberLiteral(ASTNode):
    """
    Integer constant.

    The digits are kept exactly as written; nothing is converted or
    range-checked.

    Attributes:
        digits: The literal's source text
    """
    TAG: ClassVar[str] = "Number"
    digits: str = ""


# A term is the only operand the grammar allows
Term = Union[Identifier, NumberLiteral]


@dataclass(frozen=True)
class BinaryOp(ASTNode):
    """
    One additive operation: `left + right` or `left - right`.

    Attributes:
        operator: "+" or "-"
        left: First operand
        right: Second operand
    """
    operator: str = "+"
    left: Optional[Term] = None
    right: Optional[Term] = None

    @property
    def tag(self) -> str:
        return self.operator


# Right-hand side of an assignment
Expression = Union[Identifier, NumberLiteral, BinaryOp]


@dataclass(frozen=True)
class Condition(ASTNode):
    """
    Equality test guarding an if statement.

    Attributes:
        left: Term on the left of ==
        right: Term on the right of ==
    """
    TAG: ClassVar[str] = "=="
    left: Optional[Term] = None
    right: Optional[Term] = None


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass(frozen=True)
class Declaration(ASTNode):
    """
    Variable declaration: `int x;`

    Attributes:
        identifier: The declared variable
    """
    TAG: ClassVar[str] = "Declaration"
    identifier: Optional[Identifier] = None

    @property
    def name(self) -> str:
        return self.identifier.name


@dataclass(frozen=True)
class Assignment(ASTNode):
    """
    Assignment statement: `x = expr;`

    Attributes:
        target: Variable being assigned
        value: The expression stored into it
    """
    TAG: ClassVar[str] = "Assignment"
    target: Optional[Identifier] = None
    value: Optional[Expression] = None


@dataclass(frozen=True)
class Body(ASTNode):
    """
    Statements between the braces of an if statement.

    Attributes:
        statements: Statements in source order (may be empty)
    """
    TAG: ClassVar[str] = "Body"
    statements: tuple["Statement", ...] = ()


@dataclass(frozen=True)
class IfStatement(ASTNode):
    """
    If statement: `if (a == b) { ... }`

    There is no else clause.

    Attributes:
        condition: The equality test
        body: Statements guarded by the test
    """
    TAG: ClassVar[str] = "If"
    condition: Optional[Condition] = None
    body: Body = Body()


Statement = Union[Declaration, Assignment, IfStatement]


# =============================================================================
# Program Root Node
# =============================================================================

@dataclass(frozen=True)
class ProgramNode(ASTNode):
    """
    Root node of the AST representing a complete Mini-C program.

    Attributes:
        statements: Top-level statements in source order
    """
    TAG: ClassVar[str] = "Program"
    statements: tuple[Statement, ...] = ()


# =============================================================================
# AST Visitor Base Class
# =============================================================================

class ASTVisitor:
    """
    Base class for AST visitors.

    Dispatches on the node's class name. Subclasses override visit_*
    methods for the node types they handle; a node with no visit_* method
    goes to generic_visit, which rejects it.

    Usage:
        class MyVisitor(ASTVisitor):
            def visit_Declaration(self, node):
                ...

        MyVisitor().visit(program)
    """

    def visit(self, node: ASTNode):
        """
        Visit a node by dispatching to the appropriate method.

        Args:
            node: The AST node to visit

        Returns:
            The result of the visit method (varies by visitor)
        """
        method_name = f"visit_{node.__class__.__name__}"
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: ASTNode):
        """Called for a node type the visitor has no visit_* method for."""
        raise TypeError(
            f"{type(self).__name__} cannot visit {type(node).__name__} nodes"
        )


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter(ASTVisitor):
    """
    Renders an AST as an indented tree, one tag per line.

    Usage:
        printer = ASTPrinter()
        output = printer.print(ast)
    """

    INDENT = "  "

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: ASTNode, depth: int = 0) -> str:
        """Print the AST starting at the given depth and return it as a string."""
        self.output = []
        self.indent_level = depth
        self.visit(node)
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        """Emit a line with current indentation."""
        self.output.append(f"{self.INDENT * self.indent_level}{text}")

    def _branch(self, node: ASTNode, *children: ASTNode) -> None:
        """Emit a node's tag and then its children one level deeper."""
        self._emit(node.tag)
        self.indent_level += 1
        for child in children:
            self.visit(child)
        self.indent_level -= 1

    def _leaf(self, node: ASTNode, payload: str) -> None:
        """Emit a tag with its payload printed as a child line."""
        self._emit(node.tag)
        self.indent_level += 1
        self._emit(payload)
        self.indent_level -= 1

    def visit_ProgramNode(self, node: ProgramNode):
        self._branch(node, *node.statements)

    def visit_Declaration(self, node: Declaration):
        self._branch(node, node.identifier)

    def visit_Assignment(self, node: Assignment):
        self._branch(node, node.target, node.value)

    def visit_IfStatement(self, node: IfStatement):
        self._branch(node, node.condition, node.body)

    def visit_Body(self, node: Body):
        self._branch(node, *node.statements)

    def visit_Condition(self, node: Condition):
        self._branch(node, node.left, node.right)

    def visit_BinaryOp(self, node: BinaryOp):
        self._branch(node, node.left, node.right)

    def visit_Identifier(self, node: Identifier):
        self._leaf(node, node.name)

    def visit_NumberLiteral(self, node: NumberLiteral):
        self._leaf(node, node.digits)


def print_ast(node: ASTNode, depth: int = 0) -> str:
    """
    Render an AST as indented text.

    Args:
        node: Root of the (sub)tree to print
        depth: Indentation level of the first line

    Returns:
        One line per tag, two spaces of indentation per level
    """
    return ASTPrinter().print(node, depth)
