"""
Accumulator Code Generator for Mini-C
=====================================

This module generates assembly text from the Mini-C AST. Output uses
8080-style mnemonics for a machine with a single accumulator A.

Instruction Set
---------------
| Mnemonic       | Meaning                                   |
|----------------|-------------------------------------------|
| MVI A, <imm>   | load immediate into A                     |
| MOV A, <var>   | load variable into A                      |
| ADD <var>      | add variable to A                         |
| ADI <imm>      | add immediate to A                        |
| STA <var>      | store A to variable                       |
| CPI <val>      | compare A with immediate                  |
| JNZ LABEL<n>   | jump to label n if the compare differed   |
| LABEL<n>:      | label definition                          |

Code Generation Strategy
------------------------
- Declarations only enter the symbol table; they emit nothing
- Assignments load the expression into A, then STA the target
- Only `+` produces arithmetic. A `-` expression emits just the store
- An if statement emits its compare, JNZ to a fresh label, the body,
  and then the label. The body is laid out straight after the jump

Example output for `if (x == 1) { y = 2; }`:
      MOV A, x
      CPI 1
      JNZ LABEL0
      MVI A, 2
      STA y
    LABEL0:

Usage
-----
>>> from toyc.minic.lexer import tokenize
>>> from toyc.minic.parser import Parser
>>> from toyc.minic.codegen import CodeGenerator
>>> program = Parser(tokenize("int x; x = 5;")).parse()
>>> gen = CodeGenerator()
>>> print(gen.generate(program))
  MVI A, 5
  STA x
>>> gen.symbol_table
{'x': 0}
"""

from typing import Optional
import logging

from toyc.minic.ast import (
    ASTNode,
    ASTVisitor,
    ProgramNode,
    Declaration,
    Assignment,
    IfStatement,
    Condition,
    BinaryOp,
    Identifier,
    NumberLiteral,
)
from toyc.minic.errors import CodeGenError

logger = logging.getLogger(__name__)


class CodeGenerator(ASTVisitor):
    """
    Generates accumulator assembly from a Mini-C AST.

    The generator walks the tree, appending one line per instruction or
    label. The symbol table and label counter live on the instance and
    are reset by every generate() call.

    Attributes:
        symbol_table: Declared variable names, each mapped to 0
        label_count: Number of labels allocated in the current run
    """

    def __init__(self, instruction_indent: str = "  ", label_prefix: str = "LABEL"):
        """
        Initialize the code generator.

        Args:
            instruction_indent: Prefix for instruction lines (labels are flush left)
            label_prefix: Text before the number in generated label names
        """
        self._instruction_indent = instruction_indent
        self._label_prefix = label_prefix

        # Assembly output lines
        self._output: list[str] = []

        self.symbol_table: dict[str, int] = {}
        self.label_count: int = 0

    def generate(self, program: ProgramNode, symbol_table: Optional[dict[str, int]] = None) -> str:
        """
        Generate assembly code from AST.

        Args:
            program: The root AST node
            symbol_table: Table to record declarations in; a new empty
                          one is used when omitted

        Returns:
            The listing, one instruction or label per line
        """
        self._output = []
        self.symbol_table = symbol_table if symbol_table is not None else {}
        self.label_count = 0

        self.visit(program)

        logger.debug(
            f"Generated {len(self._output)} lines, "
            f"{len(self.symbol_table)} symbols, {self.label_count} labels"
        )
        return "\n".join(self._output)

    @property
    def lines(self) -> list[str]:
        """Lines emitted by the last generate() call."""
        return list(self._output)

    # =========================================================================
    # Assembly Output Methods
    # =========================================================================

    def _emit_instruction(self, mnemonic: str, operand: str) -> None:
        self._output.append(f"{self._instruction_indent}{mnemonic} {operand}")

    def _emit_label(self, label: str) -> None:
        self._output.append(f"{label}:")

    def _new_label(self) -> str:
        """Allocate the next label; numbering starts at 0 and never repeats in a run."""
        label = f"{self._label_prefix}{self.label_count}"
        self.label_count += 1
        return label

    # =========================================================================
    # Node Visitors
    # =========================================================================

    def generic_visit(self, node: ASTNode) -> None:
        raise CodeGenError(
            f"no code generation rule for {type(node).__name__}",
            hint="only trees built by the Mini-C parser can be compiled",
        )

    def visit_ProgramNode(self, node: ProgramNode) -> None:
        for stmt in node.statements:
            self.visit(stmt)

    def visit_Declaration(self, node: Declaration) -> None:
        self.symbol_table[node.name] = 0
        logger.debug(f"Declared '{node.name}'")

    def visit_Assignment(self, node: Assignment) -> None:
        value = node.value

        if isinstance(value, NumberLiteral):
            self._emit_instruction("MVI", f"A, {value.digits}")
        elif isinstance(value, BinaryOp):
            self._generate_binary(value)
        elif not isinstance(value, Identifier):
            self.generic_visit(value)

        self._emit_instruction("STA", node.target.name)

    def _generate_binary(self, expr: BinaryOp) -> None:
        """Load the left operand into A and add the right one."""
        if expr.operator != "+":
            logger.warning(
                f"'{expr.operator}' expression generates no arithmetic; only the store is emitted"
            )
            return

        if isinstance(expr.left, Identifier):
            self._emit_instruction("MOV", f"A, {expr.left.name}")
        else:
            self._emit_instruction("MVI", f"A, {expr.left.digits}")

        if isinstance(expr.right, Identifier):
            self._emit_instruction("ADD", expr.right.name)
        else:
            self._emit_instruction("ADI", expr.right.digits)

    def visit_IfStatement(self, node: IfStatement) -> None:
        label = self._new_label()

        self.visit(node.condition)
        self._emit_instruction("JNZ", label)

        for stmt in node.body.statements:
            self.visit(stmt)

        self._emit_label(label)

    def visit_Condition(self, node: Condition) -> None:
        """Load the left term and compare against the right term's text."""
        self._emit_instruction("MOV", f"A, {_term_text(node.left)}")
        self._emit_instruction("CPI", _term_text(node.right))


def _term_text(term: ASTNode) -> str:
    """Source text of a term: the variable name or the digits."""
    if isinstance(term, Identifier):
        return term.name
    if isinstance(term, NumberLiteral):
        return term.digits
    raise CodeGenError(f"expected a term, got {type(term).__name__}")


# =============================================================================
# Convenience Functions
# =============================================================================

def generate_assembly(program: ProgramNode, symbol_table: dict[str, int]) -> str:
    """
    Generate the assembly listing for a program.

    Args:
        program: The root AST node
        symbol_table: Receives an entry for every declared variable

    Returns:
        The listing, one instruction or label per line
    """
    return CodeGenerator().generate(program, symbol_table)
