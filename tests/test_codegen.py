# =============================================================================
# test_codegen.py - Code Generator Unit Tests
# =============================================================================
# Tests for the Mini-C accumulator code generator.
#
# Test coverage includes:
#   - Declarations and the symbol table
#   - Assignment of numbers, variables and + expressions
#   - The subtraction gap (store only)
#   - If statements, conditions and label numbering
#   - Output formatting options
#   - Rejection of nodes the generator has no rule for
# =============================================================================

import logging

import pytest
from toyc.minic.lexer import tokenize
from toyc.minic.parser import Parser
from toyc.minic.ast import ProgramNode, Body, Identifier, NumberLiteral
from toyc.minic.codegen import CodeGenerator, generate_assembly
from toyc.minic.errors import CodeGenError


# =============================================================================
# Helper Functions
# =============================================================================

def generate(source: str) -> list:
    """Helper to compile source and return instruction lines without indentation."""
    program = Parser(tokenize(source)).parse()
    asm = CodeGenerator().generate(program)
    return [line.strip() for line in asm.splitlines()]


# =============================================================================
# Declaration Tests
# =============================================================================

class TestDeclarations:
    """Declarations only touch the symbol table."""

    def test_declaration_emits_nothing(self):
        assert generate("int x;") == []

    def test_declaration_registers_symbol(self):
        gen = CodeGenerator()
        gen.generate(Parser(tokenize("int x; int y;")).parse())
        assert gen.symbol_table == {"x": 0, "y": 0}

    def test_redeclaration_is_not_an_error(self):
        gen = CodeGenerator()
        gen.generate(Parser(tokenize("int x; int x;")).parse())
        assert gen.symbol_table == {"x": 0}

    def test_undeclared_use_is_not_checked(self):
        assert generate("z = 1;") == ["MVI A, 1", "STA z"]

    def test_declaration_inside_if_body(self):
        gen = CodeGenerator()
        gen.generate(Parser(tokenize("if (a == 1) { int b; }")).parse())
        assert gen.symbol_table == {"b": 0}

    def test_generate_assembly_fills_given_table(self):
        table = {}
        program = Parser(tokenize("int count;")).parse()
        assert generate_assembly(program, table) == ""
        assert table == {"count": 0}


# =============================================================================
# Assignment Tests
# =============================================================================

class TestAssignments:
    """Assignments load A and store it."""

    def test_number(self):
        assert generate("int x; x = 5;") == ["MVI A, 5", "STA x"]

    def test_identifier_plus_number(self):
        assert generate("x = y + 3;") == ["MOV A, y", "ADI 3", "STA x"]

    def test_identifier_plus_identifier(self):
        assert generate("x = y + z;") == ["MOV A, y", "ADD z", "STA x"]

    def test_number_plus_identifier(self):
        assert generate("x = 2 + z;") == ["MVI A, 2", "ADD z", "STA x"]

    def test_number_plus_number(self):
        assert generate("x = 2 + 7;") == ["MVI A, 2", "ADI 7", "STA x"]

    def test_digits_passed_through_verbatim(self):
        assert generate("x = 007;") == ["MVI A, 007", "STA x"]

    def test_plain_variable_stores_only(self):
        """Copying a variable emits no load."""
        assert generate("x = y;") == ["STA x"]

    def test_subtraction_stores_only(self):
        assert generate("x = y - 3;") == ["STA x"]

    def test_subtraction_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="toyc.minic.codegen"):
            generate("x = 5 - y;")
        assert "generates no arithmetic" in caplog.text


# =============================================================================
# If Statement Tests
# =============================================================================

class TestIfStatements:
    """If statements, conditions and labels."""

    def test_if(self):
        assert generate("if (x == 1) { y = 2; }") == [
            "MOV A, x",
            "CPI 1",
            "JNZ LABEL0",
            "MVI A, 2",
            "STA y",
            "LABEL0:",
        ]

    def test_empty_body(self):
        assert generate("if (x == 1) { }") == ["MOV A, x", "CPI 1", "JNZ LABEL0", "LABEL0:"]

    def test_condition_right_identifier_used_as_text(self):
        assert generate("if (a == b) { }")[:2] == ["MOV A, a", "CPI b"]

    def test_condition_left_number(self):
        assert generate("if (4 == b) { }")[:2] == ["MOV A, 4", "CPI b"]

    def test_sequential_ifs_get_increasing_labels(self):
        lines = generate("if (a == 1) { } if (b == 2) { }")
        assert [l for l in lines if l.startswith("JNZ")] == ["JNZ LABEL0", "JNZ LABEL1"]
        assert [l for l in lines if l.endswith(":")] == ["LABEL0:", "LABEL1:"]

    def test_nested_if_labels(self):
        """The outer if takes its label before the inner one."""
        assert generate("if (a == 1) { if (b == 2) { c = 3; } }") == [
            "MOV A, a",
            "CPI 1",
            "JNZ LABEL0",
            "MOV A, b",
            "CPI 2",
            "JNZ LABEL1",
            "MVI A, 3",
            "STA c",
            "LABEL1:",
            "LABEL0:",
        ]

    def test_label_count(self):
        gen = CodeGenerator()
        gen.generate(Parser(tokenize("if (a == 1) { } if (a == 2) { }")).parse())
        assert gen.label_count == 2


# =============================================================================
# Generator State Tests
# =============================================================================

class TestGeneratorState:
    """Each generate() call starts from scratch."""

    def test_labels_restart_per_run(self):
        gen = CodeGenerator()
        program = Parser(tokenize("if (a == 1) { }")).parse()
        first = gen.generate(program)
        second = gen.generate(program)
        assert first == second
        assert "JNZ LABEL0" in second

    def test_symbol_table_resets(self):
        gen = CodeGenerator()
        gen.generate(Parser(tokenize("int x;")).parse())
        gen.generate(Parser(tokenize("int y;")).parse())
        assert gen.symbol_table == {"y": 0}

    def test_lines_property(self):
        gen = CodeGenerator()
        gen.generate(Parser(tokenize("x = 1;")).parse())
        assert gen.lines == ["  MVI A, 1", "  STA x"]


# =============================================================================
# Formatting Tests
# =============================================================================

class TestFormatting:
    """Layout of the emitted text."""

    def test_instructions_indented_labels_flush(self):
        program = Parser(tokenize("if (x == 1) { }")).parse()
        asm = CodeGenerator().generate(program)
        assert asm.splitlines() == ["  MOV A, x", "  CPI 1", "  JNZ LABEL0", "LABEL0:"]

    def test_custom_indent_and_label_prefix(self):
        program = Parser(tokenize("if (x == 1) { }")).parse()
        asm = CodeGenerator(instruction_indent="\t", label_prefix="L").generate(program)
        assert asm.splitlines() == ["\tMOV A, x", "\tCPI 1", "\tJNZ L0", "L0:"]


# =============================================================================
# Error Tests
# =============================================================================

class TestErrors:
    """Nodes without a generation rule are rejected, not skipped."""

    def test_bare_identifier_statement(self):
        program = ProgramNode(statements=(Identifier("x"),))
        with pytest.raises(CodeGenError):
            CodeGenerator().generate(program)

    def test_body_outside_if(self):
        program = ProgramNode(statements=(Body(),))
        with pytest.raises(CodeGenError) as exc_info:
            CodeGenerator().generate(program)
        assert "Body" in exc_info.value.message

    def test_number_statement(self):
        with pytest.raises(CodeGenError):
            CodeGenerator().generate(ProgramNode(statements=(NumberLiteral("1"),)))
