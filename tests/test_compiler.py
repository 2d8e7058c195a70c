"""
Mini-C Compiler Test Suite
==========================

End-to-end tests for the compiler facade: the full listing, options,
failure handling and determinism.

Test Organization
-----------------
- TestCompileSource: MiniCCompiler.compile_source()
- TestListing: the printed tree + header + assembly layout
- TestFailures: whole-run abort on parse errors
- TestConvenienceFunctions: compile_source() / compile_file()
"""

import pytest
from toyc import ToycError
from toyc.minic.compiler import (
    MiniCCompiler,
    CompilerOptions,
    CompilerResult,
    compile_source,
    compile_file,
)
from toyc.minic.errors import MiniCCompilationError, ParseErrorKind


SAMPLE = """
int x;
int y;
x = 5;
y = x + 3;
if (y == 8) {
    x = 1;
}
"""


# =============================================================================
# compile_source Tests
# =============================================================================

class TestCompileSource:
    """Tests for MiniCCompiler.compile_source()."""

    def test_success(self):
        result = MiniCCompiler().compile_source(SAMPLE)
        assert result.success
        assert result.error is None
        assert len(result.ast.statements) == 5

    def test_assembly(self):
        result = MiniCCompiler().compile_source(SAMPLE)
        assert [line.strip() for line in result.assembly.splitlines()] == [
            "MVI A, 5",
            "STA x",
            "MOV A, x",
            "ADI 3",
            "STA y",
            "MOV A, y",
            "CPI 8",
            "JNZ LABEL0",
            "MVI A, 1",
            "STA x",
            "LABEL0:",
        ]

    def test_symbol_table(self):
        result = MiniCCompiler().compile_source(SAMPLE)
        assert result.symbol_table == {"x": 0, "y": 0}

    def test_counts(self):
        result = MiniCCompiler().compile_source("int x; if (x == 1) { }")
        assert result.token_count == 11
        assert result.label_count == 1

    def test_declaration_only(self):
        result = MiniCCompiler().compile_source("int x;")
        assert result.assembly == ""
        assert result.symbol_table == {"x": 0}

    def test_deterministic(self):
        compiler = MiniCCompiler()
        first = compiler.compile_source(SAMPLE)
        second = compiler.compile_source(SAMPLE)
        assert first.listing == second.listing

    def test_compiler_reuse_restarts_labels(self):
        compiler = MiniCCompiler()
        compiler.compile_source("if (a == 1) { }")
        result = compiler.compile_source("if (b == 2) { }")
        assert "JNZ LABEL0" in result.assembly


# =============================================================================
# Listing Tests
# =============================================================================

class TestListing:
    """Layout of the full listing."""

    def test_listing_layout(self):
        result = MiniCCompiler().compile_source("int x; x = 5;")
        assert result.listing == "\n".join([
            "Program",
            "  Declaration",
            "    Identifier",
            "      x",
            "  Assignment",
            "    Identifier",
            "      x",
            "    Number",
            "      5",
            "",
            "Assembly Code:",
            "  MVI A, 5",
            "  STA x",
        ])

    def test_empty_program_listing(self):
        result = MiniCCompiler().compile_source("")
        assert result.listing == "Program\n\nAssembly Code:"

    def test_without_ast(self):
        options = CompilerOptions(print_ast=False)
        result = MiniCCompiler(options).compile_source("x = 5;")
        assert result.listing == "Assembly Code:\n  MVI A, 5\n  STA x"

    def test_custom_header_and_labels(self):
        options = CompilerOptions(print_ast=False, header="; code", label_prefix="L",
                                  instruction_indent="    ")
        result = MiniCCompiler(options).compile_source("if (a == b) { }")
        assert result.listing.splitlines() == [
            "; code",
            "    MOV A, a",
            "    CPI b",
            "    JNZ L0",
            "L0:",
        ]

    def test_ast_text(self):
        result = MiniCCompiler().compile_source("int x;")
        assert result.ast_text == "Program\n  Declaration\n    Identifier\n      x"


# =============================================================================
# Failure Tests
# =============================================================================

class TestFailures:
    """A parse error aborts the whole run."""

    def test_stray_character(self):
        result = MiniCCompiler().compile_source("int x; x = 1; @ y = 2;")
        assert not result.success
        assert result.error.kind == ParseErrorKind.UNEXPECTED_TOKEN
        assert result.ast is None
        assert result.assembly == ""
        assert result.listing == ""
        assert result.symbol_table == {}

    def test_expected_term(self):
        result = MiniCCompiler().compile_source("x = ;")
        assert result.error.kind == ParseErrorKind.EXPECTED_TERM

    def test_failure_still_counts_tokens(self):
        result = MiniCCompiler().compile_source("@")
        assert result.token_count == 1

    def test_default_result(self):
        assert CompilerResult().listing == ""


# =============================================================================
# Convenience Function Tests
# =============================================================================

class TestConvenienceFunctions:
    """Tests for compile_source() and compile_file()."""

    def test_compile_source(self):
        assert compile_source("x = y + 3;") == "  MOV A, y\n  ADI 3\n  STA x"

    def test_compile_source_raises(self):
        with pytest.raises(MiniCCompilationError) as exc_info:
            compile_source("int x; @")
        assert str(exc_info.value) == "Unexpected token"
        assert exc_info.value.error.kind == ParseErrorKind.UNEXPECTED_TOKEN

    def test_errors_are_toyc_errors(self):
        with pytest.raises(ToycError):
            compile_source("=")

    def test_compile_file(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("int x;\nx = 5;\n")
        listing = compile_file(str(source))
        assert listing.endswith("Assembly Code:\n  MVI A, 5\n  STA x")

    def test_compile_file_writes_output(self, tmp_path):
        source = tmp_path / "prog.txt"
        source.write_text("x = 1;")
        output = tmp_path / "prog.asm"
        listing = compile_file(str(source), str(output))
        assert output.read_text() == listing + "\n"

    def test_compile_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            compile_file(str(tmp_path / "missing.txt"))

    def test_compile_file_parse_error(self, tmp_path):
        source = tmp_path / "bad.txt"
        source.write_text("if (x == 1) {")
        with pytest.raises(MiniCCompilationError):
            compile_file(str(source))

    def test_compile_file_non_utf8_byte(self, tmp_path):
        source = tmp_path / "latin.txt"
        source.write_bytes(b"int x; \xe9")
        with pytest.raises(MiniCCompilationError) as exc_info:
            compile_file(str(source))
        assert exc_info.value.error.kind == ParseErrorKind.UNEXPECTED_TOKEN
        assert exc_info.value.error.token.value == "\xe9"
