"""
Mini-C Compiler
===============

This module implements a compiler for Mini-C targeting a simple
accumulator machine.

It provides:

- A lexer (tokenizer) that never fails
- A recursive descent parser producing a typed AST
- An AST printer rendering the tree as indented text
- A code generator emitting 8080-style assembly

Pipeline
--------
    Source → Lexer → Parser → AST → {Printer, Code Generator}

Usage
-----
>>> from toyc.minic import compile_source
>>> print(compile_source("x = y + 3;"))
  MOV A, y
  ADI 3
  STA x

Language
--------
Supported:
- int declarations
- Assignment of a number, a variable, or `a + b` / `a - b`
- if (a == b) { ... } with no else

Not supported:
- Loops, functions, nested expressions, parentheses in expressions
- Comparison operators other than ==
"""

from toyc.minic.compiler import (
    MiniCCompiler,
    CompilerOptions,
    CompilerResult,
    compile_source,
    compile_file,
)
from toyc.minic.errors import (
    MiniCError,
    MiniCSyntaxError,
    UnexpectedTokenError,
    ExpectedTermError,
    MiniCCompilationError,
    CodeGenError,
    ParseError,
    ParseErrorKind,
)
from toyc.minic.lexer import Lexer, Token, TokenType, tokenize
from toyc.minic.parser import Parser, ParseResult, parse_program
from toyc.minic.codegen import CodeGenerator, generate_assembly
from toyc.minic.ast import (
    ASTNode,
    ASTVisitor,
    ASTPrinter,
    ProgramNode,
    Declaration,
    Assignment,
    IfStatement,
    Body,
    Condition,
    BinaryOp,
    Identifier,
    NumberLiteral,
    print_ast,
)

__all__ = [
    # Main API
    "MiniCCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile_source",
    "compile_file",
    # Errors
    "MiniCError",
    "MiniCSyntaxError",
    "UnexpectedTokenError",
    "ExpectedTermError",
    "MiniCCompilationError",
    "CodeGenError",
    "ParseError",
    "ParseErrorKind",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    # Parser
    "Parser",
    "ParseResult",
    "parse_program",
    # Code Generator
    "CodeGenerator",
    "generate_assembly",
    # AST
    "ASTNode",
    "ASTVisitor",
    "ASTPrinter",
    "ProgramNode",
    "Declaration",
    "Assignment",
    "IfStatement",
    "Body",
    "Condition",
    "BinaryOp",
    "Identifier",
    "NumberLiteral",
    "print_ast",
]
