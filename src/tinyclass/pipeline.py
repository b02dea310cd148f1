"""In-memory compilation pipeline: source text to JavaScript text.

Each stage is a pure function of its input and gets a fresh lexer, parser
or checker instance, so compilations never share state.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional

from .ast_nodes import Program
from .checker import ClassInfo, TypeChecker
from .codegen import CodeGenerator
from .errors import CompilerError
from .lexer import Lexer
from .parser import Parser
from .tokens import Token

logger = logging.getLogger(__name__)


def tokenize(source: str) -> list[Token]:
    return Lexer(source).tokenize()


def parse(tokens: list[Token]) -> Program | None:
    return Parser(tokens).parse()


def check(program: Program) -> bool:
    """Type-check ``program``; checker errors propagate to the caller."""
    return TypeChecker().check(program)


def generate(program: Program) -> str:
    return CodeGenerator(program).generate()


@dataclass
class CompileResult:
    tokens: list[Token] = field(default_factory=list)
    program: Optional[Program] = None
    classes: dict[str, ClassInfo] = field(default_factory=dict)
    error: Optional[CompilerError] = None
    output: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.output is not None


def compile_source(source: str) -> CompileResult:
    """Run every stage, stopping at the first error.

    The error that stopped the pipeline is kept on the result rather than
    raised, together with whatever the earlier stages produced.
    """
    result = CompileResult()
    try:
        result.tokens = tokenize(source)
        logger.debug("Lexed %d token(s)", len(result.tokens))
        result.program = Parser(result.tokens).parse_or_raise()
        logger.debug("Parsed %d class(es), %d statement(s)",
                     len(result.program.classes), len(result.program.statements))
        checker = TypeChecker()
        checker.check(result.program)
        result.classes = checker.classes
        result.output = generate(result.program)
    except CompilerError as e:
        logger.debug("Compilation stopped: %s", e)
        result.error = e
    except RecursionError:
        logger.debug("Compilation stopped: nesting too deep")
        result.error = CompilerError("Program is nested too deeply to compile")
    return result


def format_error(source: str, error: CompilerError, filename: str = "<input>") -> str:
    """Format an error with source context and caret."""
    lines = source.split("\n")
    line, col = error.line, error.col
    if line < 1 or line > len(lines):
        return f"error: {error.message}\n --> {filename}:{line}:{col}"
    source_line = lines[line - 1]
    pad = " " * len(str(line))
    caret = " " * max(col - 1, 0) + "^"
    return (
        f"error: {error.message}\n"
        f" {pad}--> {filename}:{line}:{col}\n"
        f" {pad} |\n"
        f" {line} | {source_line}\n"
        f" {pad} | {caret}"
    )
