"""Compiler error taxonomy.

``TypeError`` shadows the builtin inside this package: it is
the checker's generic error, and every more specific checker error derives
from it. Import it from here rather than relying on the builtin.
"""


class CompilerError(Exception):
    def __init__(self, message: str, line: int = 0, col: int = 0):
        self.message = message
        self.line = line
        self.col = col
        super().__init__(f"{message} at {line}:{col}")


class ParseError(CompilerError):
    pass


class CodegenError(CompilerError):
    pass


class TypeError(CompilerError):  # noqa: A001
    pass


class RedeclarationError(TypeError):
    pass


class UndeclaredError(TypeError):
    pass


class IncompatibleAssignmentError(TypeError):
    pass


class ReturnTypeError(TypeError):
    pass


class NotAFunctionError(TypeError):
    pass
