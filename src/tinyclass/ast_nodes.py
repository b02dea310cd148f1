"""AST node definitions for the tinyclass language.

One dataclass per node variant; ``Stmt`` and ``Expr`` are the sum types the
checker and code generator dispatch over.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass
class Program:
    classes: list[ClassDef] = field(default_factory=list)
    statements: list[Stmt] = field(default_factory=list)


@dataclass
class ClassDef:
    name: str = ""
    parent: Optional[str] = None
    variables: list[VarDec] = field(default_factory=list)
    constructor: Optional[Constructor] = None
    methods: list[MethodDef] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class VarDec:
    var_type: str = ""
    name: str = ""
    line: int = 0
    col: int = 0


@dataclass
class Constructor:
    parameters: list[VarDec] = field(default_factory=list)
    super_call: Optional[SuperCall] = None
    statements: list[Stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class SuperCall:
    arguments: list[Expr] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class MethodDef:
    name: str = ""
    parameters: list[VarDec] = field(default_factory=list)
    return_type: str = ""
    statements: list[Stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0


# --- Statements ---

@dataclass
class BlockStmt:
    statements: list[Stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class ExprStmt:
    expression: Expr = None
    line: int = 0
    col: int = 0


@dataclass
class VarDecStmt:
    declaration: VarDec = None
    line: int = 0
    col: int = 0


@dataclass
class AssignStmt:
    variable: str = ""
    expression: Expr = None
    line: int = 0
    col: int = 0


@dataclass
class WhileStmt:
    condition: Expr = None
    body: Stmt = None
    line: int = 0
    col: int = 0


@dataclass
class BreakStmt:
    line: int = 0
    col: int = 0


@dataclass
class ReturnStmt:
    expression: Optional[Expr] = None
    line: int = 0
    col: int = 0


@dataclass
class IfStmt:
    condition: Expr = None
    then_branch: Stmt = None
    else_branch: Optional[Stmt] = None
    line: int = 0
    col: int = 0


# --- Expressions ---

@dataclass
class VariableExpr:
    name: str = ""
    line: int = 0
    col: int = 0


@dataclass
class LiteralExpr:
    value: Union[int, str, bool] = 0
    value_type: str = "int"  # "int" | "string" | "boolean"
    line: int = 0
    col: int = 0


@dataclass
class NewExpr:
    class_name: str = ""
    args: list[Expr] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class CallExpr:
    object: Expr = None
    method: str = ""
    args: list[Expr] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class PrintlnExpr:
    argument: Expr = None
    line: int = 0
    col: int = 0


@dataclass
class BinaryExpr:
    left: Expr = None
    operator: str = ""
    right: Expr = None
    line: int = 0
    col: int = 0


@dataclass
class ThisExpr:
    line: int = 0
    col: int = 0


# --- Union type aliases for sum types ---

Stmt = Union[BlockStmt, ExprStmt, VarDecStmt, AssignStmt, WhileStmt, BreakStmt, ReturnStmt, IfStmt]
Expr = Union[VariableExpr, LiteralExpr, NewExpr, CallExpr, PrintlnExpr, BinaryExpr, ThisExpr]
