"""JavaScript code generator for the tinyclass language.

Transforms a checked AST into prototype-based JavaScript: each class
becomes a constructor function, inheritance is wired through
``Object.create`` and methods are assigned onto the prototype.
"""

from __future__ import annotations
import json

from .ast_nodes import (
    AssignStmt,
    BinaryExpr,
    BlockStmt,
    BreakStmt,
    CallExpr,
    ClassDef,
    ExprStmt,
    IfStmt,
    LiteralExpr,
    MethodDef,
    NewExpr,
    PrintlnExpr,
    Program,
    ReturnStmt,
    ThisExpr,
    VarDecStmt,
    VariableExpr,
    WhileStmt,
)
from .errors import CodegenError

PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2}


class CodeGenerator:
    def __init__(self, program: Program):
        self.program = program
        self.output: list[str] = []

    def generate(self) -> str:
        self.output = []
        for class_def in self.program.classes:
            self.output.append(self._class_to_js(class_def) + "\n")
        for stmt in self.program.statements:
            self.output.append(self._stmt_to_js(stmt) + "\n")
        return "".join(self.output)

    # ---- Classes ----

    def _class_to_js(self, node: ClassDef) -> str:
        ctor = node.constructor
        params = ctor.parameters if ctor else []
        lines = [f"function {node.name}({self._param_list(params)}) {{"]

        if ctor is not None:
            if ctor.super_call is not None:
                parent = node.parent or "Object"
                args = self._arg_list(ctor.super_call.arguments)
                if args:
                    lines.append(f"\t{parent}.call(this, {args});")
                else:
                    lines.append(f"\t{parent}.call(this);")
            for stmt in ctor.statements:
                lines.append("\t" + self._stmt_to_js(stmt))
        lines.append("}")

        if node.parent:
            lines.append(f"{node.name}.prototype = Object.create({node.parent}.prototype);")
            lines.append(f"{node.name}.prototype.constructor = {node.name};")

        for method in node.methods:
            lines.append(self._method_to_js(node.name, method))
        return "\n".join(lines)

    def _method_to_js(self, class_name: str, method: MethodDef) -> str:
        body = "\n".join("\t" + self._stmt_to_js(s) for s in method.statements)
        return (f"{class_name}.prototype.{method.name} = "
                f"function({self._param_list(method.parameters)}) {{\n{body}\n}};")

    def _param_list(self, params) -> str:
        return ", ".join(p.name for p in params)

    def _arg_list(self, args) -> str:
        return ", ".join(self._expr_to_js(a) for a in args)

    # ---- Statements ----

    def _stmt_to_js(self, node) -> str:
        if isinstance(node, ExprStmt):
            return self._expr_to_js(node.expression) + ";"
        if isinstance(node, ReturnStmt):
            if node.expression is None:
                return "return;"
            return f"return {self._expr_to_js(node.expression)};"
        if isinstance(node, VarDecStmt):
            decl = node.declaration
            return f"let {decl.name}; // {decl.var_type}"
        if isinstance(node, AssignStmt):
            return f"{node.variable} = {self._expr_to_js(node.expression)};"
        if isinstance(node, IfStmt):
            cond = self._expr_to_js(node.condition)
            then_part = self._branch_to_js(node.then_branch)
            if node.else_branch is not None:
                return f"if ({cond}) {then_part} else {self._branch_to_js(node.else_branch)}"
            return f"if ({cond}) {then_part}"
        if isinstance(node, WhileStmt):
            return f"while ({self._expr_to_js(node.condition)}) {self._branch_to_js(node.body)}"
        if isinstance(node, BreakStmt):
            return "break;"
        if isinstance(node, BlockStmt):
            inner = "\n".join(self._stmt_to_js(s) for s in node.statements)
            return "{\n" + inner + "\n}"
        raise CodegenError(f"No generator for statement node '{type(node).__name__}'",
                           getattr(node, "line", 0), getattr(node, "col", 0))

    def _branch_to_js(self, node) -> str:
        # A lone `let` is not a statement JavaScript accepts as a branch body.
        if isinstance(node, VarDecStmt):
            return "{\n" + self._stmt_to_js(node) + "\n}"
        return self._stmt_to_js(node)

    # ---- Expressions ----

    def _expr_to_js(self, node) -> str:
        if isinstance(node, VariableExpr):
            return node.name
        if isinstance(node, LiteralExpr):
            return json.dumps(node.value)
        if isinstance(node, NewExpr):
            return f"new {node.class_name}({self._arg_list(node.args)})"
        if isinstance(node, CallExpr):
            return f"{self._expr_to_js(node.object)}.{node.method}({self._arg_list(node.args)})"
        if isinstance(node, PrintlnExpr):
            return f"console.log({self._expr_to_js(node.argument)})"
        if isinstance(node, BinaryExpr):
            return self._binary_to_js(node)
        if isinstance(node, ThisExpr):
            return "this"
        raise CodegenError(f"No generator for expression node '{type(node).__name__}'",
                           getattr(node, "line", 0), getattr(node, "col", 0))

    def _binary_to_js(self, node: BinaryExpr) -> str:
        """Render a left-leaning operator chain iteratively, innermost operator first."""
        chain = []
        while isinstance(node, BinaryExpr):
            chain.append(node)
            node = node.left
        text = self._expr_to_js(node)
        inner = None
        for link in reversed(chain):
            if inner is not None and PRECEDENCE[inner.operator] < PRECEDENCE[link.operator]:
                text = f"({text})"
            right = self._operand_to_js(link.right, link.operator)
            text = f"{text} {link.operator} {right}"
            inner = link
        return text

    def _operand_to_js(self, operand, parent_op: str) -> str:
        """Parenthesize a right-hand binary operand the source grouped explicitly."""
        text = self._expr_to_js(operand)
        if isinstance(operand, BinaryExpr) and PRECEDENCE[operand.operator] <= PRECEDENCE[parent_op]:
            return f"({text})"
        return text
