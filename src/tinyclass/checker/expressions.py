"""Expression typing: every expression yields a nominal type name."""

from ..ast_nodes import (
    BinaryExpr, CallExpr, LiteralExpr, NewExpr, PrintlnExpr, ThisExpr,
    VariableExpr,
)
from ..errors import CompilerError, NotAFunctionError, TypeError, UndeclaredError
from .core import Scope

LITERAL_TYPES = {"int": "Int", "string": "String", "boolean": "Boolean"}


class ExpressionsMixin:

    def expression_type(self, expr, scope=None) -> str:
        """Type of ``expr``; top-level context unless a ``scope`` is given."""
        return self._expression_type(expr, scope if scope is not None else Scope())

    def _expression_type(self, expr, scope) -> str:
        if isinstance(expr, LiteralExpr):
            return LITERAL_TYPES[expr.value_type]
        if isinstance(expr, VariableExpr):
            return self._lookup_variable(expr.name, scope, expr)
        if isinstance(expr, ThisExpr):
            if scope.current_class is None:
                raise TypeError("'this' can only be used inside a class", expr.line, expr.col)
            return scope.current_class.name
        if isinstance(expr, BinaryExpr):
            return self._binary_type(expr, scope)
        if isinstance(expr, CallExpr):
            return self._call_type(expr, scope)
        if isinstance(expr, NewExpr):
            return self._new_type(expr, scope)
        if isinstance(expr, PrintlnExpr):
            self._expression_type(expr.argument, scope)
            return "Void"
        raise CompilerError(f"Unknown expression kind '{type(expr).__name__}'")

    def _lookup_variable(self, name, scope, node) -> str:
        if name in scope.locals:
            return scope.locals[name]
        if scope.current_class is not None and name in scope.current_class.variables:
            return scope.current_class.variables[name]
        if name in self.globals:
            return self.globals[name]
        raise UndeclaredError(f"Variable '{name}' is not defined", node.line, node.col)

    def _binary_type(self, expr, scope) -> str:
        """Fold a left-leaning operator chain iteratively, innermost operator first."""
        chain = []
        node = expr
        while isinstance(node, BinaryExpr):
            chain.append(node)
            node = node.left
        result = self._expression_type(node, scope)
        for link in reversed(chain):
            right = self._expression_type(link.right, scope)
            result = self._operator_type(link, result, right)
        return result

    def _operator_type(self, expr, left, right) -> str:
        op = expr.operator
        if op == "+":
            if left == "String" or right == "String":
                return "String"
            if left == "Int" and right == "Int":
                return "Int"
        elif op in ("-", "*", "/"):
            if left == "Int" and right == "Int":
                return "Int"
        else:
            raise TypeError(f"Unsupported binary operator '{op}'", expr.line, expr.col)
        raise TypeError(f"Cannot use '{op}' operator with types '{left}' and '{right}'",
                        expr.line, expr.col)

    def _call_type(self, expr, scope) -> str:
        receiver = self._expression_type(expr.object, scope)
        if receiver not in self.classes:
            raise TypeError(f"Cannot call method '{expr.method}' on type '{receiver}'",
                            expr.line, expr.col)
        method = self._find_method(receiver, expr.method)
        if method is None:
            raise NotAFunctionError(
                f"Method '{expr.method}' not found in class '{receiver}'",
                expr.line, expr.col)
        self._check_arguments(expr.args, method.parameters, scope,
                              f"call to '{receiver}.{expr.method}'", expr)
        return method.return_type

    def _new_type(self, expr, scope) -> str:
        info = self.classes.get(expr.class_name)
        if info is None:
            raise UndeclaredError(f"Class '{expr.class_name}' not found", expr.line, expr.col)
        self._check_arguments(expr.args, info.constructor.parameters, scope,
                              f"constructor call for '{expr.class_name}'", expr)
        return expr.class_name

    def _check_arguments(self, args, params, scope, what, node):
        """Arity first, then positional assignability."""
        if len(args) != len(params):
            raise TypeError(f"{what} has {len(args)} argument(s) but requires {len(params)}",
                            node.line, node.col)
        for i, (arg, param) in enumerate(zip(args, params)):
            arg_type = self._expression_type(arg, scope)
            if not self.is_assignable(arg_type, param.type):
                raise TypeError(
                    f"Type mismatch in {what}: argument {i + 1} is of type '{arg_type}', "
                    f"but parameter '{param.name}' requires '{param.type}'",
                    arg.line, arg.col)
