"""Statement checking: declarations, assignment, control flow, returns."""

from ..ast_nodes import (
    AssignStmt, BlockStmt, BreakStmt, ExprStmt, IfStmt, ReturnStmt,
    VarDecStmt, WhileStmt,
)
from ..errors import (
    CompilerError, IncompatibleAssignmentError, RedeclarationError,
    ReturnTypeError, TypeError,
)


class StatementsMixin:

    def _check_stmt(self, stmt, scope):
        if isinstance(stmt, BlockStmt):
            inner = scope.enter_block()
            for s in stmt.statements:
                self._check_stmt(s, inner)
        elif isinstance(stmt, ExprStmt):
            self._expression_type(stmt.expression, scope)
        elif isinstance(stmt, VarDecStmt):
            self._check_var_dec(stmt.declaration, scope)
        elif isinstance(stmt, AssignStmt):
            self._check_assignment(stmt, scope)
        elif isinstance(stmt, WhileStmt):
            self._require_boolean(stmt.condition, scope, "While")
            self._check_stmt(stmt.body, scope.enter_loop())
        elif isinstance(stmt, BreakStmt):
            if not scope.in_loop:
                raise TypeError("Break statement can only be used inside a loop",
                                stmt.line, stmt.col)
        elif isinstance(stmt, ReturnStmt):
            self._check_return(stmt, scope)
        elif isinstance(stmt, IfStmt):
            self._require_boolean(stmt.condition, scope, "If")
            self._check_stmt(stmt.then_branch, scope)
            if stmt.else_branch is not None:
                self._check_stmt(stmt.else_branch, scope)
        else:
            raise CompilerError(f"Unknown statement kind '{type(stmt).__name__}'")

    def _require_boolean(self, condition, scope, keyword):
        cond_type = self._expression_type(condition, scope)
        if cond_type != "Boolean":
            raise TypeError(f"{keyword} condition must be Boolean, but got '{cond_type}'",
                            condition.line, condition.col)

    def _check_var_dec(self, decl, scope):
        if not self._is_valid_type(decl.var_type):
            raise TypeError(f"Unknown type '{decl.var_type}'", decl.line, decl.col)
        instance_vars = scope.current_class.variables if scope.current_class else {}
        if (decl.name in scope.locals or decl.name in instance_vars
                or decl.name in self.globals):
            raise RedeclarationError(f"Variable '{decl.name}' is already defined",
                                     decl.line, decl.col)
        if scope.in_body:
            scope.locals[decl.name] = decl.var_type
        else:
            self.globals[decl.name] = decl.var_type

    def _check_assignment(self, stmt, scope):
        var_type = self._lookup_variable(stmt.variable, scope, stmt)
        expr_type = self._expression_type(stmt.expression, scope)
        if not self.is_assignable(expr_type, var_type):
            raise IncompatibleAssignmentError(
                f"Cannot assign value of type '{expr_type}' to variable "
                f"'{stmt.variable}' of type '{var_type}'", stmt.line, stmt.col)

    def _check_return(self, stmt, scope):
        expected = scope.return_type
        if expected is None:
            raise ReturnTypeError("Return statement outside of method", stmt.line, stmt.col)

        if expected == "Void":
            # `return println(x);` hands back the Void result of println.
            if stmt.expression is not None:
                value_type = self._expression_type(stmt.expression, scope)
                if value_type != "Void":
                    raise ReturnTypeError(
                        f"Void methods cannot return a value of type '{value_type}'",
                        stmt.line, stmt.col)
            return

        if stmt.expression is None:
            raise ReturnTypeError(
                f"Method with return type '{expected}' must return a value",
                stmt.line, stmt.col)
        value_type = self._expression_type(stmt.expression, scope)
        if not self.is_assignable(value_type, expected):
            raise ReturnTypeError(
                f"Cannot return value of type '{value_type}' from method with "
                f"return type '{expected}'", stmt.line, stmt.col)
