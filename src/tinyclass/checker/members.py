"""Constructor and method body checking."""

from ..ast_nodes import BlockStmt, IfStmt, ReturnStmt
from ..errors import ReturnTypeError, TypeError
from .core import Scope


class MembersMixin:

    def _check_class_members(self, info):
        self._check_constructor(info)
        for method in info.methods.values():
            self._check_method(info, method)

    def _body_scope(self, info, parameters, return_type=None) -> Scope:
        return Scope(current_class=info, return_type=return_type, in_body=True,
                     locals={p.name: p.type for p in parameters})

    def _check_constructor(self, info):
        ctor = info.constructor
        scope = self._body_scope(info, ctor.parameters)
        parent = self.classes[info.parent]

        if ctor.super_call is not None:
            self._check_arguments(
                ctor.super_call.arguments, parent.constructor.parameters, scope,
                f"super call in '{info.name}'", ctor.super_call)
        elif parent.constructor.parameters:
            raise TypeError(
                f"Constructor in class '{info.name}' must call super() with "
                f"{len(parent.constructor.parameters)} argument(s) for '{parent.name}'",
                ctor.line, ctor.col)

        for stmt in ctor.statements:
            self._check_stmt(stmt, scope)

    def _check_method(self, info, method):
        scope = self._body_scope(info, method.parameters, method.return_type)
        for stmt in method.statements:
            self._check_stmt(stmt, scope)
        if method.return_type != "Void" and not self._has_return(method.statements):
            raise ReturnTypeError(
                f"Method '{method.name}' has return type '{method.return_type}' "
                f"but might not return a value", method.line, method.col)

    def _has_return(self, statements) -> bool:
        """Conservative: an if counts only when both branches exist and return."""
        for stmt in statements:
            if isinstance(stmt, ReturnStmt):
                return True
            if isinstance(stmt, BlockStmt) and self._has_return(stmt.statements):
                return True
            if (isinstance(stmt, IfStmt) and stmt.else_branch is not None
                    and self._has_return([stmt.then_branch])
                    and self._has_return([stmt.else_branch])):
                return True
        return False
