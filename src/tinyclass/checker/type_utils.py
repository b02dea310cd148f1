"""Type utilities: type validity, nominal subtyping, method lookup."""

from __future__ import annotations

from .core import BUILTIN_SCALARS, MethodInfo


class TypeUtilsMixin:

    def _is_valid_type(self, type_name: str, classes=None) -> bool:
        classes = self.classes if classes is None else classes
        return type_name in BUILTIN_SCALARS or type_name in classes

    def ancestors(self, class_name: str) -> list[str]:
        """``class_name`` followed by every class on its parent chain."""
        chain = []
        cur = class_name
        while cur and cur in self.classes and cur not in chain:
            chain.append(cur)
            cur = self.classes[cur].parent
        return chain

    def is_assignable(self, source: str, target: str) -> bool:
        if source == target:
            return True
        if source not in self.classes or target not in self.classes:
            return False
        return target in self.ancestors(source)

    def _find_method(self, class_name: str | None, method_name: str) -> MethodInfo | None:
        """Resolve a method by walking the class chain upward from ``class_name``."""
        for name in self.ancestors(class_name) if class_name else ():
            method = self.classes[name].methods.get(method_name)
            if method is not None:
                return method
        return None
