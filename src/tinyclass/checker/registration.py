"""Collect the class table and validate the inheritance graph."""

from ..errors import RedeclarationError, TypeError
from .core import BUILTIN_CLASSES, ClassInfo, ConstructorInfo, MethodInfo, ParamInfo


class RegistrationMixin:

    def _collect_classes(self, program) -> dict[str, ClassInfo]:
        classes: dict[str, ClassInfo] = {
            "Object": ClassInfo(name="Object"),
            "String": ClassInfo(name="String", parent="Object"),
        }
        for decl in program.classes:
            if decl.name in classes:
                raise RedeclarationError(f"Class '{decl.name}' is already defined",
                                         decl.line, decl.col)
            classes[decl.name] = ClassInfo(name=decl.name, parent=decl.parent or "Object",
                                           line=decl.line, col=decl.col)

        # Members are filled in once every class name is known so that
        # declared types may refer to classes declared later.
        for decl in program.classes:
            info = classes[decl.name]
            for var in decl.variables:
                self._require_type(classes, var.var_type, var,
                                   f"variable '{var.name}' in class '{decl.name}'")
                if var.name in info.variables:
                    raise RedeclarationError(
                        f"Variable '{var.name}' is already defined in class '{decl.name}'",
                        var.line, var.col)
                info.variables[var.name] = var.var_type

            if decl.constructor is not None:
                ctor = decl.constructor
                info.constructor = ConstructorInfo(
                    parameters=self._collect_parameters(classes, ctor.parameters),
                    super_call=ctor.super_call,
                    statements=ctor.statements,
                    line=ctor.line, col=ctor.col)
            else:
                info.constructor = ConstructorInfo(line=decl.line, col=decl.col)

            for method in decl.methods:
                self._require_type(classes, method.return_type, method,
                                   f"return type of method '{method.name}' in class '{decl.name}'")
                if method.name in info.methods:
                    raise RedeclarationError(
                        f"Method '{method.name}' is already defined in class '{decl.name}'",
                        method.line, method.col)
                info.methods[method.name] = MethodInfo(
                    name=method.name,
                    parameters=self._collect_parameters(classes, method.parameters),
                    return_type=method.return_type,
                    statements=method.statements,
                    line=method.line, col=method.col)
        return classes

    def _collect_parameters(self, classes, parameters) -> list[ParamInfo]:
        result = []
        seen: set[str] = set()
        for param in parameters:
            self._require_type(classes, param.var_type, param, f"parameter '{param.name}'")
            if param.name in seen:
                raise RedeclarationError(
                    f"Parameter '{param.name}' is declared more than once",
                    param.line, param.col)
            seen.add(param.name)
            result.append(ParamInfo(name=param.name, type=param.var_type))
        return result

    def _require_type(self, classes, type_name, node, what):
        if not self._is_valid_type(type_name, classes):
            raise TypeError(f"Unknown type '{type_name}' for {what}", node.line, node.col)

    def _validate_hierarchy(self):
        """Every parent must exist and every parent chain must end at Object."""
        for name, info in self.classes.items():
            if info.parent and info.parent not in self.classes:
                raise TypeError(f"Class '{name}' extends unknown class '{info.parent}'",
                                info.line, info.col)
        for name, info in self.classes.items():
            seen: set[str] = set()
            cur = name
            while cur:
                if cur in seen:
                    raise TypeError(f"Circular inheritance detected involving class '{name}'",
                                    info.line, info.col)
                seen.add(cur)
                cur = self.classes[cur].parent

    def _validate_overrides(self):
        """A redefined method must keep its ancestor's signature."""
        for name, info in self.classes.items():
            if name in BUILTIN_CLASSES:
                continue
            for method in info.methods.values():
                inherited = self._find_method(info.parent, method.name)
                if inherited is None:
                    continue
                source = f"overriding '{method.name}' in '{name}'"
                if len(method.parameters) != len(inherited.parameters):
                    raise TypeError(
                        f"{source}: expected {len(inherited.parameters)} parameter(s) "
                        f"but got {len(method.parameters)}", method.line, method.col)
                for i, (mine, theirs) in enumerate(zip(method.parameters, inherited.parameters)):
                    if mine.type != theirs.type:
                        raise TypeError(
                            f"{source}: parameter {i + 1} has type '{mine.type}' "
                            f"but the overridden method takes '{theirs.type}'",
                            method.line, method.col)
                if method.return_type != inherited.return_type:
                    raise TypeError(
                        f"{source}: return type '{method.return_type}' does not match "
                        f"'{inherited.return_type}'", method.line, method.col)
