"""Static type checker for the tinyclass language."""

from .checker import (
    TypeChecker as TypeChecker,
    ClassInfo as ClassInfo,
    ConstructorInfo as ConstructorInfo,
    MethodInfo as MethodInfo,
    ParamInfo as ParamInfo,
    Scope as Scope,
)
