"""Checker assembly: combines all checking mixins into the final TypeChecker class."""

from .core import CheckerBase, ClassInfo, ConstructorInfo, MethodInfo, ParamInfo, Scope
from .registration import RegistrationMixin
from .members import MembersMixin
from .statements import StatementsMixin
from .expressions import ExpressionsMixin
from .type_utils import TypeUtilsMixin


class TypeChecker(
    TypeUtilsMixin,
    ExpressionsMixin,
    StatementsMixin,
    MembersMixin,
    RegistrationMixin,
    CheckerBase,
):
    """Static type checker for the tinyclass language.

    Construct one per compilation: the class table and global variables
    live on the instance.
    """
    pass


__all__ = [
    "TypeChecker", "ClassInfo", "ConstructorInfo", "MethodInfo", "ParamInfo", "Scope",
]
