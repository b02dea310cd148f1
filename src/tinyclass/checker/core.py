"""Checker core: class table records, the scope context, and orchestration."""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional

from ..ast_nodes import Program, Stmt, SuperCall

BUILTIN_SCALARS = frozenset({"Int", "Boolean", "Void", "Object", "String"})
BUILTIN_CLASSES = ("Object", "String")


@dataclass
class ParamInfo:
    name: str
    type: str


@dataclass
class ConstructorInfo:
    parameters: list[ParamInfo] = field(default_factory=list)
    super_call: Optional[SuperCall] = None
    statements: list[Stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class MethodInfo:
    name: str
    parameters: list[ParamInfo] = field(default_factory=list)
    return_type: str = "Void"
    statements: list[Stmt] = field(default_factory=list)
    line: int = 0
    col: int = 0


@dataclass
class ClassInfo:
    name: str
    parent: Optional[str] = None
    variables: dict[str, str] = field(default_factory=dict)
    constructor: ConstructorInfo = field(default_factory=ConstructorInfo)
    methods: dict[str, MethodInfo] = field(default_factory=dict)
    line: int = 0
    col: int = 0

    @property
    def is_builtin(self) -> bool:
        return self.name in BUILTIN_CLASSES


@dataclass(frozen=True)
class Scope:
    """Checking context threaded through every recursive call.

    ``locals`` is shared by the statements of one block so that a
    declaration is visible to the statements after it; entering a nested
    block hands out a copy, so its declarations vanish on exit.
    """

    current_class: Optional[ClassInfo] = None
    return_type: Optional[str] = None
    in_body: bool = False
    in_loop: bool = False
    locals: dict[str, str] = field(default_factory=dict)

    def enter_block(self) -> Scope:
        return replace(self, locals=dict(self.locals))

    def enter_loop(self) -> Scope:
        return replace(self, in_loop=True)


class CheckerBase:
    def __init__(self):
        self.classes: dict[str, ClassInfo] = {}
        self.globals: dict[str, str] = {}

    def check(self, program: Program) -> bool:
        """Validate ``program``; raises a ``TypeError`` subclass on the first problem.

        Class members are checked before the top-level statements, so method
        and constructor bodies never see global variables.
        """
        self.globals = {}
        self.classes = self._collect_classes(program)
        self._validate_hierarchy()
        self._validate_overrides()
        for info in self.classes.values():
            if not info.is_builtin:
                self._check_class_members(info)
        top_level = Scope()
        for stmt in program.statements:
            self._check_stmt(stmt, top_level)
        return True
