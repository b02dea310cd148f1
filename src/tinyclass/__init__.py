"""tinyclass: a compiler from a small class-based language to JavaScript."""

__version__ = "0.1.0"

from .errors import (  # noqa: E402
    CompilerError as CompilerError,
    ParseError as ParseError,
    CodegenError as CodegenError,
    TypeError as TypeError,
)
from .pipeline import (  # noqa: E402
    CompileResult as CompileResult,
    compile_source as compile_source,
    tokenize as tokenize,
    parse as parse,
    check as check,
    generate as generate,
)
