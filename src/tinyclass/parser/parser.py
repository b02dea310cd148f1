"""Parser assembly: combines all parsing mixins into the final Parser class."""

from ..errors import ParseError
from .core import ParserBase
from .declarations import DeclarationsMixin
from .statements import StatementsMixin
from .expressions import ExpressionsMixin


class Parser(
    ExpressionsMixin,
    StatementsMixin,
    DeclarationsMixin,
    ParserBase,
):
    """Recursive descent parser for the tinyclass language."""
    pass


__all__ = ["Parser", "ParseError"]
