"""Expression parsing: two left-associative precedence tiers over call chains.

Comparison and logical tokens are produced by the lexer but no rule here
consumes them; meeting one in expression position is a parse failure.
"""

from ..ast_nodes import (
    BinaryExpr, CallExpr, LiteralExpr, NewExpr, PrintlnExpr, ThisExpr,
    VariableExpr,
)
from ..tokens import TokenType


class ExpressionsMixin:

    def _parse_expr(self):
        return self._parse_additive()

    def _parse_additive(self):
        left = self._parse_multiplicative()
        while self._check_op("+", "-"):
            op = self._advance().value
            right = self._parse_multiplicative()
            left = BinaryExpr(left=left, operator=op, right=right,
                              line=left.line, col=left.col)
        return left

    def _parse_multiplicative(self):
        left = self._parse_call()
        while self._check_op("*", "/"):
            op = self._advance().value
            right = self._parse_call()
            left = BinaryExpr(left=left, operator=op, right=right,
                              line=left.line, col=left.col)
        return left

    def _parse_call(self):
        expr = self._parse_primary()
        while self._check(TokenType.DOT):
            dot = self._advance()
            method = self._expect(TokenType.IDENTIFIER, "method name after '.'").value
            args = self._parse_arguments()
            expr = CallExpr(object=expr, method=method, args=args,
                            line=dot.line, col=dot.col)
        return expr

    def _parse_arguments(self) -> list:
        self._expect(TokenType.L_PAREN, "'('")
        args = []
        if not self._check(TokenType.R_PAREN):
            args.append(self._parse_expr())
            while self._match(TokenType.COMMA):
                args.append(self._parse_expr())
        self._expect(TokenType.R_PAREN, "')' after arguments")
        return args

    def _parse_primary(self):
        tok = self._peek()
        if tok is None:
            raise self._error("Expected expression")

        if tok.type == TokenType.IDENTIFIER:
            self._advance()
            if tok.value == "this":
                return ThisExpr(line=tok.line, col=tok.col)
            return VariableExpr(name=tok.value, line=tok.line, col=tok.col)

        if tok.type == TokenType.STRING_LITERAL:
            self._advance()
            return LiteralExpr(value=tok.value, value_type="string",
                               line=tok.line, col=tok.col)

        if tok.type == TokenType.INTEGER_LITERAL:
            self._advance()
            return LiteralExpr(value=int(tok.value), value_type="int",
                               line=tok.line, col=tok.col)

        if tok.is_keyword("true") or tok.is_keyword("false"):
            self._advance()
            return LiteralExpr(value=tok.value == "true", value_type="boolean",
                               line=tok.line, col=tok.col)

        if tok.is_keyword("println"):
            self._advance()
            self._expect(TokenType.L_PAREN, "'(' after 'println'")
            argument = self._parse_expr()
            self._expect(TokenType.R_PAREN, "')' after argument")
            return PrintlnExpr(argument=argument, line=tok.line, col=tok.col)

        if tok.is_keyword("new"):
            self._advance()
            class_name = self._expect(TokenType.IDENTIFIER, "class name after 'new'").value
            args = self._parse_arguments()
            return NewExpr(class_name=class_name, args=args, line=tok.line, col=tok.col)

        if tok.type == TokenType.L_PAREN:
            self._advance()
            expr = self._parse_expr()
            self._expect(TokenType.R_PAREN, "')' after expression")
            return expr

        raise self._error("Unexpected token")
