"""Statement dispatch and parsing.

Two statement forms are told apart by lookahead rather than by the grammar:
a leading type name, or an identifier followed by an identifier that is not
itself followed by ``=``, starts a variable declaration; an identifier
followed by ``=`` starts an assignment. Anything else is an expression
statement.
"""

from ..ast_nodes import (
    AssignStmt, BlockStmt, BreakStmt, ExprStmt, IfStmt, ReturnStmt,
    VarDecStmt, WhileStmt,
)
from ..tokens import TokenType


class StatementsMixin:

    def _parse_statements_until_close(self, what: str) -> list:
        """Parse statements up to and including the closing '}'."""
        stmts = []
        while not self._at_end() and not self._check(TokenType.R_CURLY_BRACKET):
            stmts.append(self._parse_statement())
        self._expect(TokenType.R_CURLY_BRACKET, f"'}}' after {what}")
        return stmts

    def _parse_statement(self):
        tok = self._peek()

        if tok.type == TokenType.L_CURLY_BRACKET:
            self._advance()
            stmts = self._parse_statements_until_close("block")
            return BlockStmt(statements=stmts, line=tok.line, col=tok.col)
        if tok.is_keyword("while"):
            return self._parse_while_stmt()
        if tok.is_keyword("break"):
            self._advance()
            self._expect(TokenType.SEMICOLON, "';' after 'break'")
            return BreakStmt(line=tok.line, col=tok.col)
        if tok.is_keyword("return"):
            return self._parse_return_stmt()
        if tok.is_keyword("if"):
            return self._parse_if_stmt()

        if self._is_var_dec_stmt_start():
            decl = self._parse_var_dec()
            self._expect(TokenType.SEMICOLON, "';' after variable declaration")
            return VarDecStmt(declaration=decl, line=tok.line, col=tok.col)

        if self._check(TokenType.IDENTIFIER) and self._check(TokenType.EQUALS, offset=1):
            name = self._advance().value
            self._advance()  # =
            value = self._parse_expr()
            self._expect(TokenType.SEMICOLON, "';' after assignment")
            return AssignStmt(variable=name, expression=value, line=tok.line, col=tok.col)

        expr = self._parse_expr()
        self._expect(TokenType.SEMICOLON, "';' after expression")
        return ExprStmt(expression=expr, line=tok.line, col=tok.col)

    def _is_var_dec_stmt_start(self) -> bool:
        if self._check(TokenType.TYPE):
            return True
        return (self._check(TokenType.IDENTIFIER)
                and self._check(TokenType.IDENTIFIER, offset=1)
                and not self._check(TokenType.EQUALS, offset=2))

    def _parse_while_stmt(self) -> WhileStmt:
        tok = self._expect_keyword("while")
        self._expect(TokenType.L_PAREN, "'(' after 'while'")
        condition = self._parse_expr()
        self._expect(TokenType.R_PAREN, "')' after condition")
        body = self._parse_statement_or_fail()
        return WhileStmt(condition=condition, body=body, line=tok.line, col=tok.col)

    def _parse_return_stmt(self) -> ReturnStmt:
        tok = self._expect_keyword("return")
        value = None
        if not self._check(TokenType.SEMICOLON):
            value = self._parse_expr()
        self._expect(TokenType.SEMICOLON, "';' after return value")
        return ReturnStmt(expression=value, line=tok.line, col=tok.col)

    def _parse_if_stmt(self) -> IfStmt:
        tok = self._expect_keyword("if")
        self._expect(TokenType.L_PAREN, "'(' after 'if'")
        condition = self._parse_expr()
        self._expect(TokenType.R_PAREN, "')' after condition")
        then_branch = self._parse_statement_or_fail()
        else_branch = None
        if self._check_keyword("else"):
            self._advance()
            else_branch = self._parse_statement_or_fail()
        return IfStmt(condition=condition, then_branch=then_branch,
                      else_branch=else_branch, line=tok.line, col=tok.col)

    def _parse_statement_or_fail(self):
        if self._at_end():
            raise self._error("Expected statement")
        return self._parse_statement()
