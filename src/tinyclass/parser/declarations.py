"""Class, constructor, method and variable declaration parsing."""

from ..ast_nodes import ClassDef, Constructor, MethodDef, SuperCall, VarDec
from ..tokens import TokenType


class DeclarationsMixin:

    def _parse_class_def(self) -> ClassDef:
        tok = self._expect_keyword("class")
        name = self._expect(TokenType.IDENTIFIER, "class name").value

        parent = None
        if self._check_keyword("extends"):
            self._advance()
            parent = self._expect(TokenType.IDENTIFIER, "parent class name").value

        self._expect(TokenType.L_CURLY_BRACKET, "'{' after class declaration")

        variables = []
        while self._is_var_dec_start():
            variables.append(self._parse_var_dec())
            self._expect(TokenType.SEMICOLON, "';' after variable declaration")

        constructor = None
        if self._check_keyword("init"):
            constructor = self._parse_constructor()

        methods = []
        while self._check_keyword("method"):
            methods.append(self._parse_method_def())

        self._expect(TokenType.R_CURLY_BRACKET, "'}' after class body")
        return ClassDef(name=name, parent=parent, variables=variables,
                        constructor=constructor, methods=methods,
                        line=tok.line, col=tok.col)

    def _is_var_dec_start(self) -> bool:
        if self._check(TokenType.TYPE):
            return True
        return (self._check(TokenType.IDENTIFIER)
                and self._check(TokenType.IDENTIFIER, offset=1))

    def _parse_var_dec(self) -> VarDec:
        type_tok = self._expect_type_name("type")
        name = self._expect(TokenType.IDENTIFIER, "variable name").value
        return VarDec(var_type=type_tok.value, name=name,
                      line=type_tok.line, col=type_tok.col)

    def _parse_parameters(self) -> list[VarDec]:
        self._expect(TokenType.L_PAREN, "'('")
        params = []
        if not self._check(TokenType.R_PAREN):
            params.append(self._parse_var_dec())
            while self._match(TokenType.COMMA):
                params.append(self._parse_var_dec())
        self._expect(TokenType.R_PAREN, "')' after parameters")
        return params

    def _parse_constructor(self) -> Constructor:
        tok = self._expect_keyword("init")
        params = self._parse_parameters()
        self._expect(TokenType.L_CURLY_BRACKET, "'{' after constructor parameters")

        super_call = None
        if self._check_keyword("super"):
            super_tok = self._advance()
            args = self._parse_arguments()
            self._expect(TokenType.SEMICOLON, "';' after super call")
            super_call = SuperCall(arguments=args, line=super_tok.line, col=super_tok.col)

        statements = self._parse_statements_until_close("constructor body")
        return Constructor(parameters=params, super_call=super_call,
                           statements=statements, line=tok.line, col=tok.col)

    def _parse_method_def(self) -> MethodDef:
        tok = self._expect_keyword("method")
        name = self._expect(TokenType.IDENTIFIER, "method name").value
        params = self._parse_parameters()
        return_type = self._expect_type_name("return type").value
        self._expect(TokenType.L_CURLY_BRACKET, "'{' after method declaration")
        statements = self._parse_statements_until_close("method body")
        return MethodDef(name=name, parameters=params, return_type=return_type,
                         statements=statements, line=tok.line, col=tok.col)
