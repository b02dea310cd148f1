"""Recursive descent parser for the tinyclass language."""

from .parser import Parser as Parser, ParseError as ParseError
