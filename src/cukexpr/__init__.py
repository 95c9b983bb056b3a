from .error import (
    CucumberExpressionError,
    ExpressionSyntaxError,
    InvalidNodeError,
    SyntaxErrorKind,
)
from .lexer import Token, TokenType, tokenize
from .node import Node, NodeType
from .parser import parse
from .visitor import ASTVisitor

__all__ = [
    "ASTVisitor",
    "CucumberExpressionError",
    "ExpressionSyntaxError",
    "InvalidNodeError",
    "Node",
    "NodeType",
    "SyntaxErrorKind",
    "Token",
    "TokenType",
    "parse",
    "tokenize",
]
