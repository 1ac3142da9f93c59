"""Parser: токенизация и рекурсивный спуск для выражений с размерностями.

- tokenize: строка → токены с позициями, смешанные числа "1 1/2"
- Parser: грамматика + два канала ошибок (syntax / math)
- parse: удобная обёртка, возвращает Value или бросает ошибку
"""

from .parser import Parser, parse
from .tokenizer import Token, TokenKind, tokenize

__all__ = [
    "Parser",
    "parse",
    "Token",
    "TokenKind",
    "tokenize",
]
