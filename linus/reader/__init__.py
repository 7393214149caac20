from linus.reader.lexer import Lexer, tokenize
from linus.reader.parser import Parser, parse
from linus.reader.tokens import Token, TokenType
