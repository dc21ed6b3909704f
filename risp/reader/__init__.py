from risp.reader.lexer import lex, tokenize
from risp.reader.parser import TokenStream, parse, read_all, read_atom
