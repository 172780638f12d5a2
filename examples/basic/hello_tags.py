"""Tokenize a tag and print each token as it is pulled."""

from taglex import new_lexer

lexer, stream = new_lexer("<greeting   />")
for token in stream:
    print(token.kind.name, repr(token.value))
