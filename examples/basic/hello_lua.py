"""Tokenize a line of Lua and print each classification."""

from lexlua import tokenize

for token in tokenize("local greeting = 'hello' .. name -- say hi"):
    print(token)
