"""Tokenize a few lines of script and print every token."""

from scriptlex import tokenize

for token in tokenize(";opening\n@bgm(school, loop)\nMIKU「おはよう」"):
    print(token)
