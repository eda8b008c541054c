"""Re-tokenize only the edited line and the lines whose entry state changed."""

from lexlua import State, tokenize_chunk

lines = [
    "local a = 1\n",
    "local s = 'text'\n",
    "print(a)\n",
    "return s\n",
]


def tokenize_all(lines: list[str]) -> tuple[list[list], list[State]]:
    """Tokenize every line, bookmarking the state each line starts from."""
    bookmarks: list[State] = []
    all_tokens = []
    state = State.new()
    for line in lines:
        bookmarks.append(state)
        tokens, state = tokenize_chunk(line, state)
        all_tokens.append(tokens)
    bookmarks.append(state)
    return all_tokens, bookmarks


all_tokens, bookmarks = tokenize_all(lines)

# User edits line 2 to open a long string
edited = 1
lines[edited] = "local s = [[text\n"

retokenized = 0
state = bookmarks[edited]
for index in range(edited, len(lines)):
    tokens, state = tokenize_chunk(lines[index], state)
    all_tokens[index] = tokens
    retokenized += 1
    if state == bookmarks[index + 1]:
        break  # downstream lines start from the same state as before
    bookmarks[index + 1] = state

print("Lines re-tokenized:", retokenized)
print("Line 3 is now:", all_tokens[2])
print("Still inside a long string at the end:", bookmarks[-1].pending)
