"""Persist line-boundary state to JSON and resume tokenizing later."""

from lexlua import State, tokenize
from lexlua.profiling import profiled_tokenize
from lexlua.serialization import state_from_json, state_to_json

state = State.new()
with profiled_tokenize() as metrics:
    list(tokenize("local doc = [==[\n", state))

saved = state_to_json(state)
print("Saved state:", saved)

restored = state_from_json(saved)
for token in tokenize("]] is not the end ]==] .. 'x'", restored):
    print(token)

print("Resumed state closed:", not restored.pending)
print("Metrics:", metrics.summary())
