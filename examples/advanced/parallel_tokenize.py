"""Free-threading safe — tokenize 1000 chunks in parallel."""

from concurrent.futures import ThreadPoolExecutor

from lexlua import tokenize_chunk

chunks = [f"local v{i} = [[value {i}]] -- entry {i}\n" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenize_chunk, chunks))

print(f"Tokenized {len(results)} chunks in parallel")
print("Tokens in first chunk:", len(results[0][0]))
print("Any chunk left open:", any(state.pending for _, state in results))
