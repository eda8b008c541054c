"""State and token serialization — JSON round-trip for lexlua values.

Converts continuation states to/from JSON-compatible dicts so a
surrounding tool (an editor, a build cache) can persist the state at each
line boundary and resume tokenizing later. Tokens serialize one way, for
debugging and inspection.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from lexlua import State, tokenize
    from lexlua.serialization import state_from_json, state_to_json

    state = State.new()
    list(tokenize("--[==[ open", state))
    saved = state_to_json(state)
    assert state_from_json(saved) == state

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from lexlua.state import MultilineKind, State
from lexlua.tokens import Token

_STATE_FIELDS = ("multiline_kind", "bracket_level", "quote")


def state_to_dict(state: State) -> dict[str, Any]:
    """Convert a State to a JSON-compatible dict.

    Includes a ``_type`` discriminator field. Unset fields are None.

    Args:
        state: Continuation state to serialize.

    Returns:
        Dict with ``_type`` and all state fields.

    """
    kind = state.multiline_kind
    return {
        "_type": "State",
        "multiline_kind": kind.value if kind is not None else None,
        "bracket_level": state.bracket_level,
        "quote": state.quote,
    }


def state_from_dict(data: dict[str, Any]) -> State:
    """Reconstruct a State from a dict.

    Missing fields are treated as unset.

    Args:
        data: Dict as produced by state_to_dict.

    Returns:
        Validated State.

    Raises:
        ValueError: If ``_type`` is wrong or a field value is unknown.
        StateError: If the fields break the continuation invariant.

    """
    type_name = data.get("_type")
    if type_name != "State":
        msg = f"Expected serialized State, got _type={type_name!r}"
        raise ValueError(msg)

    unknown = set(data) - {"_type", *_STATE_FIELDS}
    if unknown:
        msg = f"Unknown State fields: {sorted(unknown)}"
        raise ValueError(msg)

    raw_kind = data.get("multiline_kind")
    try:
        kind = MultilineKind(raw_kind) if raw_kind is not None else None
    except ValueError:
        msg = f"Unknown multiline_kind: {raw_kind!r}"
        raise ValueError(msg) from None

    state = State(
        multiline_kind=kind,
        bracket_level=data.get("bracket_level"),
        quote=data.get("quote"),
    )
    state.validate()
    return state


def state_to_json(state: State, *, indent: int | None = None) -> str:
    """Serialize a State to a JSON string.

    Args:
        state: State to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(state_to_dict(state), sort_keys=True, indent=indent)


def state_from_json(data: str) -> State:
    """Deserialize a State from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a State.
        StateError: If the fields break the continuation invariant.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    return state_from_dict(raw)


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a Token to a JSON-compatible dict."""
    return {
        "text": token.text,
        "kind": token.kind.value,
        "sub_kind": token.sub_kind.value if token.sub_kind is not None else None,
    }


def tokens_to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string.

    Consumes the iterable; pass a list to keep the tokens.
    """
    return json.dumps([token_to_dict(t) for t in tokens], sort_keys=True, indent=indent)
