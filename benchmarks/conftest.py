"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_source() -> str:
    """Generate a large Lua source file (~100KB)."""
    sections = []
    for i in range(400):
        sections.append(f"""
--[[ Section {i}
     documented the long way ]]
local function handler_{i}(event, ...)
  local name = event.name or "anon_{i}"
  if name ~= 'skip' and #... >= 2 then
    return string.format("%s:%d\\n", name, 0x{i:x} + {i}.5e-3)
  end
  local blob = [==[raw {i} ]] still raw]==]
  return blob .. name -- trailing note
end
""")
    return "".join(sections)


@pytest.fixture
def real_world_lines() -> list[str]:
    """Individual lines as an editor would re-tokenize them."""
    return [
        "local x = 1\n",
        "for i, v in ipairs(t) do\n",
        "  print(('%d: %s'):format(i, v))\n",
        "--[[ begin a long comment\n",
        "local s = 'continued \\\n",
        "::continue:: goto continue\n",
        "return a // b << 2 ~= c\n",
    ]
