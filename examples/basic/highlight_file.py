"""Highlight a Lua snippet as HTML with line numbers."""

from lexlua import LuaHighlighter
from lexlua.highlighting import style_classes

source = """\
--[[ Fibonacci
     the slow way ]]
local function fib(n)
  if n < 2 then return n end
  return fib(n - 1) + fib(n - 2)
end
print(fib(10), "done\\n")
"""

print(LuaHighlighter().highlight(source, "lua", show_linenos=True, hl_lines=[4]))
print()
print("Classes to style:", " ".join(style_classes()))
