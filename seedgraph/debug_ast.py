# debug_ast.py
from __future__ import annotations
from .nodes import Arena, Empty, Identifier, List, String


def render_tree(roots: list[int], arena: Arena, *, show_handles: bool = True) -> str:
    lines: list[str] = []
    # (handle, prefix, is_last), popped in pre-order
    pending = [(root, "", i == len(roots) - 1) for i, root in enumerate(roots)]
    pending.reverse()
    while pending:
        handle, prefix, is_last = pending.pop()
        branch = "└─ " if is_last else "├─ "
        lines.append(prefix + branch + _label(handle, arena, show_handles))

        node = arena[handle]
        if not isinstance(node, List):
            continue
        child_prefix = prefix + ("   " if is_last else "│  ")
        last = len(node.children) - 1
        for i in reversed(range(len(node.children))):
            pending.append((node.children[i], child_prefix, i == last))
    return "\n".join(lines)


def _label(handle: int, arena: Arena, show_handles: bool) -> str:
    match arena[handle]:
        case List(op=op):
            text = f"List {op.raw!r}"
        case Identifier(tok=tok):
            text = f"Identifier {tok.raw!r}"
        case String(tok=tok):
            text = f"String {tok.raw!r}"
        case Empty():
            text = "Empty"
    if show_handles:
        return f"{text} #{handle}"
    return text
