from typing import Iterator, Optional
from .nodes import Arena, Empty, Identifier, List, Node, String


class Counter:
    value: int

    def __init__(self):
        self.value = 0

    def take(self) -> int:
        tmp = self.value
        self.value += 1
        return tmp

    def bump(self):
        self.value += 1


def tabs(n: int) -> str:
    return "\t" * n


def label(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def emit(out: list[str], indent: int, text: str, self_id: int, parent_id: Optional[int]):
    out.append(f'{tabs(indent)}n{self_id} [label="{label(text)}"];\n')
    if parent_id is not None:
        out.append(f"{tabs(indent)}n{parent_id} -> n{self_id};\n")


def render_nodes(node: Node, arena: Arena, out: list[str], indent: int,
                 parent_id: Optional[int], counter: Counter):
    """
    Pre-order walk from `node`. Lists still being visited sit on an explicit
    stack as (id, remaining children), so depth is not bounded by recursion.
    The counter advances once more after each child's subtree is done.
    """
    stack: list[tuple[int, Iterator[int]]] = []

    def visit(node: Node, parent_id: Optional[int]) -> bool:
        match node:
            case List(op=op, children=children):
                self_id = counter.take()
                emit(out, indent, op.raw, self_id, parent_id)
                stack.append((self_id, iter(children)))
                return True
            case Identifier(tok=tok) | String(tok=tok):
                emit(out, indent, tok.raw, counter.take(), parent_id)
            case Empty():
                pass
        return False

    _ = visit(node, parent_id)
    while stack:
        self_id, children = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            if stack:
                counter.bump()
            continue
        if not visit(arena[child], self_id):
            counter.bump()


def render_cluster(node: Node, arena: Arena, out: list[str], counter: Counter,
                   title: str = "subgraph", indent: int = 0):
    out.append(f"{tabs(indent)}{title} {{\n")
    render_nodes(node, arena, out, indent + 1, None, counter)
    counter.bump()
    out.append(f"{tabs(indent)}}}\n")


def render(roots: list[int], arena: Arena, title: str = "digraph", indent: int = 0) -> str:
    """
    Render the forest as a graph description, one cluster per top-level
    form. Node ids come from a single counter shared by every cluster, so
    they are unique across the whole output.
    """
    counter = Counter()
    out: list[str] = [f"{tabs(indent)}{title} {{\n"]
    for graph_id, root in enumerate(roots):
        render_cluster(arena[root], arena, out, counter,
                       f"subgraph cluster{graph_id}", indent + 1)
    out.append(f"{tabs(indent)}}}\n")
    return "".join(out)
