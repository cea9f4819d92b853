from dataclasses import dataclass, field
from typing import Iterator
from .tokenizer import Token


@dataclass(frozen=True)
class List:
    op: Token
    children: tuple[int, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Identifier:
    tok: Token


@dataclass(frozen=True)
class String:
    tok: Token


@dataclass(frozen=True)
class Empty:
    pass


type Node = List | Identifier | String | Empty


class Arena:
    """
    Append-only store of every node in a parse. Nodes refer to each other
    by index into the arena, and an index stays valid for the arena's
    whole lifetime since nothing is ever removed or reordered.
    """

    nodes: list[Node]

    def __init__(self):
        self.nodes = []

    def add(self, node: Node) -> int:
        self.nodes.append(node)
        return len(self.nodes) - 1

    def __getitem__(self, handle: int) -> Node:
        return self.nodes[handle]

    def __len__(self):
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)
