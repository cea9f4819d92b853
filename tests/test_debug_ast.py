from seedgraph.parser import parse
from seedgraph.debug_ast import render_tree


def test_render_tree():
    roots, arena = parse('(add (mul 2 3) "x")')
    assert render_tree(roots, arena).splitlines() == [
        "└─ List 'add' #4",
        "   ├─ List 'mul' #2",
        "   │  ├─ Identifier '2' #0",
        "   │  └─ Identifier '3' #1",
        "   └─ String 'x' #3",
    ]


def test_render_tree_many_roots():
    roots, arena = parse("(a) ()")
    assert render_tree(roots, arena, show_handles=False).splitlines() == [
        "├─ List 'a'",
        "└─ Empty",
    ]


def test_render_tree_deep():
    depth = 3000
    roots, arena = parse("(a " * depth + ")" * depth)
    lines = render_tree(roots, arena, show_handles=False).splitlines()
    assert len(lines) == depth
    assert lines[0] == "└─ List 'a'"
    assert lines[-1] == " " * (3 * (depth - 1)) + "└─ List 'a'"
