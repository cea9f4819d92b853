from seedgraph.parser import parse
from seedgraph.render import render


def render_text(text: str, **kwargs) -> str:
    roots, arena = parse(text)
    return render(roots, arena, **kwargs)


def test_example():
    out = render_text('(add (mul 2 3) "x")')
    assert out == (
        "digraph {\n"
        "\tsubgraph cluster0 {\n"
        '\t\tn0 [label="add"];\n'
        '\t\tn1 [label="mul"];\n'
        "\t\tn0 -> n1;\n"
        '\t\tn2 [label="2"];\n'
        "\t\tn1 -> n2;\n"
        '\t\tn4 [label="3"];\n'
        "\t\tn1 -> n4;\n"
        '\t\tn7 [label="x"];\n'
        "\t\tn0 -> n7;\n"
        "\t}\n"
        "}\n"
    )


def test_example_counts():
    lines = render_text('(add (mul 2 3) "x")').splitlines()
    assert sum(1 for line in lines if "[label=" in line) == 5
    assert sum(1 for line in lines if "->" in line) == 4
    assert sum(1 for line in lines if line.strip().startswith("subgraph")) == 1


def test_ids_unique_across_clusters():
    out = render_text("(a) (b c)")
    assert out == (
        "digraph {\n"
        "\tsubgraph cluster0 {\n"
        '\t\tn0 [label="a"];\n'
        "\t}\n"
        "\tsubgraph cluster1 {\n"
        '\t\tn2 [label="b"];\n'
        '\t\tn3 [label="c"];\n'
        "\t\tn2 -> n3;\n"
        "\t}\n"
        "}\n"
    )


def test_empty_form_emits_nothing():
    assert render_text("()") == "digraph {\n\tsubgraph cluster0 {\n\t}\n}\n"


def test_empty_child_still_advances_ids():
    out = render_text("(a () b)")
    assert '\t\tn2 [label="b"];\n' in out
    assert "\t\tn0 -> n2;\n" in out
    assert out.count("[label=") == 2


def test_no_roots():
    assert render_text("") == "digraph {\n}\n"


def test_title_and_indent():
    out = render_text("(a)", title="digraph G", indent=1)
    assert out == (
        "\tdigraph G {\n"
        "\t\tsubgraph cluster0 {\n"
        '\t\t\tn0 [label="a"];\n'
        "\t\t}\n"
        "\t}\n"
    )


def test_label_escapes_double_quote():
    out = render_text("(a 'say \"hi\"')")
    assert '\t\tn1 [label="say \\"hi\\""];\n' in out


def test_deterministic():
    roots, arena = parse("(a (b 'c d') e) () (f (g (h)))")
    assert render(roots, arena) == render(roots, arena)


def test_preorder():
    out = render_text("(a (b c) (d e))")
    labels = [line.split('"')[1] for line in out.splitlines() if "[label=" in line]
    assert labels == ["a", "b", "c", "d", "e"]


def test_label_escapes_trailing_backslash():
    out = render_text("(f 'C:\\')")
    assert '\t\tn1 [label="C:\\\\"];\n' in out


def test_label_escapes_backslash_in_identifier():
    out = render_text("(a\\ b\\c)")
    assert '\t\tn0 [label="a\\\\"];\n' in out
    assert '\t\tn1 [label="b\\\\c"];\n' in out


def test_deep_nesting_ids():
    depth = 5000
    out = render_text("(a " * depth + ")" * depth)
    lines = out.splitlines()
    assert lines[2] == '\t\tn0 [label="a"];'
    assert lines[3] == '\t\tn1 [label="a"];'
    assert lines[4] == "\t\tn0 -> n1;"
    assert lines[-3] == f"\t\tn{depth - 2} -> n{depth - 1};"
    assert out.count("[label=") == depth
