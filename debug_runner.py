import sys
from seedgraph.tokenizer import tokenize, tokens_debug
from seedgraph.parser import parse
from seedgraph.debug_ast import render_tree
from seedgraph.render import render
from seedgraph.errors import SeedError
from runner import read_source

if __name__ == "__main__":
    args = sys.argv
    if len(args) > 1:
        try:
            text = read_source(args[1])
            print(tokens_debug(text, tokenize(text)))
            print()
            roots, arena = parse(text)
            print(f"parsed: \n{render_tree(roots, arena)}")
            print()
            print(render(roots, arena), end="")
        except SeedError as e:
            print(f"error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print("No file.")
