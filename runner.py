import sys
from pathlib import Path
from seedgraph.errors import SeedError, SourceError
from seedgraph.parser import parse
from seedgraph.render import render

USAGE = "usage: seedgraph <file>"
EXIT_ERROR = 1
EXIT_USAGE = 2


def read_source(fname: str) -> str:
    path = Path(fname)
    if not path.exists():
        raise SourceError(f"file `{fname}` does not exist")
    try:
        # bytes first: text mode would fold \r\n and lone \r into \n
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"file `{fname}` could not be read: {e}") from e


def run(fname: str) -> str:
    text = read_source(fname)
    roots, arena = parse(text)
    return render(roots, arena)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv if argv is None else argv
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE
    try:
        out = run(args[1])
    except SeedError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR
    sys.stdout.write(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
