from .tokenizer import Lexer, Token, TokenType
from .nodes import Arena, Empty, Identifier, List, String
from .errors import ParseError


class Parser:
    """
    expr = "(" ")"
         | "(" ( <ident> | <string> ) { expr | <ident> | <string> } ")"
    program = { expr } <eof>
    """

    lexer: Lexer
    arena: Arena

    def __init__(self, lexer: Lexer, arena: Arena):
        self.lexer = lexer
        self.arena = arena

    def at(self, kind: TokenType) -> bool:
        return self.lexer.at(kind)

    def expect(self, kind: TokenType, msg: str) -> Token:
        tok = self.lexer.advance()
        if tok.kind != kind:
            raise ParseError(msg, self.lexer.position())
        return tok

    def open_form(self, stack: list[tuple[Token, list[int]]]) -> int | None:
        """
        Consume "(" and the operator. `()` is finished on the spot and its
        handle returned; otherwise the form is pushed onto `stack` to
        collect children and None is returned.
        """
        _ = self.expect(TokenType.OpenParen, "expected `(`")

        op = self.lexer.advance()
        match op.kind:
            case TokenType.CloseParen:
                return self.arena.add(Empty())
            case TokenType.Ident | TokenType.String:
                stack.append((op, []))
                return None
            case _:
                raise ParseError(
                    "expected identifier or string", self.lexer.position()
                )

    def parse_expr(self) -> int:
        # open forms are kept on an explicit stack so nesting depth is not
        # limited by the interpreter's recursion limit
        stack: list[tuple[Token, list[int]]] = []
        handle = self.open_form(stack)
        while True:
            if handle is not None:
                if not stack:
                    return handle
                stack[-1][1].append(handle)
                handle = None

            match self.lexer.peek().kind:
                case TokenType.OpenParen:
                    handle = self.open_form(stack)
                case TokenType.Ident:
                    handle = self.arena.add(Identifier(self.lexer.advance()))
                case TokenType.String:
                    handle = self.arena.add(String(self.lexer.advance()))
                case _:
                    _ = self.expect(TokenType.CloseParen, "expected `)`")
                    op, children = stack.pop()
                    handle = self.arena.add(List(op, tuple(children)))

    def parse(self) -> list[int]:
        roots: list[int] = []
        while not self.at(TokenType.Eof):
            roots.append(self.parse_expr())
        return roots


def parse(text: str) -> tuple[list[int], Arena]:
    arena = Arena()
    parser = Parser(Lexer(text), arena)
    roots = parser.parse()
    return roots, arena
