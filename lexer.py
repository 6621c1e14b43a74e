from fastapi import FastAPI
from pydantic import BaseModel
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union
from models import Token, TokenType, ScanError, ApiOk
from cursor import Cursor
from log import get_logger
import string

app = FastAPI(title="lexer-svc")
log = get_logger("lexer-svc")

MAX_IDENTIFIER_LENGTH = 16
LETTERS = set(string.ascii_letters)
DIGITS = set(string.digits)

KEYWORDS = {
    "begin": TokenType.BEGIN, "end": TokenType.END, "integer": TokenType.INTEGER,
    "if": TokenType.IF, "then": TokenType.THEN, "else": TokenType.ELSE,
    "function": TokenType.FUNCTION, "read": TokenType.READ, "write": TokenType.WRITE,
}

SINGLE = {
    "=": TokenType.EQUAL, "-": TokenType.SUBTRACT, "*": TokenType.MULTIPLY,
    "(": TokenType.LEFT_PARENTHESES, ")": TokenType.RIGHT_PARENTHESES, ";": TokenType.SEMICOLON,
}

@app.get("/healthz")
def healthz():
    return {"ok":True}

class LexReq(BaseModel):
    source: str

class Lexer:
    """Scans one source; owns the cursor and the current line number."""

    def __init__(self, chars: Sequence[str]):
        self.cursor = Cursor(chars, "")
        self.line = 1

    def error(self, code: str, msg: str) -> ScanError:
        return ScanError(line=self.line, code=code, msg=f"Line {self.line}: {msg}")

    def next_token(self) -> Optional[Union[Token, ScanError]]:
        """Scan one lexeme. Returns None only when nothing but spaces was left."""
        c = self.cursor
        while c.current == " ":
            c.consume()
        if not c.is_open():
            return None

        initial = c.consume()

        if initial in LETTERS:
            value = initial
            while c.current in LETTERS or c.current in DIGITS:
                value += c.consume()
            kw = KEYWORDS.get(value.lower())
            if kw is not None:
                return Token(type=kw, value=value)
            if len(value) <= MAX_IDENTIFIER_LENGTH:
                return Token(type=TokenType.IDENTIFIER, value=value)
            return self.error("E_LEX_IDENT_TOO_LONG",
                              f"Identifier name '{value}' exceeds {MAX_IDENTIFIER_LENGTH} characters")

        if initial in DIGITS:
            value = initial
            while c.current in DIGITS:
                value += c.consume()
            return Token(type=TokenType.CONSTANT, value=value)

        if initial in SINGLE:
            return Token(type=SINGLE[initial], value=initial)

        if initial == "<":
            if c.current == "=":
                c.consume(); return Token(type=TokenType.LESS_THAN_OR_EQUAL, value="<=")
            if c.current == ">":
                c.consume(); return Token(type=TokenType.NOT_EQUAL, value="<>")
            return Token(type=TokenType.LESS_THAN, value="<")

        if initial == ">":
            if c.current == "=":
                c.consume(); return Token(type=TokenType.GREATER_THAN_OR_EQUAL, value=">=")
            return Token(type=TokenType.GREATER_THAN, value=">")

        if initial == ":":
            if c.current == "=":
                c.consume(); return Token(type=TokenType.ASSIGN, value=":=")
            return self.error("E_LEX_MISUSED_COLON", "Misused colon")

        if initial == "\n":
            self.line += 1
            return Token(type=TokenType.END_OF_LINE, value="EOLN")

        return self.error("E_LEX_BAD_CHAR", f"Invalid character '{initial}'")

def tokenize(chars: Sequence[str], on_token: Callable[[Token], None],
             on_error: Callable[[ScanError], None]) -> bool:
    """Drive the lexer to the end of input, then emit EOF. True iff no diagnostics."""
    lx = Lexer(chars)
    ntok = nerr = 0
    while lx.cursor.is_open():
        r = lx.next_token()
        if r is None:
            continue
        if isinstance(r, ScanError):
            log.debug("diagnostic: %s", r.msg)
            on_error(r); nerr += 1
        else:
            on_token(r); ntok += 1
    on_token(Token(type=TokenType.END_OF_FILE, value="EOF"))
    log.info("scanned %d chars: %d tokens, %d diagnostics", len(chars), ntok + 1, nerr)
    return nerr == 0

def scan(source: str) -> Tuple[List[Token], List[ScanError], bool]:
    tokens: List[Token] = []; errors: List[ScanError] = []
    ok = tokenize(source, tokens.append, errors.append)
    return tokens, errors, ok

def format_token(tok: Token) -> str:
    return f"{tok.value:>16} {int(tok.type):02d}\n"

def format_error(err: ScanError) -> str:
    return f"{err.msg}\n"

def render(tokens: Iterable[Token], errors: Iterable[ScanError]) -> Tuple[str, str]:
    """Both streams in their on-disk text form (.dyd, .err)."""
    return "".join(map(format_token, tokens)), "".join(map(format_error, errors))

@app.post("/lex")
def lex(req: LexReq):
    tokens, errors, ok = scan(req.source.strip())
    return ApiOk(data={
        "tokens": [t.model_dump(mode="json") for t in tokens],
        "errors": [e.model_dump(mode="json") for e in errors],
        "success": ok,
    })
