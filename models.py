from enum import IntEnum
from pydantic import BaseModel, ConfigDict
from typing import Any, Literal, Optional

class TokenType(IntEnum):
    BEGIN = 1
    END = 2
    INTEGER = 3
    IF = 4
    THEN = 5
    ELSE = 6
    FUNCTION = 7
    READ = 8
    WRITE = 9
    IDENTIFIER = 10
    CONSTANT = 11
    EQUAL = 12
    NOT_EQUAL = 13
    LESS_THAN_OR_EQUAL = 14
    LESS_THAN = 15
    GREATER_THAN_OR_EQUAL = 16
    GREATER_THAN = 17
    SUBTRACT = 18
    MULTIPLY = 19
    ASSIGN = 20
    LEFT_PARENTHESES = 21
    RIGHT_PARENTHESES = 22
    SEMICOLON = 23
    END_OF_LINE = 24
    END_OF_FILE = 25

class Token(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: TokenType
    value: str

class ScanError(BaseModel):
    """A line-tagged lexical diagnostic; msg already carries the 'Line <n>: ' prefix."""
    model_config = ConfigDict(frozen=True)
    line: int
    code: str
    msg: str

class ApiErr(BaseModel):
    ok: Literal[False] = False
    phase: Literal["lex","gateway"]
    line: Optional[int] = None
    code: str
    msg: str

class ApiOk(BaseModel):
    ok: Literal[True] = True
    data: Any
