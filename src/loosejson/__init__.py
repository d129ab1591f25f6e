"""
Lenient recursive-descent JSON parser.

Accepts JSON extended with ``//`` line comments, optional and trailing commas,
numbers with a leading ``+`` or ``.``, and the ``\\a`` and ``\\0`` string
escapes. ``parse`` reports failures as a value; ``loads`` and ``load`` raise.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import IO
from typing import Any
from typing import Final
from typing import TypeAlias

from ._cursor import Cursor
from ._cursor import context_window
from ._profiling import HotPathStats
from ._profiling import ProfileContext
from ._profiling import clear_hot_path_stats
from ._profiling import get_hot_path_stats

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

# Type aliases for domain concepts - recursive definition
JsonValue = (
    str | float | bool | None | dict[str, "JsonValue"] | list["JsonValue"]
)
Position: TypeAlias = int

# Union type for values that might be transformed by hooks
JsonValueOrTransformed = JsonValue | Any

# Hook type definitions - hooks can return custom types
ObjectHook = Callable[[dict[str, JsonValue]], Any] | None
ObjectPairsHook = (
    Callable[[list[tuple[str, JsonValueOrTransformed]]], Any] | None
)
ParseFloatHook = Callable[[str], Any] | None

DEFAULT_MAX_DEPTH: Final = 256

_NUMBER_START: Final = frozenset("+-.0123456789")
_NUMBER_CHARS: Final = frozenset("0123456789.-+eE")
_NUMBER_TERMINATORS: Final = frozenset(",]}")
_HEX_DIGITS: Final = frozenset("0123456789abcdefABCDEF")

_SIMPLE_ESCAPES: Final = {
    "\\": "\\",
    '"': '"',
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
}

_LITERALS: Final[dict[str, tuple[str, bool | None]]] = {
    "t": ("true", True),
    "f": ("false", False),
    "n": ("null", None),
}


class ErrorKind(Enum):
    """Machine-checkable category of a parse failure."""

    UNEXPECTED_END = "unexpected_end"
    UNEXPECTED_TOKEN = "unexpected_token"
    BAD_ESCAPE = "bad_escape"
    BAD_NUMBER = "bad_number"
    UNTERMINATED_STRING = "unterminated_string"
    MISSING_DELIMITER = "missing_delimiter"
    NESTING_TOO_DEEP = "nesting_too_deep"
    EXTRA_DATA = "extra_data"


class ParseError(ValueError):
    """
    Describes where and why parsing stopped.

    ``msg`` holds the bare reason, ``context`` the text surrounding the
    failure position. The string form embeds both:
    ``Error while parsing: <msg>; context = <<context>>``.
    """

    def __init__(
        self,
        msg: str,
        doc: str = "",
        pos: Position = 0,
        kind: ErrorKind = ErrorKind.UNEXPECTED_TOKEN,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.doc = doc
        self.pos = pos
        self.kind = kind

        # "\r\n", "\r" and "\n" each end one line
        prefix = doc[:pos]
        self.lineno = (
            prefix.count("\n") + prefix.count("\r") - prefix.count("\r\n") + 1
        )
        self.colno = pos - max(prefix.rfind("\n"), prefix.rfind("\r"))
        self.context = context_window(doc, pos)

        super().__init__(
            f"Error while parsing: {msg}; context = <{self.context}>"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.msg, self.doc, self.pos, self.kind)


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a single ``parse`` call.

    Exactly one of ``value`` (on success) and ``error`` (on failure) is
    meaningful; ``value`` is ``None`` for a failure.
    """

    value: JsonValueOrTransformed = None
    error: ParseError | None = None

    @classmethod
    def success(cls, value: JsonValueOrTransformed) -> "ParseResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ParseError) -> "ParseResult":
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def unwrap(self) -> JsonValueOrTransformed:
        """Returns the parsed value or raises the stored ``ParseError``."""
        if self.error is not None:
            raise self.error
        return self.value


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``strict`` rejects anything but whitespace and comments after the first
    value. ``max_depth`` bounds container nesting; input that exhausts the
    interpreter stack first also fails with ``NESTING_TOO_DEEP``.
    """

    strict: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    parse_float: ParseFloatHook = None
    object_pairs_hook: ObjectPairsHook = None
    object_hook: ObjectHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be positive")


class JsonParser:
    """
    Recursive descent parser over a single input buffer.

    One instance serves one top-level parse. Every routine leaves the cursor
    just past what it consumed and raises ``ParseError`` at the first
    problem; nothing is retried.
    """

    def __init__(self, text: str, config: ParseConfig):
        self.cursor = Cursor(text)
        self.config = config
        self._key_cache: dict[str, str] = {}

    def fail(self, kind: ErrorKind, msg: str) -> ParseError:
        """Builds an error located at the current cursor position."""
        return ParseError(msg, self.cursor.text, self.cursor.pos, kind)

    def parse_document(self) -> JsonValueOrTransformed:
        value = self.parse_value()

        if self.config.strict:
            self.cursor.skip_space()
            if self.cursor.has_value():
                raise self.fail(
                    ErrorKind.EXTRA_DATA, "unexpected trailing content"
                )

        return value

    def parse_value(self, depth: int = 0) -> JsonValueOrTransformed:
        """Dispatches on the next significant character."""
        cursor = self.cursor
        cursor.skip_space()

        if not cursor.has_value():
            raise self.fail(
                ErrorKind.UNEXPECTED_END,
                "unable to parse; invalid initial token at end of input",
            )

        char = cursor.character()

        if char in _NUMBER_START:
            return self.parse_number()
        elif char == '"':
            return self.parse_string()
        elif char == "[":
            return self.parse_array(depth + 1)
        elif char == "{":
            return self.parse_object(depth + 1)
        elif char in _LITERALS:
            word, value = _LITERALS[char]
            self.parse_exact(word)
            return value
        else:
            raise self.fail(
                ErrorKind.UNEXPECTED_TOKEN,
                f'unable to parse; invalid initial token "{char}"',
            )

    def parse_exact(self, word: str) -> None:
        """Consumes ``word`` character by character."""
        cursor = self.cursor
        for expected in word:
            if not cursor.has_value():
                raise self.fail(
                    ErrorKind.UNEXPECTED_END,
                    f"unexpected end of content when parsing {word}",
                )
            if cursor.character() != expected:
                raise self.fail(
                    ErrorKind.UNEXPECTED_TOKEN,
                    f"expected '{expected}' when parsing {word}",
                )
            cursor.advance()

    def parse_number(self) -> JsonValueOrTransformed:
        """Parses the token running up to the next separator or closer."""
        cursor = self.cursor
        start = cursor.pos

        with ProfileContext("parse_number", cursor=cursor):
            cursor.advance()
            while cursor.has_value():
                char = cursor.character()
                if char.isspace() or char in _NUMBER_TERMINATORS:
                    break
                cursor.advance()

            token = cursor.text[start : cursor.pos]

            # float() alone also takes inf, nan and 1_000
            if not all(c in _NUMBER_CHARS for c in token):
                raise self.fail(
                    ErrorKind.BAD_NUMBER, f"bad float format with {token}"
                )

            try:
                number = float(token)
            except ValueError as e:
                raise self.fail(
                    ErrorKind.BAD_NUMBER, f"bad float format with {token}"
                ) from e

            if self.config.parse_float:
                return self.config.parse_float(token)
            return number

    def parse_escape(self) -> str:
        """Decodes the escape sequence starting at the backslash."""
        cursor = self.cursor
        cursor.advance()

        if not cursor.has_value():
            raise self.fail(
                ErrorKind.UNEXPECTED_END, "unexpected end of input after \\"
            )

        char = cursor.character()
        if char in _SIMPLE_ESCAPES:
            cursor.advance()
            return _SIMPLE_ESCAPES[char]

        if char == "u":
            cursor.advance()
            hex_digits = cursor.text[cursor.pos : cursor.pos + 4]
            if len(hex_digits) == 4 and all(
                c in _HEX_DIGITS for c in hex_digits
            ):
                for _ in range(4):
                    cursor.advance()
                # One UTF-16 code unit; surrogate halves are not paired
                return chr(int(hex_digits, 16))

            raise self.fail(
                ErrorKind.BAD_ESCAPE,
                f"invalid escape sequence '\\u{hex_digits}'",
            )

        raise self.fail(
            ErrorKind.BAD_ESCAPE, f"invalid escape sequence '\\{char}'"
        )

    def parse_string(self) -> str:
        """Parses a double-quoted string, decoding escapes."""
        cursor = self.cursor

        if not cursor.has_value():
            raise self.fail(
                ErrorKind.UNEXPECTED_END,
                'expected initial " when parsing a string',
            )
        if cursor.character() != '"':
            raise self.fail(
                ErrorKind.UNEXPECTED_TOKEN,
                'expected initial " when parsing a string',
            )

        with ProfileContext("parse_string", cursor=cursor):
            cursor.advance()

            chunks: list[str] = []
            while cursor.has_value() and cursor.character() != '"':
                char = cursor.character()
                if char == "\\":
                    chunks.append(self.parse_escape())
                else:
                    chunks.append(char)
                    cursor.advance()

            if not cursor.has_value():
                raise self.fail(
                    ErrorKind.UNTERMINATED_STRING,
                    'no closing " when parsing a string',
                )
            cursor.advance()

        return "".join(chunks)

    def _parse_object_key(self) -> str:
        """Parses a key, reusing the same str object for repeated keys."""
        key = self.parse_string()
        return self._key_cache.setdefault(key, key)

    def _check_depth(self, depth: int) -> None:
        if depth > self.config.max_depth:
            raise self.fail(
                ErrorKind.NESTING_TOO_DEEP,
                f"nesting deeper than {self.config.max_depth} levels",
            )

    def _skip_separator(self) -> None:
        """Consumes an optional single comma and the noise around it."""
        cursor = self.cursor
        cursor.skip_space()
        if cursor.has_value() and cursor.character() == ",":
            cursor.advance()
            cursor.skip_space()

    def _apply_object_hooks(
        self, pairs: list[tuple[str, JsonValueOrTransformed]]
    ) -> JsonValueOrTransformed:
        if self.config.object_pairs_hook:
            return self.config.object_pairs_hook(pairs)

        # Repeated keys: last value wins, first position is kept
        obj = dict(pairs)
        if self.config.object_hook:
            return self.config.object_hook(obj)
        return obj

    def parse_array(self, depth: int) -> list[JsonValueOrTransformed]:
        """Parses an array; separators between elements are optional."""
        cursor = self.cursor
        self._check_depth(depth)

        with ProfileContext("parse_array", cursor=cursor):
            cursor.advance()
            cursor.skip_space()

            values: list[JsonValueOrTransformed] = []
            while cursor.has_value() and cursor.character() != "]":
                values.append(self.parse_value(depth))
                self._skip_separator()

            if not cursor.has_value():
                raise self.fail(
                    ErrorKind.MISSING_DELIMITER, "no closing ] for array"
                )
            cursor.advance()

            return values

    def parse_object(self, depth: int) -> JsonValueOrTransformed:
        """Parses an object with quoted keys."""
        cursor = self.cursor
        self._check_depth(depth)

        with ProfileContext("parse_object", cursor=cursor):
            cursor.advance()
            cursor.skip_space()

            pairs: list[tuple[str, JsonValueOrTransformed]] = []
            while cursor.has_value() and cursor.character() != "}":
                key = self._parse_object_key()
                cursor.skip_space()

                if not cursor.has_value() or cursor.character() != ":":
                    raise self.fail(
                        ErrorKind.MISSING_DELIMITER,
                        f'expected : after key "{key}"',
                    )
                cursor.advance()
                cursor.skip_space()

                pairs.append((key, self.parse_value(depth)))
                self._skip_separator()

            if not cursor.has_value():
                raise self.fail(
                    ErrorKind.MISSING_DELIMITER, "no closing } for object"
                )
            cursor.advance()

            return self._apply_object_hooks(pairs)


def _check_input(s: Any) -> None:
    if not isinstance(s, str):
        raise TypeError(f"the input must be str, not {type(s).__name__}")


def parse(s: str, **kwargs: Any) -> ParseResult:
    """
    Parses ``s`` and reports the outcome as a ``ParseResult``.

    Malformed input never raises; the first problem found is returned as the
    result's ``error``. Content after the first complete value is ignored
    unless ``strict=True``. Nesting that outgrows the interpreter stack
    before reaching ``max_depth`` fails with ``NESTING_TOO_DEEP``.
    """
    _check_input(s)
    config = ParseConfig(**kwargs)
    parser = JsonParser(s, config)

    try:
        with ProfileContext("parse", len(s)):
            value = parser.parse_document()
    except RecursionError:
        error = parser.fail(
            ErrorKind.NESTING_TOO_DEEP,
            "nesting exceeds the interpreter recursion limit",
        )
    except ParseError as err:
        error = err
    else:
        return ParseResult.success(value)

    logger.debug(
        "parse failed (%s) at line %d, column %d: %s",
        error.kind.value,
        error.lineno,
        error.colno,
        error.msg,
    )
    return ParseResult.failure(error)


def loads(s: str, **kwargs: Any) -> JsonValueOrTransformed:
    """
    Parses ``s`` into Python objects.

    Raises ``ParseError`` for malformed input.
    """
    return parse(s, **kwargs).unwrap()


def load(fp: IO[str], **kwargs: Any) -> JsonValueOrTransformed:
    """
    Parses the contents of a text file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "ErrorKind",
    "HotPathStats",
    "JsonParser",
    "ParseConfig",
    "ParseError",
    "ParseResult",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
]
