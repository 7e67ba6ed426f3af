# json_validator.py
# State-machine JSON grammar validator with positioned diagnostics
#
# =============================================================================
#  VALIDATOR IMPLEMENTATION: ONE STATE MACHINE PER PRODUCTION
# =============================================================================
#
# The validator answers one question: is this text a JSON document as defined
# by RFC 8259? It builds no values. Each grammar production (object, array,
# string, number, literal) is a small explicit state machine that walks the
# DocumentReader one atomic unit at a time.
#
# Design Rationale:
# 1. Value dispatch maps the first unit of a value onto a closed Production
#    enum, then looks the handler up in a fixed table. The set of productions
#    never grows, so there is no need for open-ended dispatch.
# 2. Every production returns (error, consumed). consumed is reported even
#    when the production fails, so the driver can sum widths along the call
#    chain and report the absolute unit index of the first violation.
# 3. Object and array entry goes through a depth guard that fails before the
#    recursive call is made. Worst-case call depth is bounded by max_depth,
#    never by the interpreter's recursion limit.
# 4. All bounds checks go through DocumentReader.look_ahead(), which returns a
#    Shortfall instead of raising. Truncated input therefore always ends in an
#    IncompleteValueError, never an IndexError.
#
# Error positions are 0-based unit indexes. The printed report uses
# "1:<index + 1>" because the validator keeps a flat offset, not lines.
#
# =============================================================================
#  REFERENCES
# =============================================================================
# [1] RFC 8259 - The JavaScript Object Notation (JSON) Data Interchange Format
# [2] JSONTestSuite - y_/n_/i_ fixture naming convention
# =============================================================================

import argparse
import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from document_reader import (
    UNIT_CHOICES,
    UNITS_DEFAULT,
    DocumentReader,
    Shortfall,
)

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
DEPTH_LIMIT_DEFAULT = 100  # Nesting bound for objects and arrays
DEPTH_LIMIT_MAX     = 300  # Two frames per level must stay under the recursion limit

# Structural tokens
ST_LSBRACKET = "["
ST_RSBRACKET = "]"
ST_LCBRACKET = "{"
ST_RCBRACKET = "}"
ST_COLON     = ":"
ST_COMMA     = ","

# Literal names
LN_TRUE  = "true"
LN_FALSE = "false"
LN_NULL  = "null"

SP_QUOTE          = '"'
SP_REVERSE_SOLIDUS = "\\"
SP_UNICODE        = "u"
SP_MINUS          = "-"
SP_PLUS           = "+"
SP_DECIMAL_POINT  = "."

# "\r\n" is a single unit under grapheme segmentation.
_WHITESPACE     = frozenset({"\t", "\n", "\r", " ", "\r\n"})
_DIGITS         = frozenset("0123456789")
_NONZERO_DIGITS = frozenset("123456789")
_HEX_DIGITS     = frozenset("0123456789abcdefABCDEF")
_SIMPLE_ESCAPES = frozenset('"\\/bfnrt')
_EXPONENT_MARKS = frozenset("eE")
_NUMBER_ENDINGS = frozenset({ST_COMMA, ST_RCBRACKET, ST_RSBRACKET}) | _WHITESPACE

_UNICODE_ESCAPE_WIDTH = 4
_CONTROL_LIMIT = 0x1F

# ---------------------------------------------------------------------------
# ERROR TAXONOMY
# ---------------------------------------------------------------------------
def format_report(position: int, reason: str) -> str:
    return f"Validation Error @ 1:{position + 1}\nReason: {reason}"


class ValidationError(SyntaxError):
    """
    Base class for every grammar violation.

    ``position`` is the 0-based unit index of the violation. Inside the state
    machines errors are created unlocated and returned; the driver fixes the
    position with at() once it knows the absolute offset.
    """
    def __init__(self, reason: str, position: int = 0):
        super().__init__(reason)
        self.reason = reason
        self.position = position

    def at(self, position: int) -> "ValidationError":
        return type(self)(self.reason, position)

    def __str__(self):
        return format_report(self.position, self.reason)


class StructuralError(ValidationError):
    """Missing or misplaced delimiter in an object, array or string."""


class IncompleteValueError(ValidationError):
    """Input ended in the middle of a production."""


class InvalidCharacterError(ValidationError):
    """Unexpected unit at a decision point."""


class LeadingZeroError(ValidationError):
    pass


class DepthExceededError(ValidationError):
    pass


class EmptyDocumentError(ValidationError):
    pass


class TrailingContentError(ValidationError):
    pass


# What every production hands back to its caller.
Step = Tuple[Optional[ValidationError], int]

# ---------------------------------------------------------------------------
# OUTCOMES
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Accepted:
    def __bool__(self):
        return True

    def __str__(self):
        return "OK"


@dataclass(frozen=True)
class Rejected:
    position: int
    message: str
    error: ValidationError = field(compare=False, repr=False)

    def __bool__(self):
        return False

    def __str__(self):
        return format_report(self.position, self.message)


ACCEPTED = Accepted()
Outcome = Union[Accepted, Rejected]

# ---------------------------------------------------------------------------
# UNIT PREDICATES
# ---------------------------------------------------------------------------
def _is_whitespace(unit: str) -> bool:
    return unit in _WHITESPACE


def _is_control(unit: str) -> bool:
    return any(ord(c) <= _CONTROL_LIMIT for c in unit)


def _skip_whitespace(reader: DocumentReader, index: int) -> int:
    while True:
        unit = reader.look_ahead(index, 1)
        if isinstance(unit, Shortfall) or not _is_whitespace(unit):
            return index
        index += 1

# ---------------------------------------------------------------------------
# VALUE DISPATCH
# ---------------------------------------------------------------------------
class Production(Enum):
    OBJECT  = "object"
    ARRAY   = "array"
    NUMBER  = "number"
    STRING  = "string"
    TRUE    = "true"
    FALSE   = "false"
    NULL    = "null"
    UNKNOWN = "unknown"


_LEADING_UNITS: Dict[str, Production] = {
    ST_LCBRACKET: Production.OBJECT,
    ST_LSBRACKET: Production.ARRAY,
    SP_QUOTE:     Production.STRING,
    SP_MINUS:     Production.NUMBER,
    "t":          Production.TRUE,
    "f":          Production.FALSE,
    "n":          Production.NULL,
}
_LEADING_UNITS.update({digit: Production.NUMBER for digit in _DIGITS})

_NESTING = frozenset({Production.OBJECT, Production.ARRAY})


def classify(unit: str) -> Production:
    """Map the first unit of a value onto the production that must consume it."""
    return _LEADING_UNITS.get(unit, Production.UNKNOWN)


def _validate_value(reader: DocumentReader, index: int, depth: int, max_depth: int) -> Step:
    """
    Validate one value starting at ``index``; ``depth`` is the nesting level
    of the enclosing container (0 at top level).
    """
    unit = reader.look_ahead(index, 1)
    if isinstance(unit, Shortfall):
        return IncompleteValueError("expected a value, found end of input"), 0

    production = classify(unit)
    if production is Production.UNKNOWN:
        return InvalidCharacterError(f"unknown character {unit!r}"), 0
    if production in _NESTING:
        # Guard runs before the call so the stack never grows past max_depth.
        if depth + 1 > max_depth:
            return DepthExceededError(f"maximum nesting depth of {max_depth} exceeded"), 0
        return _NESTED_PRODUCTIONS[production](reader, index, depth + 1, max_depth)
    return _FLAT_PRODUCTIONS[production](reader, index)

# ---------------------------------------------------------------------------
# OBJECT STATE MACHINE
# ---------------------------------------------------------------------------
class _ObjectState(Enum):
    BEGIN         = auto()
    PRE_KEY       = auto()  # right after "{", "}" still allowed
    KEY           = auto()  # after ",", a key is mandatory
    PENDING_COLON = auto()
    VALUE         = auto()
    POST_VALUE    = auto()


def _validate_object(reader: DocumentReader, start: int, depth: int, max_depth: int) -> Step:
    state = _ObjectState.BEGIN
    ptr = 0

    while True:
        unit = reader.look_ahead(start + ptr, 1)
        if isinstance(unit, Shortfall):
            return IncompleteValueError("object is not closed before end of input"), ptr

        if state is _ObjectState.BEGIN:
            if unit != ST_LCBRACKET:
                return StructuralError('object should start with "{"'), ptr
            state = _ObjectState.PRE_KEY
        elif _is_whitespace(unit):
            pass
        elif state is _ObjectState.PRE_KEY and unit == ST_RCBRACKET:
            return None, ptr + 1
        elif state in (_ObjectState.PRE_KEY, _ObjectState.KEY):
            if unit == ST_RCBRACKET:
                return StructuralError('expected object key after ",", found "}"'), ptr
            if unit != SP_QUOTE:
                return StructuralError(f"object key should be a string, found {unit!r}"), ptr
            error, step = _validate_string(reader, start + ptr)
            ptr += step
            if error is not None:
                return error, ptr
            state = _ObjectState.PENDING_COLON
            continue
        elif state is _ObjectState.PENDING_COLON:
            if unit != ST_COLON:
                return StructuralError(f'expected ":" after object key, found {unit!r}'), ptr
            state = _ObjectState.VALUE
        elif state is _ObjectState.VALUE:
            error, step = _validate_value(reader, start + ptr, depth, max_depth)
            ptr += step
            if error is not None:
                return error, ptr
            state = _ObjectState.POST_VALUE
            continue
        elif unit == ST_RCBRACKET:
            return None, ptr + 1
        elif unit == ST_COMMA:
            state = _ObjectState.KEY
        else:
            return StructuralError(f'expected "," or "}}" after object value, found {unit!r}'), ptr

        ptr += 1

# ---------------------------------------------------------------------------
# ARRAY STATE MACHINE
# ---------------------------------------------------------------------------
class _ArrayState(Enum):
    BEGIN      = auto()
    PRE_VALUE  = auto()  # right after "[", "]" still allowed
    VALUE      = auto()  # after ",", a value is mandatory
    POST_VALUE = auto()


def _validate_array(reader: DocumentReader, start: int, depth: int, max_depth: int) -> Step:
    state = _ArrayState.BEGIN
    ptr = 0

    while True:
        unit = reader.look_ahead(start + ptr, 1)
        if isinstance(unit, Shortfall):
            return IncompleteValueError("array is not closed before end of input"), ptr

        if state is _ArrayState.BEGIN:
            if unit != ST_LSBRACKET:
                return StructuralError('array should start with "["'), ptr
            state = _ArrayState.PRE_VALUE
        elif _is_whitespace(unit):
            pass
        elif state is _ArrayState.PRE_VALUE and unit == ST_RSBRACKET:
            return None, ptr + 1
        elif state in (_ArrayState.PRE_VALUE, _ArrayState.VALUE):
            if unit == ST_RSBRACKET:
                return StructuralError('expected array value after ",", found "]"'), ptr
            error, step = _validate_value(reader, start + ptr, depth, max_depth)
            ptr += step
            if error is not None:
                return error, ptr
            state = _ArrayState.POST_VALUE
            continue
        elif unit == ST_RSBRACKET:
            return None, ptr + 1
        elif unit == ST_COMMA:
            state = _ArrayState.VALUE
        else:
            return StructuralError(f'expected "," or "]" after array value, found {unit!r}'), ptr

        ptr += 1

# ---------------------------------------------------------------------------
# NUMBER STATE MACHINE
# ---------------------------------------------------------------------------
class _NumberState(Enum):
    BEGIN            = auto()
    LEADING_MINUS    = auto()
    LEADING_ZERO     = auto()
    INTEGER          = auto()
    PENDING_FRACTION = auto()
    FRACTION         = auto()
    EXPONENT_SIGN    = auto()
    PENDING_EXPONENT = auto()
    EXPONENT         = auto()


class _NumberUnit(Enum):
    MINUS     = auto()
    PLUS      = auto()
    ZERO      = auto()
    NONZERO   = auto()
    POINT     = auto()
    EXPONENT  = auto()
    DELIMITER = auto()
    OTHER     = auto()


def _classify_number_unit(unit: str) -> _NumberUnit:
    if unit == "0":
        return _NumberUnit.ZERO
    if unit in _NONZERO_DIGITS:
        return _NumberUnit.NONZERO
    if unit == SP_MINUS:
        return _NumberUnit.MINUS
    if unit == SP_PLUS:
        return _NumberUnit.PLUS
    if unit == SP_DECIMAL_POINT:
        return _NumberUnit.POINT
    if unit in _EXPONENT_MARKS:
        return _NumberUnit.EXPONENT
    if unit in _NUMBER_ENDINGS:
        return _NumberUnit.DELIMITER
    return _NumberUnit.OTHER


_S = _NumberState
_U = _NumberUnit
_NUMBER_TRANSITIONS: Dict[_NumberState, Dict[_NumberUnit, _NumberState]] = {
    _S.BEGIN:            {_U.MINUS: _S.LEADING_MINUS, _U.ZERO: _S.LEADING_ZERO, _U.NONZERO: _S.INTEGER},
    _S.LEADING_MINUS:    {_U.ZERO: _S.LEADING_ZERO, _U.NONZERO: _S.INTEGER},
    _S.LEADING_ZERO:     {_U.POINT: _S.PENDING_FRACTION, _U.EXPONENT: _S.EXPONENT_SIGN},
    _S.INTEGER:          {_U.ZERO: _S.INTEGER, _U.NONZERO: _S.INTEGER,
                          _U.POINT: _S.PENDING_FRACTION, _U.EXPONENT: _S.EXPONENT_SIGN},
    _S.PENDING_FRACTION: {_U.ZERO: _S.FRACTION, _U.NONZERO: _S.FRACTION},
    _S.FRACTION:         {_U.ZERO: _S.FRACTION, _U.NONZERO: _S.FRACTION, _U.EXPONENT: _S.EXPONENT_SIGN},
    _S.EXPONENT_SIGN:    {_U.MINUS: _S.PENDING_EXPONENT, _U.PLUS: _S.PENDING_EXPONENT,
                          _U.ZERO: _S.EXPONENT, _U.NONZERO: _S.EXPONENT},
    _S.PENDING_EXPONENT: {_U.ZERO: _S.EXPONENT, _U.NONZERO: _S.EXPONENT},
    _S.EXPONENT:         {_U.ZERO: _S.EXPONENT, _U.NONZERO: _S.EXPONENT},
}
_NUMBER_TERMINAL = frozenset({_S.LEADING_ZERO, _S.INTEGER, _S.FRACTION, _S.EXPONENT})
_NUMBER_EXPECTED: Dict[_NumberState, str] = {
    _S.BEGIN:            'expected "-" or digit at start of number',
    _S.LEADING_MINUS:    "expected digit after minus sign",
    _S.LEADING_ZERO:     'expected ".", exponent or end of number after leading zero',
    _S.INTEGER:          "invalid character in integer part",
    _S.PENDING_FRACTION: "expected digit after decimal point",
    _S.FRACTION:         "invalid character in fraction part",
    _S.EXPONENT_SIGN:    "expected sign or digit in exponent",
    _S.PENDING_EXPONENT: "expected digit after exponent sign",
    _S.EXPONENT:         "invalid character in exponent part",
}
del _S, _U


def _validate_number(reader: DocumentReader, start: int) -> Step:
    """
    Walk the number grammar. The closing delimiter is left unconsumed for the
    caller; only the number's own units count towards the step.
    """
    state = _NumberState.BEGIN
    ptr = 0

    while True:
        unit = reader.look_ahead(start + ptr, 1)
        if isinstance(unit, Shortfall):
            if state in _NUMBER_TERMINAL:
                return None, ptr
            return IncompleteValueError(f"incomplete number value: {_NUMBER_EXPECTED[state]}"), ptr

        kind = _classify_number_unit(unit)
        following = _NUMBER_TRANSITIONS[state].get(kind)
        if following is not None:
            state = following
            ptr += 1
            continue

        if kind is _NumberUnit.DELIMITER and state in _NUMBER_TERMINAL:
            return None, ptr
        if state is _NumberState.LEADING_ZERO and kind in (_NumberUnit.ZERO, _NumberUnit.NONZERO):
            return LeadingZeroError("leading zeros are not allowed"), ptr
        return InvalidCharacterError(f"{_NUMBER_EXPECTED[state]}, found {unit!r}"), ptr

# ---------------------------------------------------------------------------
# STRING STATE MACHINE
# ---------------------------------------------------------------------------
class _StringState(Enum):
    BEGIN      = auto()
    PLAIN_TEXT = auto()
    ESCAPING   = auto()
    UNICODE    = auto()


def _validate_string(reader: DocumentReader, start: int) -> Step:
    state = _StringState.BEGIN
    ptr = 0
    hex_seen = 0

    while True:
        unit = reader.look_ahead(start + ptr, 1)
        if isinstance(unit, Shortfall):
            return IncompleteValueError("incomplete string value: missing closing quote"), ptr

        if state is _StringState.BEGIN:
            if unit != SP_QUOTE:
                return StructuralError("string should start with a quote"), ptr
            state = _StringState.PLAIN_TEXT
        elif state is _StringState.PLAIN_TEXT:
            if unit == SP_QUOTE:
                return None, ptr + 1
            if unit == SP_REVERSE_SOLIDUS:
                state = _StringState.ESCAPING
            elif _is_control(unit):
                code = next(ord(c) for c in unit if ord(c) <= _CONTROL_LIMIT)
                return InvalidCharacterError(f"control character U+{code:04X} must be escaped"), ptr
        elif state is _StringState.ESCAPING:
            if unit in _SIMPLE_ESCAPES:
                state = _StringState.PLAIN_TEXT
            elif unit == SP_UNICODE:
                state = _StringState.UNICODE
                hex_seen = 0
            else:
                return InvalidCharacterError(f"invalid escape character {unit!r}"), ptr
        else:
            if unit not in _HEX_DIGITS:
                return InvalidCharacterError(f"invalid unicode escape digit {unit!r}"), ptr
            hex_seen += 1
            if hex_seen == _UNICODE_ESCAPE_WIDTH:
                state = _StringState.PLAIN_TEXT

        ptr += 1

# ---------------------------------------------------------------------------
# LITERAL MATCHERS
# ---------------------------------------------------------------------------
def _match_literal(reader: DocumentReader, start: int, literal: str) -> Step:
    """
    Compare a fixed-width window against ``literal``. A failed match consumes
    nothing, so the error points at the literal's first unit.
    """
    segment = reader.look_ahead(start, len(literal))
    if isinstance(segment, Shortfall):
        found = reader.look_ahead(start, segment.remaining)
        return IncompleteValueError(f'expected literal "{literal}", found "{found}" before end of input'), 0
    if segment != literal:
        return InvalidCharacterError(f'expected literal "{literal}", found "{segment}"'), 0
    return None, len(literal)


def _validate_true(reader: DocumentReader, start: int) -> Step:
    return _match_literal(reader, start, LN_TRUE)


def _validate_false(reader: DocumentReader, start: int) -> Step:
    return _match_literal(reader, start, LN_FALSE)


def _validate_null(reader: DocumentReader, start: int) -> Step:
    return _match_literal(reader, start, LN_NULL)


_FLAT_PRODUCTIONS: Dict[Production, Callable[[DocumentReader, int], Step]] = {
    Production.NUMBER: _validate_number,
    Production.STRING: _validate_string,
    Production.TRUE:   _validate_true,
    Production.FALSE:  _validate_false,
    Production.NULL:   _validate_null,
}
_NESTED_PRODUCTIONS: Dict[Production, Callable[[DocumentReader, int, int, int], Step]] = {
    Production.OBJECT: _validate_object,
    Production.ARRAY:  _validate_array,
}

# ---------------------------------------------------------------------------
# PUBLIC API
# ---------------------------------------------------------------------------
def _reject(error: ValidationError, position: int) -> Rejected:
    located = error.at(position)
    log.debug("rejected at unit %d (%s): %s", position, type(error).__name__, error.reason)
    return Rejected(position, located.reason, located)


def validate_reader(reader: DocumentReader, *, max_depth: int = DEPTH_LIMIT_DEFAULT) -> Outcome:
    """
    Validate a pre-built reader. Exactly one value, optionally surrounded by
    insignificant whitespace, must make up the whole document.

    Raises ValueError when ``max_depth`` is outside 1..DEPTH_LIMIT_MAX.
    """
    if not 1 <= max_depth <= DEPTH_LIMIT_MAX:
        raise ValueError(f"max_depth must be between 1 and {DEPTH_LIMIT_MAX}, got {max_depth}")
    if reader.length() == 0:
        return _reject(EmptyDocumentError("document can not be empty"), 0)

    index = _skip_whitespace(reader, 0)
    error, step = _validate_value(reader, index, 0, max_depth)
    index += step
    if error is not None:
        return _reject(error, index)

    index = _skip_whitespace(reader, index)
    trailing = reader.look_ahead(index, 1)
    if not isinstance(trailing, Shortfall):
        return _reject(TrailingContentError(f"expected end of input, found {trailing!r}"), index)
    return ACCEPTED


def validate(text: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT, units: str = UNITS_DEFAULT) -> Outcome:
    """Return Accepted or Rejected(position, message, error) for ``text``."""
    return validate_reader(DocumentReader(text, units), max_depth=max_depth)


def check(text: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT, units: str = UNITS_DEFAULT) -> None:
    """Like validate(), but raise the located ValidationError on rejection."""
    outcome = validate(text, max_depth=max_depth, units=units)
    if not outcome:
        raise outcome.error

# ---------------------------------------------------------------------------
# FIXTURE SUITE
# ---------------------------------------------------------------------------
EXPECT_ACCEPT = "y"
EXPECT_REJECT = "n"
EXPECT_EITHER = "i"


def expected_outcome(filename: str) -> Optional[str]:
    """Expected outcome encoded in a fixture name, or None for non-fixtures."""
    prefix = filename[:1]
    if prefix in (EXPECT_ACCEPT, EXPECT_REJECT, EXPECT_EITHER):
        return prefix
    return None


def outcome_matches(expect: str, outcome: Outcome) -> bool:
    if expect == EXPECT_EITHER:
        return True
    return bool(outcome) == (expect == EXPECT_ACCEPT)


def _read_text(path: str) -> str:
    # newline="" keeps CR/LF as written so unit positions match the file.
    with open(path, "r", encoding="utf-8", newline="") as fh:
        return fh.read()


def _fixtures(directory: str) -> Iterator[Tuple[str, str]]:
    for name in sorted(os.listdir(directory)):
        if not name.endswith(".json"):
            continue
        expect = expected_outcome(name)
        if expect is None:
            log.debug("ignoring %s: no y/n/i prefix", name)
            continue
        yield name, expect


def run_suite(directory: str, *, max_depth: int = DEPTH_LIMIT_DEFAULT, units: str = UNITS_DEFAULT) -> int:
    """
    Validate every fixture under ``directory`` and print one line per file.
    Returns the process exit code: 0 when every fixture passed.
    """
    passed = failed = skipped = 0
    for name, expect in _fixtures(directory):
        try:
            document = _read_text(os.path.join(directory, name))
        except (OSError, UnicodeDecodeError) as exc:
            print(f"[Skip] {name}: {exc}", file=sys.stderr)
            skipped += 1
            continue

        outcome = validate(document, max_depth=max_depth, units=units)
        if outcome_matches(expect, outcome):
            passed += 1
            print(f"[Pass] {name}")
        else:
            failed += 1
            print(f"[Fail] {name}")
        if not outcome:
            print("    " + str(outcome).replace("\n", "\n    "))

    print(f"{passed} passed, {failed} failed, {skipped} skipped")
    return 0 if failed == 0 else 1

# ---------------------------------------------------------------------------
# CLI ENTRYPOINT
# ---------------------------------------------------------------------------
def _cli(argv: List[str]) -> int:
    """
    Command-line interface for validation runs.

    Exit codes: 0 when the document (or every fixture) is accepted as
    expected, 1 on a grammar violation or unreadable file, 2 on bad usage.
    """
    ap = argparse.ArgumentParser(description="RFC 8259 JSON grammar validator")
    ap.add_argument("file", nargs="?", help="JSON file to verify")
    ap.add_argument("--suite", metavar="DIR", help="run every y_/n_/i_ fixture in DIR")
    ap.add_argument("--debug", action="store_true", help="dump the atomic units of FILE and exit")
    ap.add_argument("--max-depth", type=int, default=DEPTH_LIMIT_DEFAULT)
    ap.add_argument("--units", choices=UNIT_CHOICES, default=UNITS_DEFAULT,
                    help="how the document is split into atomic units")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    if (args.file is None) == (args.suite is None):
        ap.error("give exactly one of FILE or --suite DIR")
    if not 1 <= args.max_depth <= DEPTH_LIMIT_MAX:
        ap.error(f"--max-depth must be between 1 and {DEPTH_LIMIT_MAX}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.suite is not None:
        return run_suite(args.suite, max_depth=args.max_depth, units=args.units)

    try:
        data = _read_text(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"cannot read {args.file}: {exc}", file=sys.stderr)
        return 1

    if args.debug:
        for i, unit in enumerate(DocumentReader(data, args.units).units()):
            print(f"{i}\t{unit!r}")
        return 0

    try:
        check(data, max_depth=args.max_depth, units=args.units)
    except ValidationError as exc:
        print(exc, file=sys.stderr)
        return 1
    print("OK")
    return 0


def main() -> None:
    sys.exit(_cli(sys.argv[1:]))

# ---------------------------------------------------------------------------
# MAIN GUARD
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    main()
