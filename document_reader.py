# document_reader.py
# Atomic-unit reader feeding the JSON grammar validator
#
# =============================================================================
#  READER DESIGN: SEGMENT ONCE, LOOK AHEAD MANY TIMES
# =============================================================================
#
# The validator never touches the raw text. It asks the reader for slices of
# whole atomic units, so a structural token or a literal is always compared
# as a complete character and never cut in the middle of an encoding.
#
# 1. Segmentation runs once at construction and produces an offset map with
#    one entry per unit plus a sentinel equal to len(document).
# 2. look_ahead() is bounds-checked against that map. An unsatisfiable request
#    returns a Shortfall carrying the number of units that do remain, so the
#    state machines can tell "end of input" apart from "wrong character"
#    without ever catching IndexError.
# 3. Two segmentations are available. "codepoint" matches the unit of the
#    JSON grammar itself [RFC 8259, section 2]. "grapheme" splits on extended
#    grapheme clusters [UAX #29] through the regex package's \X.
#
# =============================================================================
#  REFERENCES
# =============================================================================
# [1] RFC 8259 - The JavaScript Object Notation (JSON) Data Interchange Format
# [2] UAX #29 - Unicode Text Segmentation
# =============================================================================

from typing import Iterator, List, NamedTuple, Union

import regex

# ---------------------------------------------------------------------------
# CONSTANTS AND TUNABLES
# ---------------------------------------------------------------------------
UNITS_CODEPOINT = "codepoint"
UNITS_GRAPHEME  = "grapheme"
UNITS_DEFAULT   = UNITS_CODEPOINT
UNIT_CHOICES    = (UNITS_CODEPOINT, UNITS_GRAPHEME)

_GRAPHEME_RE = regex.compile(r"\X")

# ---------------------------------------------------------------------------
# LOOKAHEAD SHORTFALL
# ---------------------------------------------------------------------------
class Shortfall(NamedTuple):
    """
    Returned by look_ahead() instead of a slice when the request runs past the
    end of the document. ``remaining`` is 0 exactly at end of input.
    """
    remaining: int


LookAheadResult = Union[str, Shortfall]

# ---------------------------------------------------------------------------
# SEGMENTATION
# ---------------------------------------------------------------------------
def segment(document: str, units: str = UNITS_DEFAULT) -> List[str]:
    """Split text into atomic units under the named segmentation."""
    if units == UNITS_CODEPOINT:
        return list(document)
    if units == UNITS_GRAPHEME:
        return _GRAPHEME_RE.findall(document)
    raise ValueError(f"unknown unit segmentation {units!r} - expected one of {', '.join(UNIT_CHOICES)}")

# ---------------------------------------------------------------------------
# READER
# ---------------------------------------------------------------------------
class DocumentReader:
    """
    Read-only view of a document as a sequence of atomic units.

    Nothing is mutated after __init__, so one reader can back any number of
    validation calls, including concurrent ones.
    """
    __slots__ = ("_document", "_offsets", "_units")

    def __init__(self, document: str, units: str = UNITS_DEFAULT):
        pieces = segment(document, units)

        offsets = [0] * (len(pieces) + 1)
        total = 0
        for i, piece in enumerate(pieces):
            offsets[i] = total
            total += len(piece)
        offsets[-1] = total

        self._document = document
        self._offsets = offsets
        self._units = units

    def length(self) -> int:
        """Total number of atomic units."""
        return len(self._offsets) - 1

    def __len__(self) -> int:
        return self.length()

    def offset(self, index: int) -> int:
        """Offset into the backing text where unit ``index`` begins."""
        return self._offsets[index]

    def look_ahead(self, index: int, width: int) -> LookAheadResult:
        length = self.length()
        if index < 0 or width < 0:
            return Shortfall(0)
        if index + width > length:
            return Shortfall(max(0, length - index))
        return self._document[self._offsets[index]:self._offsets[index + width]]

    def units(self) -> Iterator[str]:
        """Yield every atomic unit in order."""
        for i in range(self.length()):
            yield self._document[self._offsets[i]:self._offsets[i + 1]]

    def __repr__(self):
        return f"DocumentReader(units={self._units!r}, length={self.length()})"
