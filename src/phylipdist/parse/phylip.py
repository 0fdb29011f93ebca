#!/usr/bin/env python
"""Parser for square distance matrices in PHYLIP format.

A block is a line holding only the number of taxa, n, immediately
followed by n rows of the form

    name  d_1  d_2  ...  d_n

with fields separated by any whitespace. A stream can hold several blocks.
Lines before a header that contain no digits are ignored, so blank lines
and comments may separate blocks. Lines containing digits may not.
"""
import re
import warnings

from enum import Enum
from typing import Iterable, Iterator, Optional

from phylipdist.core.distance import DistanceMatrix
from phylipdist.parse.record import FileFormatError

__copyright__ = "Copyright 2026, The phylipdist Project"
__license__ = "BSD-3"
__status__ = "Production"

_has_digit = re.compile(r"[0-9]")
_taxa_count = re.compile(r"[0-9]+")


class PhylipParseError(FileFormatError):
    pass


class PhylipHeaderError(PhylipParseError):
    pass


class PhylipRowError(PhylipParseError):
    pass


class ReaderState(Enum):
    AWAITING_BLOCK = "awaiting_block"
    HAVE_MATRIX = "have_matrix"
    EXHAUSTED = "exhausted"


class PhylipDistanceReader:
    """reads successive distance matrices from PHYLIP formatted lines

    Usage
    -----
    >>> reader = PhylipDistanceReader(infile)
    >>> while reader.scan():
    ...     dists = reader.distance_matrix

    or iterate over the reader directly.
    """

    def __init__(self, data: Iterable[str]):
        """
        Parameters
        ----------
        data
            sequence of lines in PHYLIP format (an open file, list, etc.)
        """
        self._lines = iter(data)
        self._dists: Optional[DistanceMatrix] = None
        self._state = ReaderState.AWAITING_BLOCK
        self.line_number = 0

    def __iter__(self) -> Iterator[DistanceMatrix]:
        while self.scan():
            yield self._dists

    @property
    def distance_matrix(self) -> Optional[DistanceMatrix]:
        """the most recently scanned matrix, None if none has been"""
        return self._dists

    @property
    def state(self) -> ReaderState:
        return self._state

    def _next_line(self) -> Optional[str]:
        """returns the next line, or None at the end of input"""
        try:
            line = next(self._lines, None)
        except OSError:
            self._state = ReaderState.EXHAUSTED
            raise

        if line is None:
            self._state = ReaderState.EXHAUSTED
        else:
            self.line_number += 1
        return line

    def _parse_header(self, line: str) -> int:
        count = line.rstrip("\r\n")
        if not _taxa_count.fullmatch(count):
            raise PhylipHeaderError(
                f"line {self.line_number}: can't convert {count!r} to a "
                "number of taxa"
            )
        return int(count)

    def _parse_row(self, line: str, num_taxa: int):
        fields = line.split()
        if len(fields) < num_taxa + 1:
            raise PhylipRowError(
                f"line {self.line_number}: expected a name and {num_taxa} "
                f"distances, got {len(fields)} fields"
            )
        if len(fields) > num_taxa + 1:
            warnings.warn(
                f"line {self.line_number}: ignoring "
                f"{len(fields) - num_taxa - 1} fields beyond {num_taxa} distances",
                UserWarning,
                stacklevel=3,
            )

        name = fields[0]
        dists = []
        for field in fields[1 : num_taxa + 1]:
            try:
                if "_" in field:
                    raise ValueError(field)
                dists.append(float(field))
            except ValueError:
                raise PhylipRowError(
                    f"line {self.line_number}: can't read {field!r}"
                ) from None
        return name, dists

    def scan(self) -> bool:
        """reads the next matrix block

        Returns
        -------
        True if a matrix was read, available as distance_matrix. False
        once the input ends, whether between blocks or part way through
        one. In both cases a previously read matrix remains available.

        Raises
        ------
        PhylipHeaderError
            if the header line is not solely a number of taxa
        PhylipRowError
            if a row has too few fields or a distance is not a number
        """
        if self._state is ReaderState.EXHAUSTED:
            return False

        line = self._next_line()
        while line is not None and not _has_digit.search(line):
            line = self._next_line()
        if line is None:
            return False

        num_taxa = self._parse_header(line)
        dists = DistanceMatrix(num_taxa)
        for i in range(num_taxa):
            line = self._next_line()
            if line is None:
                return False
            dists.names[i], dists.array[i] = self._parse_row(line, num_taxa)

        self._dists = dists
        self._state = ReaderState.HAVE_MATRIX
        return True
