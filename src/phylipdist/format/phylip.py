#!/usr/bin/env python
"""Writer for PHYLIP distance matrices
"""
from typing import List, Sequence

__copyright__ = "Copyright 2026, The phylipdist Project"
__license__ = "BSD-3"
__status__ = "Production"

DEFAULT_DIGITS = 3
DEFAULT_SPACE = 2


def _tab_expand(rows: List[List[str]], space: int = DEFAULT_SPACE) -> List[str]:
    """returns rows joined into lines with the columns aligned

    Parameters
    ----------
    rows
        series of rows, each a list of cells
    space
        minimum number of spaces between columns

    Notes
    -----
    The last cell of a row terminates the line and is not padded, so it
    does not contribute to any column width.
    """
    col_widths = []
    for row in rows:
        for cdex, cell in enumerate(row[:-1]):
            if cdex == len(col_widths):
                col_widths.append(0)
            col_widths[cdex] = max(col_widths[cdex], len(cell))

    lines = []
    for row in rows:
        padded = [
            cell.ljust(col_widths[cdex] + space) for cdex, cell in enumerate(row[:-1])
        ]
        lines.append("".join(padded + row[-1:]))
    return lines


def distances_to_phylip(
    names: Sequence[str],
    array,
    digits: int = DEFAULT_DIGITS,
    space: int = DEFAULT_SPACE,
) -> str:
    """Returns a square distance matrix in PHYLIP format.

    Parameters
    ----------
    names
        taxon names, in row order
    array
        n x n distances
    digits
        number of significant digits for each distance
    space
        minimum number of spaces between columns

    Returns
    -------
    The taxon count on the first line, followed by one line per
    taxon holding its name and distances. Ends with a newline.
    """
    num_taxa = len(names)
    if len(array) != num_taxa:
        raise ValueError(f"{num_taxa} names for {len(array)} rows")

    template = f"%.{digits}g"
    rows = []
    for name, dists in zip(names, array):
        rows.append([name] + [template % dist for dist in dists])

    lines = [f"{num_taxa}"] + _tab_expand(rows, space=space)
    return "\n".join(lines) + "\n"
