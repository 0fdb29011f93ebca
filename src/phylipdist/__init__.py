"""Reading, writing and editing square distance matrices in PHYLIP format."""

import logging

from typing import List

from phylipdist._version import __version__
from phylipdist.core.distance import DimensionError, DistanceMatrix
from phylipdist.parse.phylip import PhylipDistanceReader
from phylipdist.util.io import open_

__copyright__ = "Copyright 2026, The phylipdist Project"
__license__ = "BSD-3"

__all__ = [
    "DistanceMatrix",
    "PhylipDistanceReader",
    "load_distances",
    "make_distances",
    "open_",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())


def load_distances(filename, **kwargs) -> List[DistanceMatrix]:
    """returns all distance matrices in a PHYLIP formatted file

    Parameters
    ----------
    filename
        path to file, can be compressed
    kwargs
        passed to open_()
    """
    with open_(filename, **kwargs) as infile:
        return list(PhylipDistanceReader(infile))


def make_distances(data, names=None) -> DistanceMatrix:
    """returns a DistanceMatrix

    Parameters
    ----------
    data
        a square 2D series of distances, or a dict of
        {(name1, name2): distance}. Pairs absent from a dict are 0.
    names
        taxon names. Required for a 2D series. For a dict, defines the
        order of taxa, otherwise the order in which names are encountered.
    """
    if isinstance(data, dict):
        if names is None:
            names = []
            for pair in data:
                names.extend(n for n in pair if n not in names)
        index = {n: i for i, n in enumerate(names)}
        missing = {n for pair in data for n in pair} - index.keys()
        if missing:
            raise DimensionError(f"names missing taxa {sorted(missing)}")
        result = DistanceMatrix(len(names))
        result.names = list(names)
        for (n1, n2), dist in data.items():
            result.array[index[n1], index[n2]] = dist
        return result

    if names is None:
        raise ValueError("names required when data is not a dict")

    return DistanceMatrix.from_array(data, names)
