#!/usr/bin/env python
"""A square matrix of pairwise distances between named taxa.

The matrix is edited in place. Every editing method checks its arguments
before touching the data, so a failed call leaves the instance unchanged.
"""
from typing import Dict, List, Sequence, Tuple

import numpy

from phylipdist.format.phylip import (
    DEFAULT_DIGITS,
    DEFAULT_SPACE,
    distances_to_phylip,
)
from phylipdist.util.io import open_

__copyright__ = "Copyright 2026, The phylipdist Project"
__license__ = "BSD-3"
__status__ = "Production"


class DistanceMatrixError(Exception):
    pass


class TaxonIndexError(IndexError, DistanceMatrixError):
    pass


class DimensionError(ValueError, DistanceMatrixError):
    pass


class NoDistancesError(ValueError, DistanceMatrixError):
    pass


class DistanceMatrix:
    """pairwise distance matrix

    Attributes
    ----------
    names
        taxon names, names[i] labels row and column i
    array
        n x n numpy array, array[i, j] is the distance from taxon i to
        taxon j. Need not be symmetric.
    """

    def __init__(self, num_taxa: int = 0):
        if num_taxa < 0:
            raise ValueError(f"number of taxa must be >= 0, not {num_taxa}")
        self.names: List[str] = [""] * num_taxa
        self.array = numpy.zeros((num_taxa, num_taxa), dtype=float)

    @classmethod
    def from_array(cls, array, names: Sequence[str]):
        """returns a DistanceMatrix holding copies of array and names"""
        array = numpy.array(array, dtype=float)
        if array.size == 0:
            array = array.reshape((0, 0))
        if array.ndim != 2 or array.shape[0] != array.shape[1]:
            raise DimensionError(f"distances must be square, not {array.shape}")
        if len(names) != array.shape[0]:
            raise DimensionError(
                f"number of names ({len(names)}) != matrix dimension "
                f"({array.shape[0]})"
            )
        result = cls()
        result.names = [str(n) for n in names]
        result.array = array
        return result

    def __len__(self):
        return len(self.names)

    def __repr__(self):
        return f"{self.__class__.__name__}(num_taxa={self.num_taxa})"

    def __str__(self):
        return self.to_phylip()

    @property
    def num_taxa(self) -> int:
        return len(self.names)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.array.shape

    def copy(self):
        """returns an independent copy"""
        return self.__class__.from_array(self.array, self.names)

    def to_phylip(self, digits: int = DEFAULT_DIGITS, space: int = DEFAULT_SPACE):
        """returns the matrix as PHYLIP formatted text

        Parameters
        ----------
        digits
            number of significant digits for each distance
        space
            minimum number of spaces between columns
        """
        return distances_to_phylip(self.names, self.array, digits=digits, space=space)

    def to_dict(self) -> Dict[Tuple[str, str], float]:
        """Returns a flattened dict with diagonal elements removed"""
        result = {}
        for i, n1 in enumerate(self.names):
            for j, n2 in enumerate(self.names):
                if i != j:
                    result[(n1, n2)] = float(self.array[i, j])
        return result

    def write(self, filename, **kwargs):
        """writes the PHYLIP formatted matrix to filename

        Parameters
        ----------
        filename
            path to write to, a compression suffix (e.g. .gz) is honoured
        kwargs
            passed to to_phylip()
        """
        with open_(filename, mode="w") as outfile:
            outfile.write(self.to_phylip(**kwargs))

    def _check_index(self, index: int):
        if not 0 <= index < self.num_taxa:
            raise TaxonIndexError(
                f"taxon index {index} out of range for {self.num_taxa} taxa"
            )

    def make_symmetrical(self):
        """replaces each pair of off-diagonal entries by their average"""
        diagonal = self.array.diagonal().copy()
        self.array = self.array / 2 + self.array.T / 2
        numpy.fill_diagonal(self.array, diagonal)

    def delete_taxon(self, index: int):
        """removes the taxon at index, along with its row and column"""
        self._check_index(index)
        del self.names[index]
        self.array = numpy.delete(numpy.delete(self.array, index, axis=0), index, 1)

    def delete_taxon_pair(self, index1: int, index2: int):
        """removes two taxa in one step

        Parameters
        ----------
        index1, index2
            positions of the taxa before either is removed
        """
        self._check_index(index1)
        self._check_index(index2)
        if index1 == index2:
            raise TaxonIndexError(f"cannot delete taxon {index1} twice")

        drop = [index1, index2]
        self.names = [n for i, n in enumerate(self.names) if i not in drop]
        self.array = numpy.delete(numpy.delete(self.array, drop, axis=0), drop, 1)

    def append_taxon(self, name: str, distances: Sequence[float]):
        """adds a taxon as the last row and column

        Parameters
        ----------
        name
            the taxon name
        distances
            one distance per existing taxon, used for both the new row
            and the new column. The new diagonal entry is 0.
        """
        distances = numpy.array(distances, dtype=float)
        num_taxa = self.num_taxa
        if distances.ndim != 1:
            raise DimensionError(
                f"distances must be one dimensional, not shape {distances.shape}"
            )
        if len(distances) != num_taxa:
            raise DimensionError(
                f"matrix length ({num_taxa}) != data length ({len(distances)})"
            )

        array = numpy.zeros((num_taxa + 1, num_taxa + 1), dtype=float)
        array[:num_taxa, :num_taxa] = self.array
        array[num_taxa, :num_taxa] = distances
        array[:num_taxa, num_taxa] = distances
        self.names.append(name)
        self.array = array

    def _off_diagonal(self):
        """returns off-diagonal values in row-major order, and their indices"""
        mask = ~numpy.eye(self.num_taxa, dtype=bool)
        values = self.array[mask]
        if values.size == 0 or numpy.isnan(values).all():
            raise NoDistancesError(
                f"no off-diagonal distances in a matrix of {self.num_taxa} taxa"
            )
        return values, numpy.argwhere(mask)

    def min(self) -> Tuple[float, int, int]:
        """returns the smallest off-diagonal distance and its row, column

        Notes
        -----
        Ties resolve to the first entry in row-major order. NaN is ignored.
        """
        values, coords = self._off_diagonal()
        index = numpy.nanargmin(values)
        i, j = coords[index]
        return float(values[index]), int(i), int(j)

    def max(self) -> Tuple[float, int, int]:
        """returns the largest off-diagonal distance and its row, column

        Notes
        -----
        Ties resolve to the first entry in row-major order. NaN is ignored.
        """
        values, coords = self._off_diagonal()
        index = numpy.nanargmax(values)
        i, j = coords[index]
        return float(values[index]), int(i), int(j)
