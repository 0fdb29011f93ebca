import numpy
import pytest

from phylipdist.format.phylip import _tab_expand, distances_to_phylip


def test_tab_expand():
    rows = [["a", "1", "22"], ["bbb", "333", "4"]]
    got = _tab_expand(rows)
    assert got == ["a    1    22", "bbb  333  4"]


def test_tab_expand_last_cell_not_padded():
    got = _tab_expand([["name", "0"], ["n", "0.12345"]], space=1)
    assert got == ["name 0", "n    0.12345"]


def test_distances_to_phylip():
    got = distances_to_phylip(["x", "longer"], [[0, 0.123456], [12345.6, 0]])
    assert got == "2\nx       0         0.123\nlonger  1.23e+04  0\n"


def test_distances_to_phylip_options():
    got = distances_to_phylip(["x", "y"], [[0, 0.123456], [1, 0]], digits=5, space=1)
    assert got == "2\nx 0 0.12346\ny 1 0\n"


def test_distances_to_phylip_single():
    assert distances_to_phylip(["only"], numpy.zeros((1, 1))) == "1\nonly  0\n"


def test_distances_to_phylip_empty_names():
    got = distances_to_phylip(["", ""], numpy.zeros((2, 2)))
    assert got == "2\n  0  0\n  0  0\n"


def test_distances_to_phylip_mismatch():
    with pytest.raises(ValueError):
        distances_to_phylip(["a"], numpy.zeros((2, 2)))
