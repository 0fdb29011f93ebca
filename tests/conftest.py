import pathlib

import pytest

from phylipdist import load_distances


@pytest.fixture(scope="session")
def DATA_DIR() -> pathlib.Path:
    return pathlib.Path(__file__).parent / "data"


@pytest.fixture
def tmp_dir(tmp_path_factory):
    return tmp_path_factory.mktemp("phylipdist")


@pytest.fixture
def primates(DATA_DIR):
    """the unedited, asymmetric, 5 taxon matrix"""
    return load_distances(DATA_DIR / "dm.phy")[0]


@pytest.fixture
def expected(DATA_DIR):
    """returns the contents of a rendered matrix from the data directory"""

    def read(name):
        return (DATA_DIR / name).read_text()

    return read
