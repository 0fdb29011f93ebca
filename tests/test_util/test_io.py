import bz2
import gzip
import lzma
import pathlib

import pytest

from phylipdist import load_distances
from phylipdist.util.io import get_format_suffixes, open_


@pytest.mark.parametrize(
    "name,expect",
    (
        ("dists.phy", ("phy", None)),
        ("dists.phy.gz", ("phy", "gz")),
        ("dists.PHY.BZ2", ("phy", "bz2")),
        ("dists.gz", (None, "gz")),
        ("dists", (None, None)),
        ("a.b.dist.xz", ("dist", "xz")),
    ),
)
def test_get_format_suffixes(name, expect):
    assert get_format_suffixes(name) == expect


@pytest.mark.parametrize("suffix,opener", (("gz", gzip.open), ("bz2", bz2.open), ("xz", lzma.open)))
def test_open_compressed(tmp_dir, DATA_DIR, suffix, opener):
    expect = (DATA_DIR / "dm_raw.txt").read_text()
    outpath = tmp_dir / f"dists.phy.{suffix}"
    with opener(outpath, mode="wt") as outfile:
        outfile.write(expect)

    with open_(outpath) as infile:
        got = infile.read()
    assert got == expect


def test_open_write_then_read(tmp_dir):
    outpath = tmp_dir / "dists.phy.gz"
    with open_(outpath, mode="w") as outfile:
        outfile.write("1\na  0\n")
    with gzip.open(outpath, mode="rt") as infile:
        assert infile.read() == "1\na  0\n"


def test_open_binary(DATA_DIR):
    with open_(DATA_DIR / "dm.phy", mode="rb") as infile:
        got = infile.read()
    assert isinstance(got, bytes)
    assert got.startswith(b"5\n")


def test_open_explicit_encoding(DATA_DIR):
    with open_(str(DATA_DIR / "dm.phy"), encoding="utf-8") as infile:
        assert infile.readline() == "5\n"


def test_open_home(tmp_dir, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_dir))
    (tmp_dir / "dists.phy").write_text("0\n")
    with open_(pathlib.Path("~") / "dists.phy") as infile:
        assert infile.read() == "0\n"


@pytest.mark.parametrize("name", ("", None))
def test_open_invalid(name):
    with pytest.raises(ValueError):
        open_(name)


def test_open_utf8_beyond_sample(tmp_dir):
    """non-ascii text after the sampled prefix is still decoded"""
    text = "\n" * 80 + "2\nHomo 0 0.1\nHylobatés_name 0.1 0\n"
    outpath = tmp_dir / "dists.phy"
    outpath.write_bytes(text.encode("utf-8"))
    with open_(outpath) as infile:
        assert infile.read() == text
    got = load_distances(outpath)
    assert got[0].names == ["Homo", "Hylobatés_name"]
