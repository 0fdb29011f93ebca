import re
from bz2 import open as bzip_open
from gzip import open as gzip_open
from lzma import open as lzma_open
from os import PathLike
from pathlib import Path, PurePath
from typing import IO, Callable, Optional, Tuple, Union

from chardet import detect

PathType = Union[str, PathLike, PurePath]

_wout_period = re.compile(r"^\.")

_compression_handlers = {
    "gz": gzip_open,
    "bz2": bzip_open,
    "xz": lzma_open,
    "lzma": lzma_open,
}


def _get_compression_open(
    path: Optional[PathType] = None, compression: Optional[str] = None
) -> Optional[Callable]:
    """returns function for opening compression formats

    Parameters
    ----------
    path
        file path
    compression
        file compression suffix

    Returns
    -------
    function for opening compressed files or None if unknown compression
    """
    assert path or compression
    if compression is None:
        _, compression = get_format_suffixes(path)
    return _compression_handlers.get(compression, None)


def get_format_suffixes(filename: PathType) -> Tuple[Optional[str], Optional[str]]:
    """returns file, compression suffixes"""
    filename = Path(filename)
    if not filename.suffix:
        return None, None

    suffixes = [_wout_period.sub("", sfx).lower() for sfx in filename.suffixes[-2:]]
    if suffixes[-1] in _compression_handlers:
        cmp_suffix = suffixes[-1]
    else:
        cmp_suffix = None

    if len(suffixes) == 2 and cmp_suffix is not None:
        suffix = suffixes[0]
    elif cmp_suffix is None:
        suffix = suffixes[-1]
    else:
        suffix = None
    return suffix, cmp_suffix


def open_(filename: PathType, mode="rt", **kwargs) -> IO:
    """open that handles different compression

    Parameters
    ----------
    filename
        path to a, possibly compressed, file
    mode
        standard file opening mode
    kwargs
        passed to open functions

    Returns
    -------
    an object compatible with the file protocol

    Notes
    -----
    If reading text and no encoding is provided, the encoding is
    detected from the first bytes of the file.
    """
    if not filename:
        raise ValueError(f"{filename} not a valid file name")

    mode = mode or "rt"
    filename = Path(filename).expanduser()
    op = _get_compression_open(filename) or open
    if op is not open and "b" not in mode and "t" not in mode:
        # the compression openers default to binary
        mode = f"{mode}t"

    encoding = kwargs.pop("encoding", None)
    need_encoding = mode.startswith("r") and "b" not in mode
    if need_encoding and encoding is None:
        with op(filename, mode="rb") as infile:
            data = infile.read(100)

        encoding = detect(data)["encoding"]
        if encoding in (None, "ascii"):
            # only a prefix is sampled, later bytes may not be ascii
            encoding = "utf-8"

    if "b" in mode:
        return op(filename, mode, **kwargs)

    return op(filename, mode, encoding=encoding, **kwargs)
