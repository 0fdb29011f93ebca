#!/usr/bin/env python
"""Exceptions shared by the parsers."""

__copyright__ = "Copyright 2026, The phylipdist Project"
__license__ = "BSD-3"


class FileFormatError(Exception):
    """Raised when a file does not conform to the expected format."""

    pass
