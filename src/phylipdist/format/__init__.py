#!/usr/bin/env python

__all__ = ["phylip"]

__copyright__ = "Copyright 2026, The phylipdist Project"
__license__ = "BSD-3"
