#!/usr/bin/env python3
"""Example: diagnostic dump of a key given as hex, G... or S..."""

import sys

from ledgerkeys import log_key

log_key(sys.stdout, sys.argv[1] if len(sys.argv) > 1 else "00" * 32)
