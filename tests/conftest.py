"""Shared test configuration."""

import sys

# Ensure src is in path
sys.path.insert(0, "src")
