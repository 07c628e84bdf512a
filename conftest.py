"""
Root conftest.

Its presence puts the repository root on sys.path during collection, so
tests import trackcreator without an install.
"""
