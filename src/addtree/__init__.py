"""Add-set planning for version-controlled working copies.

This package works out which filesystem entries must be registered with a
version-control system when a user asks to add a selection of files and
directories, and arranges them into a forest of parent/child add operations.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("addtree")
except PackageNotFoundError:
    __version__ = "unknown"
