"""ghdash — a terminal dashboard of a GitHub user's own repositories.

Lists the non-fork repositories owned by the configured user and prints
them as a column-aligned grid.
"""

__version__ = "0.1.0"
