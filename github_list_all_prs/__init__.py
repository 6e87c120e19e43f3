"""
GitHub List All PRs

Lists the pull requests of every repository owned by (or accessible to) a
GitHub user or organization, as a bounded digest on the terminal.
"""

__version__ = "1.0.0"
