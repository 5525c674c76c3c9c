"""
GHCheck — GitHub integration checker for VS Code.

Inspects the local developer environment (git, remotes, authentication,
editor extensions, dev container config) and reports what is missing
along with remediation hints.
"""

__version__ = "0.1.0"
