# ancestry/logging/tags.py
"""
Logging subsystem tags.

Used across the package so log output stays consistent and searchable.
"""

ANCESTRY = "[ANCESTRY]"
SORT = "[SORT]"
CONFIG = "[CONFIG]"
SOURCE = "[SOURCE]"
CLI = "[CLI]"
