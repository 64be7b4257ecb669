"""
Social Signals Agent

Metered entrypoints aggregating trends, Hacker News and news headlines.
"""

__version__ = "1.0.0"
