"""
Contact Network Analytics

Graph analytics over a contact snapshot: hubs, paths, statistics and insights.
"""

__version__ = "0.1.0"
