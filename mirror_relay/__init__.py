"""
Mirror Relay.

Republishes video metadata scraped from Invidious-style mirrors as a
uniform JSON record.
"""

__version__ = "0.1.0"
