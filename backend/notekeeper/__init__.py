"""Notekeeper - single-user notes with a REST API and a JSON file store"""

__version__ = "1.0.0"
