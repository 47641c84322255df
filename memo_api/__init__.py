"""
Memo API: in-memory memo store exposed over HTTP
"""
__version__ = "0.1.0"
