"""
Internal packages: HTTP API.
"""
