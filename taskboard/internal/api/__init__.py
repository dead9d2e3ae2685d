"""
HTTP API built on FastAPI.
"""
