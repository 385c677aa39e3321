"""Presentation layer - HTTP API.

프로토콜:
    - http/: REST API (FastAPI)
"""
