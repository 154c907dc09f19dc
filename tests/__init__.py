"""Tests for the voting web service.

All tests run in-process: the FastAPI application is driven through
httpx's ASGI transport, so no server or network is needed.
"""
