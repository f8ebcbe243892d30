"""Integration tests for components working together as a system.

Coverage:
    - API endpoints through ASGITransport
    - Full round trips from controller through a bridge app to storage
"""
