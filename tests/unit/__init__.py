"""Unit tests for individual components in isolation.

Coverage:
    - models/config: Pydantic validation
    - backend: Mock classification and the HTTP bridge client
    - session: Controller guards and session identity
    - storage: Stats and conversation records
    - ui: Transcript rendering, catalog, sidebar actions

External services are replaced with httpx.MockTransport or in-memory fakes.
"""
