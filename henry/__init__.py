"""Henry AI - desktop assistant shell with chat, connected apps, and automations.

Combines NiceGUI for the chat interface, FastAPI for the HTTP host,
httpx for the backend bridge, and Pydantic for data validation.

Components:
    - session: chat session controller (loading guard, session identity)
    - backend: real backend bridge and deterministic mock replies
    - storage: key/value storage port and usage statistics
    - ui: transcript rendering and the NiceGUI page
    - api: health and stats endpoints
    - models: message and wire schemas
"""

__version__ = "0.1.0"
