"""NiceGUI interface - thin visualization layer for the assistant shell.

Responsibilities:
    - Transcript rendering with the limited chat markup
    - Sidebar: connected apps, file actions, terminal echo, automations, stats
    - Wiring the session controller to page elements

Contains minimal business logic. Delegates round trips to the session
controller and counters to the storage layer.
"""
