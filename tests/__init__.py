"""Test package for Henry AI.

Structure:
    - unit/: Individual function and class tests
    - integration/: Components wired together (controller, storage, HTTP)

Leverages pytest with pytest-asyncio for coroutine tests and pytest-check
for soft assertions.
"""
