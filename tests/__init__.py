"""Test package for MiniChat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Endpoint and end-to-end tests over ASGI transport

The upstream API is always mocked; no test needs network access or an API key.
"""
