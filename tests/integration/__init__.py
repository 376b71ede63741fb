"""Integration tests for components working together.

Coverage:
    - /api/chat with real HTTP requests through ASGITransport
    - Chat session driving the real endpoint
    - Prebuilt frontend bundle serving
"""
