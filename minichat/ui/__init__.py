"""NiceGUI interface - thin visualization layer for the chat.

Responsibilities:
    - Chat message display with a typing indicator
    - In-memory conversation seeded with a hidden system message
    - A single proxy call per submitted message

Contains no business logic beyond input checks. Delegates replies to the API.
"""
