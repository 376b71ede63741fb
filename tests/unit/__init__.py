"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and serialization
    - upstream/: Configuration and completion client
    - ui/: Conversation state and proxy call
"""
