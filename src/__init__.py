"""Gemini Chat - browser chat interface for Google Gemini.

Combines FastAPI for HTTP, Agno for model access, NiceGUI for the
chat page, and Pydantic for data validation.

Components:
    - agent: Gemini client and the conversation context it owns
    - chat: Message store, typing animation, turn controller, sessions
    - api: HTTP endpoints over in-memory sessions
    - ui: Web interface for chat interactions
    - models: Message and request/response schemas
"""

__version__ = "0.1.0"
