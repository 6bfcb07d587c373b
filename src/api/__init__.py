"""FastAPI endpoints for the Gemini chat.

HTTP routes with async request handling over in-memory chat sessions.

Endpoints:
    - GET /health: Service health status
    - POST /sessions: Start a conversation
    - GET /sessions/{id}: Conversation snapshot
    - POST /sessions/{id}/messages: Submit a user message
    - POST /sessions/{id}/reset: Reset a conversation
    - DELETE /sessions/{id}: Discard a conversation
"""
