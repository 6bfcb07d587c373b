"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests through the ASGI app
    - Full chat workflow from session creation to reset
    - Live Gemini round trip (when GEMINI_API_KEY is set)
"""
