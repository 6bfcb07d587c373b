"""Test package for Gemini Chat.

Provides test coverage for all components with unit tests for isolated
logic and integration tests for the HTTP workflow.

Structure:
    - unit/: Individual class and function tests
    - integration/: End-to-end API tests

Mocks only the Agno agent; everything above it runs for real.
Leverages pytest with pytest-check for soft assertions.
"""
