"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - agent/: Configuration, history and the remote chat client
    - chat/: Store, typing animator, controller and session registry

Uses mocks for the remote model. Leverages pytest-check for multiple
assertions per test.
"""
