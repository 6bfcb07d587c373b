"""NiceGUI interface - thin visualization layer for chat interactions.

Delivers a responsive web UI with real-time updates.

Responsibilities:
    - Message display with Markdown rendering for bot replies
    - Typing cursor while a reply is being revealed
    - Reset button and Markdown template shortcuts
    - Dark/light theme toggle remembered per browser

Contains no conversation logic. Delegates all operations to the controller.
"""
