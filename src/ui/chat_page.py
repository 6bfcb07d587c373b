"""NiceGUI chat interface with typing animation and theme switching."""

import os

from nicegui import app, ui

from src.agent.chat_client import create_chat_client
from src.agent.config import get_chat_config
from src.chat.animator import TypingAnimator
from src.chat.controller import ConversationController
from src.models.schemas import Message, Sender

API_KEY_WARNING = "Please add your Gemini API key in the .env file to use the AI features."

MARKDOWN_EXTRAS = ["fenced-code-blocks", "tables", "code-friendly", "cuddled-lists"]

CODE_TEMPLATE = "\n```python\n# Your code here\n```"
LIST_TEMPLATE = "\n- Item 1\n- Item 2\n- Item 3"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Poppins:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Poppins', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }
    body.body--dark { background: #121212; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }
    .body--dark .app-container { background: #1e1e1e; box-shadow: 0 4px 20px rgba(0, 0, 0, 0.5); }

    .header { background: linear-gradient(to right, #1976d2, #42a5f5); }
    .body--dark .header { background: linear-gradient(to right, #1A237E, #303F9F); }

    .message-user {
        background: #e3f2fd;
        color: #212121;
        border-radius: 18px 18px 4px 18px;
    }
    .body--dark .message-user { background: #1a237e30; color: #e0e0e0; }

    .message-bot {
        background: #f5f5f5;
        color: #212121;
        border-radius: 18px 18px 18px 4px;
    }
    .body--dark .message-bot {
        background: #212121;
        color: #e0e0e0;
        border: 1px solid rgba(255, 255, 255, 0.1);
    }

    .message-error { background: #ffebee; color: #d32f2f; }
    .body--dark .message-error { background: #b71c1c20; color: #f48fb1; }

    .avatar-bot { background: #1976d2; }
    .body--dark .avatar-bot { background: #303F9F; }

    .typing-cursor { animation: blink 1s step-end infinite; }
    @keyframes blink { 50% { opacity: 0; } }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
        transition: border-color 0.2s;
    }
    .body--dark .input-box { background: #2d2d2d; border-color: #424242; }
    .input-box:focus-within { border-color: #1976d2; }

    /* Markdown styling */
    .message-bot h1, .message-bot h2 { font-weight: 600; color: #1976d2; }
    .body--dark .message-bot h1 { color: #90caf9; }
    .message-bot pre {
        margin: 0.5rem 0;
        padding: 0.5rem;
        overflow-x: auto;
        background: #ffffff;
        border-left: 3px solid #1976d2;
        border-radius: 4px;
    }
    .body--dark .message-bot pre { background: #2d2d2d; border-left-color: #90caf9; }
    .message-bot code { font-family: 'Menlo', 'Monaco', monospace; font-size: 0.9em; }
    .message-bot blockquote { border-left: 3px solid #9e9e9e; padding-left: 1rem; color: #616161; }
    .message-bot table { width: 100%; border-collapse: collapse; }
    .message-bot th, .message-bot td { padding: 8px 16px; text-align: left; border-bottom: 1px solid #e0e0e0; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page, one conversation per browser client."""
    ui.add_head_html(CUSTOM_CSS)
    dark = ui.dark_mode(app.storage.user.get("dark_mode"))

    messages_container: ui.column
    typing_label: ui.label | None = None
    input_field: ui.textarea
    send_btn: ui.button
    theme_btn: ui.button
    scroll: ui.scroll_area

    def on_progress(index: int, text: str) -> None:
        if typing_label is not None:
            typing_label.set_text(text)
            scroll.scroll_to(percent=1.0)

    def on_complete(index: int) -> None:
        refresh_messages()

    controller = ConversationController(
        client=create_chat_client(get_chat_config()),
        animator=TypingAnimator(on_progress=on_progress, on_complete=on_complete),
    )

    def render_avatar() -> None:
        with ui.element("div").classes(
            "w-9 h-9 rounded-full flex items-center justify-center avatar-bot"
        ):
            ui.label("G").classes("text-white font-semibold")

    def render_message(index: int, msg: Message) -> None:
        nonlocal typing_label
        is_user = msg.sender == Sender.USER
        align = "justify-end" if is_user else "justify-start"
        bubble = "message-user" if is_user else "message-bot"
        if msg.is_error:
            bubble += " message-error"

        with ui.row().classes(f"w-full {align} gap-3 items-end"):
            if not is_user:
                render_avatar()
            with ui.element("div").classes(f"max-w-[70%] px-4 py-3 {bubble}"):
                if is_user:
                    ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
                elif index == controller.animator.active_index:
                    # Plain text while revealing; Markdown once complete
                    with ui.row().classes("gap-0 items-end"):
                        typing_label = ui.label(controller.animator.displayed_text).classes(
                            "text-sm whitespace-pre-wrap"
                        )
                        ui.label("|").classes("text-sm typing-cursor")
                else:
                    ui.markdown(msg.text, extras=MARKDOWN_EXTRAS).classes(
                        "text-sm leading-relaxed"
                    )

    def render_loading_indicator() -> None:
        with ui.row().classes("w-full justify-start gap-3 items-end"):
            render_avatar()
            with ui.element("div").classes("message-bot px-4 py-3"):
                ui.spinner("dots", size="md")

    def refresh_messages() -> None:
        nonlocal typing_label
        typing_label = None
        messages_container.clear()
        with messages_container:
            for index, msg in enumerate(controller.messages()):
                render_message(index, msg)
            if controller.is_loading:
                render_loading_indicator()
        scroll.scroll_to(percent=1.0)
        update_controls()

    def update_controls() -> None:
        if controller.is_loading:
            send_btn.props("loading")
            send_btn.disable()
        else:
            send_btn.props(remove="loading")
            send_btn.enable()

    controller.on_change = refresh_messages

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or controller.is_loading:
            return

        input_field.value = ""
        await controller.submit(text)
        if controller.error:
            ui.notify(controller.error, type="negative")

    def reset_chat() -> None:
        controller.reset()

    def insert_template(template: str) -> None:
        input_field.value = (input_field.value or "") + template

    def toggle_theme() -> None:
        dark.value = not bool(dark.value)
        app.storage.user["dark_mode"] = dark.value
        theme_btn.props(f"icon={'light_mode' if dark.value else 'dark_mode'}")

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("smart_toy").classes("text-white text-3xl")
                ui.label("Gemini AI Chatbot").classes("text-lg font-semibold text-white")
            with ui.row().classes("items-center gap-1"):
                ui.button(icon="refresh", on_click=reset_chat).props(
                    "flat round color=white"
                ).tooltip("Reset conversation")
                theme_btn = (
                    ui.button(
                        icon="light_mode" if dark.value else "dark_mode",
                        on_click=toggle_theme,
                    )
                    .props("flat round color=white")
                    .tooltip("Toggle light/dark mode")
                )

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full") as scroll,
            ui.column().classes("w-full p-5"),
        ):
            messages_container = ui.column().classes("w-full gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-2 items-end border-t"):
            ui.button(icon="code", on_click=lambda: insert_template(CODE_TEMPLATE)).props(
                "flat round dense"
            ).tooltip("Insert code block")
            ui.button(
                icon="format_list_bulleted", on_click=lambda: insert_template(LIST_TEMPLATE)
            ).props("flat round dense").tooltip("Insert list")
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                input_field = (
                    ui.textarea(placeholder="Type your message here...")
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .on("keydown.enter.exact.prevent", send_message)
                )
            send_btn = ui.button(icon="send", on_click=send_message).props(
                "round unelevated color=primary"
            )

    refresh_messages()

    if not controller.client.is_configured:
        ui.notify(API_KEY_WARNING, type="warning", position="top", close_button=True)

    ui.context.client.on_disconnect(controller.close)


def main() -> None:
    ui.run(
        title="Gemini AI Chatbot",
        port=8080,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chat-secret"),
    )


if __name__ == "__main__":
    main()
