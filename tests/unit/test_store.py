"""Unit tests for ConversationStore."""

import pytest
from pydantic import ValidationError

from src.chat.store import WELCOME_BACK_TEXT, WELCOME_TEXT, ConversationStore
from src.models.schemas import Message, Sender


class TestConversationStore:
    def test_starts_with_welcome_message(self) -> None:
        store = ConversationStore()

        assert store.all() == (Message(text=WELCOME_TEXT, sender=Sender.BOT),)

    def test_append_returns_index_and_keeps_order(self) -> None:
        store = ConversationStore()

        first = store.append(Message(text="Hello", sender=Sender.USER))
        second = store.append(Message(text="Hi there!", sender=Sender.BOT))

        assert (first, second) == (1, 2)
        assert [m.text for m in store.all()] == [WELCOME_TEXT, "Hello", "Hi there!"]
        assert store[2].sender == Sender.BOT

    def test_reset_leaves_single_welcome_back_message(self) -> None:
        store = ConversationStore()
        store.append(Message(text="Hello", sender=Sender.USER))
        store.append(Message(text="oops", sender=Sender.BOT, is_error=True))

        store.reset()

        assert len(store) == 1
        assert store[0].text == WELCOME_BACK_TEXT
        assert store[0].sender == Sender.BOT

    def test_all_is_read_only_view(self) -> None:
        store = ConversationStore()
        view = store.all()
        store.append(Message(text="Hello", sender=Sender.USER))

        assert isinstance(view, tuple)
        assert len(view) == 1


class TestMessage:
    def test_message_is_immutable(self) -> None:
        message = Message(text="Hello", sender=Sender.USER)

        with pytest.raises(ValidationError):
            message.text = "changed"  # type: ignore[misc]

    def test_sender_is_required(self) -> None:
        with pytest.raises(ValidationError):
            Message(text="Hello")  # type: ignore[call-arg]

    def test_is_error_defaults_to_false(self) -> None:
        assert Message(text="x", sender=Sender.BOT).is_error is False
