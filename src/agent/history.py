"""Conversation context sent to the remote model on every request."""

from collections.abc import Iterator

from src.models.schemas import HistoryEntry, Role

FORMAT_INSTRUCTIONS = """You are a helpful assistant implemented in a modern chat interface that supports GitHub-flavored Markdown.
Use Markdown formatting in your responses to improve readability:

- Use **bold text** for emphasis or important information
- Use # Heading 1, ## Heading 2, and ### Heading 3 for section titles
- Use bulleted lists with - or * for unordered information
- Use numbered lists (1. 2. 3.) for sequential steps
- Format code with ``` language-name at the beginning and ``` at the end, including the language name for syntax highlighting
- Use `inline code` for short code references
- Create tables with | and - for structured data
- Use > for blockquotes

Your responses should be well-structured, informative, and visually appealing."""

FORMAT_ACKNOWLEDGMENT = (
    "I'll use markdown formatting in my responses to make them more readable and "
    "structured. I'll use various elements like lists, tables, code blocks with proper "
    "syntax highlighting, headings, and other formatting features when appropriate for "
    "the content. This will help make my responses more organized and easier to understand."
)

SEED_ENTRIES: tuple[HistoryEntry, ...] = (
    HistoryEntry(role=Role.USER, text=FORMAT_INSTRUCTIONS),
    HistoryEntry(role=Role.MODEL, text=FORMAT_ACKNOWLEDGMENT),
)


class ConversationHistory:
    """Append-only, role-tagged history seeded with the priming pair.

    The seed entries are never shown to the user but always lead the
    context. Entries are only removed by reset(), which truncates back
    to the seed pair.
    """

    def __init__(self, seed: tuple[HistoryEntry, ...] = SEED_ENTRIES) -> None:
        self._seed = seed
        self._entries: list[HistoryEntry] = list(seed)

    def append(self, role: Role, text: str) -> HistoryEntry:
        entry = HistoryEntry(role=role, text=text)
        self._entries.append(entry)
        return entry

    def reset(self) -> None:
        self._entries = list(self._seed)

    @property
    def seed_size(self) -> int:
        return len(self._seed)

    def entries(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(tuple(self._entries))
