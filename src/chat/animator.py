"""Typing animation that reveals a bot message one character at a time.

The animator is a single-slot state machine (Idle -> Animating -> Idle).
tick() is synchronous so the reveal can be driven step by step; animate()
wraps it in an asyncio task that sleeps a random per-character delay.

Starting a new animation always cancels the previous one first. Each
animation gets a generation number, and a scheduler task only ticks while
its generation is current, so two reveals can never interleave.
"""

import asyncio
import logging
import random
from collections.abc import Callable

from src.models.schemas import AnimationState

logger = logging.getLogger(__name__)

# Per-character delay bounds in seconds (10-20ms)
MIN_CHAR_DELAY = 0.010
MAX_CHAR_DELAY = 0.020


class TypingAnimator:
    """Cooperative reveal scheduler for one bot message at a time."""

    def __init__(
        self,
        on_progress: Callable[[int, str], None] | None = None,
        on_complete: Callable[[int], None] | None = None,
        delay_range: tuple[float, float] = (MIN_CHAR_DELAY, MAX_CHAR_DELAY),
        rng: random.Random | None = None,
    ) -> None:
        """Initialize an idle animator.

        Args:
            on_progress: Called with (message_index, displayed_text) after each tick.
            on_complete: Called with message_index when an animation finishes or is cancelled.
            delay_range: Bounds of the uniform per-character delay, in seconds.
            rng: Random source for delays.
        """
        self.on_progress = on_progress
        self.on_complete = on_complete
        self._delay_range = delay_range
        self._rng = rng or random.Random()
        self._active_index: int | None = None
        self._revealed = 0
        self._full_text = ""
        self._generation = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> AnimationState:
        return AnimationState(active_index=self._active_index, revealed_length=self._revealed)

    @property
    def is_animating(self) -> bool:
        return self._active_index is not None

    @property
    def active_index(self) -> int | None:
        return self._active_index

    @property
    def displayed_text(self) -> str:
        return self._full_text[: self._revealed]

    def next_delay(self) -> float:
        low, high = self._delay_range
        return self._rng.uniform(low, high)

    def start(self, message_index: int, full_text: str) -> None:
        """Begin revealing the message at message_index.

        Any animation in progress is cancelled first.
        """
        self.cancel()
        self._generation += 1
        self._active_index = message_index
        self._full_text = full_text
        self._revealed = 0
        if not full_text:
            self._finish()

    def tick(self) -> bool:
        """Reveal one more character.

        Returns:
            True while the animation is still running after this tick.
        """
        if self._active_index is None:
            return False

        if self._revealed < len(self._full_text):
            self._revealed += 1
            if self.on_progress:
                self.on_progress(self._active_index, self.displayed_text)

        if self._revealed >= len(self._full_text):
            self._finish()
            return False
        return True

    def cancel(self) -> None:
        """Stop the current animation and mark it complete."""
        task, self._task = self._task, None
        if task is not None and not task.done() and task is not _current_task():
            task.cancel()
        if self._active_index is not None:
            self._revealed = len(self._full_text)
            self._finish()

    def animate(self, message_index: int, full_text: str) -> asyncio.Task[None]:
        """Start an animation and schedule its ticks on the running loop.

        Returns:
            The scheduler task, already registered as the active one.
        """
        self.start(message_index, full_text)
        self._task = asyncio.create_task(self._run(self._generation))
        return self._task

    async def _run(self, generation: int) -> None:
        while self._generation == generation and self.is_animating:
            await asyncio.sleep(self.next_delay())
            if self._generation != generation:
                break
            self.tick()

    def _finish(self) -> None:
        index = self._active_index
        self._active_index = None
        if index is not None and self.on_complete:
            self.on_complete(index)


def _current_task() -> asyncio.Task | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None
