from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)

_SPLIT_RE = re.compile(r"\s*,\s*|\s+and\s+")
MIN_SPOKEN_LENGTH = 3


@dataclass(frozen=True)
class SpeechResult:
    transcript: str
    is_final: bool


class SpeechRecognizer(Protocol):
    """The slice of a platform speech engine that voice input relies on.

    The engine calls the ``on_*`` attributes; each may be left as None.
    """

    on_start: Optional[Callable[[], None]]
    on_result: Optional[Callable[[Sequence[SpeechResult], int], None]]
    on_error: Optional[Callable[[str], None]]
    on_end: Optional[Callable[[], None]]

    def start(self) -> None: ...

    def stop(self) -> None: ...


RecognizerFactory = Callable[[], Optional[SpeechRecognizer]]


def parse_transcript(text: str) -> list[str]:
    parts = (part.strip() for part in _SPLIT_RE.split(text.lower()))
    return [part for part in parts if len(part) >= MIN_SPOKEN_LENGTH]


class VoiceInput:
    def __init__(
        self,
        on_ingredient_detected: Callable[[str], None],
        recognizer_factory: RecognizerFactory | None = None,
    ) -> None:
        self._on_ingredient_detected = on_ingredient_detected
        self.is_listening = False
        self.transcript = ""
        self._recognizer = recognizer_factory() if recognizer_factory is not None else None
        if self._recognizer is not None:
            self._recognizer.on_start = self._handle_start
            self._recognizer.on_result = self._handle_result
            self._recognizer.on_error = self._handle_error
            self._recognizer.on_end = self._handle_end

    @property
    def supported(self) -> bool:
        return self._recognizer is not None

    def toggle(self) -> None:
        if self._recognizer is None:
            return
        if self.is_listening:
            self._recognizer.stop()
        else:
            self._recognizer.start()

    def close(self) -> None:
        if self._recognizer is not None:
            self._recognizer.stop()

    def _handle_start(self) -> None:
        self.is_listening = True
        self.transcript = ""

    def _handle_result(self, results: Sequence[SpeechResult], result_index: int = 0) -> None:
        interim = ""
        final = ""
        for result in results[result_index:]:
            if result.is_final:
                final += result.transcript
            else:
                interim += result.transcript

        self.transcript = interim or final

        if final:
            for ingredient in parse_transcript(final):
                self._on_ingredient_detected(ingredient)

    def _handle_error(self, error: str) -> None:
        logger.error("Speech recognition error: %s", error)
        self.is_listening = False

    def _handle_end(self) -> None:
        self.is_listening = False
