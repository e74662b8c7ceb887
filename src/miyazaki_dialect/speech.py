"""Speech recognition and synthesis surfaces used by the translator session."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, List, Optional

from miyazaki_dialect.errors import RecognitionError

logger = logging.getLogger(__name__)

SPEECH_LANG = "ja-JP"


class SpeechInputProvider(ABC):
    continuous = False
    interim_results = True
    lang = SPEECH_LANG

    def __init__(self):
        self._on_start: Optional[Callable[[], None]] = None
        self._on_partial_result: Optional[Callable[[str], None]] = None
        self._on_error: Optional[Callable[[str], None]] = None
        self._on_end: Optional[Callable[[], None]] = None

    def on_start(self, callback: Callable[[], None]):
        self._on_start = callback

    def on_partial_result(self, callback: Callable[[str], None]):
        self._on_partial_result = callback

    def on_error(self, callback: Callable[[str], None]):
        self._on_error = callback

    def on_end(self, callback: Callable[[], None]):
        self._on_end = callback

    @abstractmethod
    def start(self):
        """Begin a listening session. Raises RecognitionError on failure."""

    @abstractmethod
    def stop(self):
        """End the listening session; ``on_end`` fires once it has ended."""

    def _emit_start(self):
        if self._on_start:
            self._on_start()

    def _emit_partial_result(self, transcript: str):
        if self._on_partial_result:
            self._on_partial_result(transcript)

    def _emit_error(self, code: str):
        if self._on_error:
            self._on_error(code)

    def _emit_end(self):
        if self._on_end:
            self._on_end()


class ScriptedSpeechInput(SpeechInputProvider):
    """Recognizer driven by the caller instead of a microphone."""

    def __init__(self, fail_on_start: bool = False):
        super().__init__()
        self.fail_on_start = fail_on_start
        self.active = False
        self.start_calls = 0

    def start(self):
        self.start_calls += 1
        if self.fail_on_start:
            raise RecognitionError()
        if self.active:
            return
        self.active = True
        self._emit_start()

    def stop(self):
        if not self.active:
            return
        self.finish()

    def say(self, transcript: str):
        if not self.active:
            raise RuntimeError("recognizer is not listening")
        self._emit_partial_result(transcript)

    def fail(self, code: str):
        # The browser ends the session after reporting an error.
        self._emit_error(code)
        self.finish()

    def finish(self):
        self.active = False
        self._emit_end()


@dataclass(frozen=True)
class SpeechOptions:
    rate: float = 1.0
    pitch: float = 1.0
    volume: float = 1.0
    lang: str = SPEECH_LANG
    voice: Optional[str] = None

    def merged(self, **overrides: Any) -> "SpeechOptions":
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown speech options: {', '.join(sorted(unknown))}")
        return replace(
            self, **{k: v for k, v in overrides.items() if v is not None}
        )


class SpeechSynthesizer(ABC):
    @abstractmethod
    def speak(self, text: str, options: SpeechOptions):
        pass

    @abstractmethod
    def cancel(self):
        pass

    @abstractmethod
    def get_voices(self) -> List[str]:
        pass


@dataclass
class Utterance:
    text: str
    options: SpeechOptions


class RecordingSpeechSynthesizer(SpeechSynthesizer):
    def __init__(self, voices: Optional[List[str]] = None):
        self.voices = list(voices or [])
        self.spoken: List[Utterance] = []
        self.current: Optional[Utterance] = None

    def speak(self, text: str, options: SpeechOptions):
        if options.voice is not None and options.voice not in self.voices:
            logger.warning(f"Voice {options.voice} is not available")
        self.current = Utterance(text, options)
        self.spoken.append(self.current)

    def cancel(self):
        self.current = None

    def get_voices(self) -> List[str]:
        return list(self.voices)
