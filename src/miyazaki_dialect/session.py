"""State behind the translator page."""

import logging
from typing import Awaitable, Callable, Optional

from miyazaki_dialect.errors import RecognitionError, TranslationRequestError, TranslatorError
from miyazaki_dialect.kana import to_hiragana
from miyazaki_dialect.request import Direction
from miyazaki_dialect.speech import SpeechInputProvider, SpeechOptions, SpeechSynthesizer

logger = logging.getLogger(__name__)

Translator = Callable[[str, Direction], Awaitable[str]]

RECOGNITION_ERROR_PREFIX = "音声認識エラー: "


class TranslatorSession:
    def __init__(
        self,
        translator: Translator,
        speech_input: Optional[SpeechInputProvider] = None,
        speech_output: Optional[SpeechSynthesizer] = None,
        speech_options: SpeechOptions = SpeechOptions(),
    ):
        self.translator = translator
        self.speech_input = speech_input
        self.speech_output = speech_output
        self.speech_options = speech_options

        self.input_text = ""
        self.direction = Direction.TO_STANDARD
        self.translated_text: Optional[str] = None
        self.error: Optional[str] = None
        self.is_loading = False
        self.is_listening = False

        if speech_input is not None:
            speech_input.on_start(self._handle_listening_start)
            speech_input.on_partial_result(self._handle_partial_result)
            speech_input.on_error(self._handle_recognition_error)
            speech_input.on_end(self._handle_listening_end)

    @property
    def has_recognition_support(self) -> bool:
        return self.speech_input is not None

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and bool(self.input_text.strip())

    def set_input(self, text: str):
        self.input_text = text

    async def submit(self) -> Optional[str]:
        if not self.can_submit:
            return None

        self.is_loading = True
        self.error = None
        try:
            self.translated_text = await self.translator(self.input_text, self.direction)
            return self.translated_text
        except TranslatorError as e:
            logger.error(f"Translation failed: {e}")
            self.error = e.message
            return None
        except Exception as e:
            logger.error(f"Error translating text: {e}")
            self.error = TranslationRequestError.message
            return None
        finally:
            self.is_loading = False

    def toggle_direction(self) -> Direction:
        self.direction = self.direction.opposite
        self.input_text = ""
        self.translated_text = None
        self.error = None
        return self.direction

    def toggle_listening(self):
        if self.speech_input is None:
            return
        if self.is_listening:
            self.stop_listening()
        else:
            self.start_listening()

    def start_listening(self):
        if self.speech_input is None or self.is_listening:
            return
        try:
            self.speech_input.start()
        except RecognitionError as e:
            logger.error(f"Could not start speech recognition: {e}")
            self.error = e.message

    def stop_listening(self):
        if self.speech_input is None:
            return
        try:
            self.speech_input.stop()
        except RecognitionError as e:
            logger.error(f"Could not stop speech recognition: {e}")

    def read_aloud(self, **options) -> bool:
        if self.speech_output is None or not self.translated_text:
            return False
        self.speech_output.speak(self.translated_text, self.speech_options.merged(**options))
        return True

    def stop_reading(self):
        if self.speech_output is not None:
            self.speech_output.cancel()

    def _handle_listening_start(self):
        self.is_listening = True
        self.error = None

    def _handle_partial_result(self, transcript: str):
        if transcript:
            self.input_text += to_hiragana(transcript)

    def _handle_recognition_error(self, code: str):
        self.error = f"{RECOGNITION_ERROR_PREFIX}{code}"
        self.is_listening = False

    def _handle_listening_end(self):
        self.is_listening = False
