class TranslatorError(Exception):
    """Base error; ``message`` is the text shown to the end user."""

    message = "翻訳処理中にエラーが発生しました"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ConfigurationError(TranslatorError):
    message = "API キーが設定されていません"


class UpstreamError(TranslatorError):
    message = "翻訳サービスとの通信中にエラーが発生しました"

    def __init__(self, status_code: int | None = None, payload=None):
        super().__init__()
        self.status_code = status_code
        self.payload = payload


class RecognitionError(TranslatorError):
    message = "音声認識の開始に失敗しました"


class TranslationRequestError(TranslatorError):
    message = "翻訳中にエラーが発生しました"
