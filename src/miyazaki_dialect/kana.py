import re

# ア..ン plus voiced, semi-voiced and small forms. ー stays as-is.
KATAKANA = "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヲン" \
    "ガギグゲゴザジズゼゾダヂヅデドバビブベボパピプペポャュョッ"
HIRAGANA = "あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみむめもやゆよらりるれろわをん" \
    "がぎぐげござじずぜぞだぢづでどばびぶべぼぱぴぷぺぽゃゅょっ"

KANA_TABLE = str.maketrans(KATAKANA, HIRAGANA)

KANJI_PATTERN = re.compile("[一-鿿]")
KANJI_PLACEHOLDER = "？"


def to_hiragana(text: str) -> str:
    """
    Best-effort script normalization for recognized speech.

    Katakana in the table becomes hiragana. Kanji cannot be read without a
    dictionary, so each one is replaced with a placeholder.
    """
    return KANJI_PATTERN.sub(KANJI_PLACEHOLDER, text.translate(KANA_TABLE))
