from miyazaki_dialect.kana import to_hiragana


def test_katakana_becomes_hiragana():
    assert to_hiragana("ヒンダレタ") == "ひんだれた"
    assert to_hiragana("ガッコウ") == "がっこう"
    assert to_hiragana("パン") == "ぱん"


def test_small_kana_are_converted():
    assert to_hiragana("キャッチュ") == "きゃっちゅ"


def test_long_vowel_mark_is_kept():
    assert to_hiragana("ラーメン") == "らーめん"


def test_kanji_become_placeholders():
    assert to_hiragana("宮崎弁です") == "？？？です"


def test_other_text_is_unchanged():
    assert to_hiragana("てげうまい! abc 123") == "てげうまい! abc 123"
    assert to_hiragana("") == ""


def test_katakana_outside_the_table_is_kept():
    assert to_hiragana("ヴァヰ") == "ヴァヰ"
