"""Functions that yield characters similar to a given one."""

from __future__ import annotations

from itertools import chain
from typing import Iterator

_LAYOUT = (
    "1234567890",
    "qwertyuiop",
    "asdfghjkl;",
    "zxcvbnm,./",
)
_SHIFTED_LAYOUT = (
    "!@#$%^&*()",
    "QWERTYUIOP",
    "ASDFGHJKL:",
    "ZXCVBNM<>?",
)

# Neighbour offsets in the order: up-left, up, up-right, left, right,
# down-left, down, down-right.
_NEIGHBOUR_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def _find(ch: str, layout: tuple[str, ...]) -> tuple[int, int] | None:
    for row, keys in enumerate(layout):
        col = keys.find(ch)
        if col >= 0:
            return row, col
    return None


def _build_misclicks() -> dict[str, tuple[str, ...]]:
    n_rows = len(_LAYOUT)
    n_cols = len(_LAYOUT[0])
    table: dict[str, tuple[str, ...]] = {}
    for code in range(ord(" "), ord("~") + 1):
        ch = chr(code)
        position = _find(ch, _LAYOUT)
        if position is not None:
            row, col = position
            toggled = _SHIFTED_LAYOUT[row][col]
        else:
            position = _find(ch, _SHIFTED_LAYOUT)
            if position is None:
                continue
            row, col = position
            toggled = _LAYOUT[row][col]

        neighbours = [
            (row + dr, col + dc)
            for dr, dc in _NEIGHBOUR_OFFSETS
            if 0 <= row + dr < n_rows and 0 <= col + dc < n_cols
        ]
        table[ch] = (
            toggled,
            *(_LAYOUT[r][c] for r, c in neighbours),
            *(_SHIFTED_LAYOUT[r][c] for r, c in neighbours),
        )
    return table


_MISCLICKS = _build_misclicks()


def qwerty_misclicks(ch: str) -> Iterator[str]:
    """Yield every character that ``ch`` could be a QWERTY misclick of.

    The first item is the same key with the other shift state, followed by
    the unshifted and then the shifted neighbouring keys.
    """
    return iter(_MISCLICKS.get(ch, ()))


_VARIANTS: dict[str, str] = {
    # Latin
    "a": "âãäàáąāÂÃÄÀÁĄĀ",
    "c": "ćčçĆČÇ",
    "d": "ďđðĎĐÐ",
    "e": "êëèéęēÊËÈÉĘĒ",
    "g": "ğģĞĢ",
    "h": "ĥĤ",
    "i": "îïìíīįĩıİÎÏÌÍĪĮĨIİ",
    "j": "ĵĴ",
    "k": "ķĶ",
    "l": "ĺļľłĹĻĽŁ",
    "n": "ñńňņÑŃŇŅ",
    "o": "ôõöòóøōőÔÕÖÒÓØŌŐ",
    "r": "řŕŗŘŔŖ",
    "s": "śšşșßŚŠŞȘẞ",
    "t": "ťţțŤŢȚ",
    "u": "ûüùúūűÛÜÙÚŪŰ",
    "w": "ŵŴ",
    "y": "ŷÿýŶŸÝ",
    "z": "žźżŽŹŻ",
    # Cyrillic
    "е": "ёЁ",
    "и": "йЙ",
    "і": "їЇ",
    "у": "ўЎ",
    "ь": "ъЪ",
    # Greek
    "α": "άΆ",
    "ε": "έΈ",
    "η": "ήΉ",
    "ι": "ίϊΐΊΪΐ",
    "ο": "όΌ",
    "υ": "ύϋΰΎΫΰ",
    "ω": "ώΏ",
    # Hiragana
    "あ": "アぁァ",
    "い": "イぃィ",
    "う": "ウぅゥ",
    "え": "エぇェ",
    "お": "オぉォ",
    "か": "カがガゕヵ",
    "き": "キぎギ",
    "く": "クぐグ",
    "け": "ケげゲゖヶ",
    "こ": "コごゴ",
    "さ": "サざザ",
    "し": "シじジ",
    "す": "スずズ",
    "せ": "セぜゼ",
    "そ": "ソぞゾ",
    "た": "タだダ",
    "ち": "チぢヂ",
    "つ": "ツづヅっッ",
    "て": "テでデ",
    "と": "トどド",
    "な": "ナ",
    "に": "ニ",
    "ぬ": "ヌ",
    "ね": "ネ",
    "の": "ノ",
    "は": "ハばバぱパ",
    "ひ": "ヒびビぴピ",
    "ふ": "フぶブぷプ",
    "へ": "ヘべベぺペ",
    "ほ": "ホぼボぽポ",
    "ま": "マ",
    "み": "ミ",
    "む": "ム",
    "め": "メ",
    "も": "モ",
    "や": "ヤゃャ",
    "ゆ": "ユゅュ",
    "よ": "ヨょョ",
    "ら": "ラ",
    "り": "リ",
    "る": "ル",
    "れ": "レ",
    "ろ": "ロ",
    "わ": "ワゎヮ",
    "を": "ヲ",
    "ん": "ン",
    # Katakana
    "ア": "あぁァ",
    "イ": "いぃィ",
    "ウ": "うぅゥ",
    "エ": "えぇェ",
    "オ": "おぉォ",
    "カ": "かがゕヵガ",
    "キ": "きぎギ",
    "ク": "くぐグ",
    "ケ": "けげゖヶゲ",
    "コ": "こごゴ",
    "サ": "さざザ",
    "シ": "しじジ",
    "ス": "すずズ",
    "セ": "せぜゼ",
    "ソ": "そぞゾ",
    "タ": "ただダ",
    "チ": "ちぢヂ",
    "ツ": "つづヅっッ",
    "テ": "てでデ",
    "ト": "とどド",
    "ナ": "な",
    "ニ": "に",
    "ヌ": "ぬ",
    "ネ": "ね",
    "ノ": "の",
    "ハ": "はばぱバパ",
    "ヒ": "ひびぴビピ",
    "フ": "ふぶぷブプ",
    "ヘ": "へべぺベペ",
    "ホ": "ほぼぽボポ",
    "マ": "ま",
    "ミ": "み",
    "ム": "む",
    "メ": "め",
    "モ": "も",
    "ヤ": "やゃャ",
    "ユ": "ゆゅュ",
    "ヨ": "よょョ",
    "ラ": "ら",
    "リ": "り",
    "ル": "る",
    "レ": "れ",
    "ロ": "ろ",
    "ワ": "わゎヮ",
    "ヲ": "を",
    "ン": "ん",
}


def variants(ch: str) -> Iterator[str]:
    """Yield variants of ``ch``: diacritics, other kana registers and the like."""
    return iter(_VARIANTS.get(ch, ""))


def all_lookalikes(ch: str) -> Iterator[str]:
    """Yield every lookalike of ``ch`` known to this module."""
    return chain(qwerty_misclicks(ch), variants(ch))