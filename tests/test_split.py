"""Tests for the eager split/wrap entry points."""

import pytest
from samples import (
    FAMILY,
    FLAG_ENGLAND,
    FLAG_US,
    PERSON_TREE,
    TECHNOLOGIST,
    THUMBS_DARK,
    WAVE_MEDIUM,
    keycap,
)

from bytewrap import GraphemeClusterTooLargeError, split, wrap

MAGNA_CARTA = (
    "If any earl, baron, or other person that holds lands directly of the "
    "Crown, for military service, shall die, and at his death his heir shall "
    "be of full age and owe a 'relief', the heir shall have his inheritance "
    "on payment of the ancient scale of 'relief'."
)

MAGNA_CARTA_JA = (
    "クラウンの直接土地を保持している任意の伯爵、男爵、または他の人は、"
    "兵役のために、死ぬ、と彼の死で彼の後継者は成年であることと「救済」を"
    "借りなければならない場合は、相続人は、支払いの彼の継承をもたなければ"
    "なりません「救済」の古代規模の。"
)

# Arabic with vowel marks and a shadda
MUHAMMAD = "\u0645\u064f\u062d\u064e\u0645\u0651\u064e\u062f"

MAGNA_CARTA_KO = (
    "크라운 의 직접 토지 를 보유하고 있는 백작 , 남작 , 또는 다른 사람이 "
    "군 복무 를 위해 죽을 것이요, 그의 죽음 에 그의 후계자 가 전체 연령 "
    "하고' 구호 '을 빚을 해야 하는 경우, 상속인 이 지불 에 대한 자신의 "
    "상속을 가져야한다 ' 구호 ' 의 고대 규모의 "
)


@pytest.mark.parametrize(
    ("text", "byte_limit", "expected"),
    [
        ("asdasd asd asdasd", 4, ["asda", "sd ", "asd ", "asda", "sd"]),
        (
            "\U0002070e\U00020731" "00" "\U00020779\U00020c53"
            "\U00020c78\U00020c96\U00020ccf\U00020cd5",
            9,
            [
                "\U0002070e\U00020731" "0",
                "0" "\U00020779\U00020c53",
                "\U00020c78\U00020c96",
                "\U00020ccf\U00020cd5",
            ],
        ),
        (
            MAGNA_CARTA,
            60,
            [
                "If any earl, baron, or other person that holds lands ",
                "directly of the Crown, for military service, shall die, and ",
                "at his death his heir shall be of full age and owe a ",
                "'relief', the heir shall have his inheritance on payment of ",
                "the ancient scale of 'relief'.",
            ],
        ),
        (
            MAGNA_CARTA_JA,
            60,
            [
                "クラウンの直接土地を保持している任意の伯",
                "爵、男爵、または他の人は、兵役のために、",
                "死ぬ、と彼の死で彼の後継者は成年であるこ",
                "とと「救済」を借りなければならない場合は",
                "、相続人は、支払いの彼の継承をもたなけれ",
                "ばなりません「救済」の古代規模の。",
            ],
        ),
        (
            MAGNA_CARTA_KO,
            60,
            [
                "크라운 의 직접 토지 를 보유하고 있는 백작 ",
                ", 남작 , 또는 다른 사람이 군 복무 를 위해 ",
                "죽을 것이요, 그의 죽음 에 그의 후계자 가 ",
                "전체 연령 하고' 구호 '을 빚을 해야 하는 ",
                "경우, 상속인 이 지불 에 대한 자신의 상속을 ",
                "가져야한다 ' 구호 ' 의 고대 규모의 ",
            ],
        ),
        (f"Hello {FAMILY} world", 32, [f"Hello {FAMILY} ", "world"]),
        (f"Test {PERSON_TREE} emoji here", 20, [f"Test {PERSON_TREE} ", "emoji here"]),
        (
            f"abcdefgh{FAMILY}ijklmn",
            30,
            ["abcdefgh", f"{FAMILY}ijklm", "n"],
        ),
        (
            f"{PERSON_TREE} and {FAMILY} test",
            30,
            [f"{PERSON_TREE} and ", f"{FAMILY} ", "test"],
        ),
        (f"{FAMILY} family", 30, [f"{FAMILY} ", "family"]),
        (f"family {FAMILY}", 30, ["family ", FAMILY]),
        ("नमस्ते क्षि test", 20, ["नमस्ते ", "क्षि test"]),
        ("श्री त्र द्ध test", 20, ["श्री ", "त्र द्ध ", "test"]),
        (
            f"السلام عليكم {MUHAMMAD} test",
            25,
            ["السلام عليكم ", f"{MUHAMMAD} test"],
        ),
        ("שָׁלוֹם test word", 20, ["שָׁלוֹם test ", "word"]),
        ("สวัสดี ฟ้า test", 20, ["สวัสดี ", "ฟ้า test"]),
        ("বাংলা ক্ষ test", 20, ["বাংলা ", "ক্ষ test"]),
        ("தமிழ் நீ கூ test", 20, ["தமிழ் ", "நீ கூ test"]),
        (
            f"Hello {WAVE_MEDIUM} {THUMBS_DARK} world",
            20,
            [f"Hello {WAVE_MEDIUM} ", f"{THUMBS_DARK} world"],
        ),
        (f"Test {TECHNOLOGIST} code", 20, [f"Test {TECHNOLOGIST} ", "code"]),
        (
            f"Numbers {keycap('1')} {keycap('2')} {keycap('3')} here",
            20,
            [f"Numbers {keycap('1')} ", f"{keycap('2')} {keycap('3')} ", "here"],
        ),
        (f"Hello {FLAG_US} test", 20, [f"Hello {FLAG_US} test"]),
        (
            "Tiếng Việt ệ test",
            20,
            ["Tiếng Việt ệ ", "test"],
        ),
    ],
)
def test_split(text, byte_limit, expected):
    assert split(text, byte_limit) == expected


@pytest.mark.parametrize(
    ("text", "byte_limit"),
    [
        (FAMILY, 20),
        (PERSON_TREE, 8),
        (f"test{FAMILY}end", 20),
        ("क्", 5),
        ("test नी", 5),
        ("ก้", 5),
        (FLAG_ENGLAND, 25),
        (f"test {WAVE_MEDIUM}", 7),
        (keycap("1"), 6),
        ("ệ", 2),
        ("し", 2),
    ],
)
def test_split_cluster_too_large(text, byte_limit):
    with pytest.raises(GraphemeClusterTooLargeError, match="exceeds byte limit"):
        split(text, byte_limit)


def test_split_error_describes_cluster():
    with pytest.raises(GraphemeClusterTooLargeError) as excinfo:
        split(f"test{FAMILY}end", 20)

    err = excinfo.value
    assert err.cluster == FAMILY
    assert err.cluster_size == 25
    assert err.byte_limit == 20
    assert err.byte_offset == 4
    assert isinstance(err, ValueError)


def test_split_empty_string():
    assert split("", 10) == []


def test_split_text_that_fits_is_single_line():
    assert split("Short", 20) == ["Short"]
    assert split("exactly10!", 10) == ["exactly10!"]


def test_split_japanese_within_limit():
    text = "クラウンの直接土地を保持している任意の伯爵、男爵"

    lines = split(text, 30)

    assert len(lines) == 3
    assert all(len(line.encode("utf-8")) <= 30 for line in lines)
    assert "".join(lines) == text


def test_split_zero_limit():
    assert split("", 0) == []
    with pytest.raises(GraphemeClusterTooLargeError):
        split("a", 0)


@pytest.mark.parametrize(
    ("text", "byte_limit", "expected"),
    [
        ("Hello world this is a test", 10, "Hello \nworld \nthis is a \ntest"),
        (
            "If any earl, baron, or other person that holds lands directly of "
            "the Crown",
            30,
            "If any earl, baron, or other \nperson that holds lands \n"
            "directly of the Crown",
        ),
        (
            "クラウンの直接土地を保持している任意の伯爵、男爵",
            30,
            "クラウンの直接土地を\n保持している任意の伯\n爵、男爵",
        ),
        (f"Hello {WAVE_MEDIUM} world", 15, f"Hello {WAVE_MEDIUM} \nworld"),
        ("Short", 20, "Short"),
        (
            f"{PERSON_TREE} and {FAMILY} test",
            30,
            f"{PERSON_TREE} and \n{FAMILY} \ntest",
        ),
    ],
)
def test_wrap(text, byte_limit, expected):
    assert wrap(text, byte_limit) == expected


@pytest.mark.parametrize(
    ("text", "byte_limit"),
    [
        (FAMILY, 20),
        (PERSON_TREE, 8),
        (f"test{FAMILY}end", 20),
        ("し", 2),
        ("ก้", 5),
    ],
)
def test_wrap_cluster_too_large(text, byte_limit):
    with pytest.raises(GraphemeClusterTooLargeError):
        wrap(text, byte_limit)


def test_wrap_custom_terminator():
    assert wrap("Hello world", 6, line_terminator="\r\n") == "Hello \r\nworld"
