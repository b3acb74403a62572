import pytest

from comment_spam.config import FEATURES
from comment_spam.features import (
    extract_emojis,
    extract_features,
    find_spammy_emojis,
    find_spammy_words,
    jaccard_similarity,
    text_complexity,
)


def test_spammy_allowlists_sizes():
    assert len(FEATURES.spammy_emojis) == 14
    assert len(set(FEATURES.spammy_emojis)) == 14
    assert 25 <= len(FEATURES.spammy_keywords) <= 35


def test_every_spammy_emoji_is_extractable():
    text = "".join(FEATURES.spammy_emojis)
    assert extract_emojis(text) == list(FEATURES.spammy_emojis)


def test_extract_emojis_keeps_order_and_duplicates():
    assert extract_emojis("a 🔥 b 👍 c 🔥 ☀ ✂") == ["🔥", "👍", "🔥", "☀", "✂"]


def test_extract_emojis_ignores_plain_text():
    assert extract_emojis("no emoji here :)") == []
    assert extract_emojis("") == []


def test_spammy_emojis_filter_keeps_duplicates():
    assert find_spammy_emojis(["💰", "👍", "💰", "🔗"]) == ["💰", "💰", "🔗"]


def test_spammy_words_substring_match_and_duplicates():
    words = find_spammy_words("FREE stuff, free gifts and Deals")
    assert words == ["free", "free", "deals"]


def test_spammy_words_substring_over_matching_is_preserved():
    # "cheapen" contains "cheap": substring matching is intentional
    assert find_spammy_words("do not cheapen it") == ["cheapen"]
    assert find_spammy_words("open the window") == ["window"]


def test_spammy_words_none_in_benign_comment():
    assert find_spammy_words("Wow this looks great! 👍") == []


@pytest.mark.parametrize(
    "a,b",
    [
        ("the cat sat", "a cat stood there"),
        ("Hello World", "world peace"),
        ("", "something"),
    ],
)
def test_jaccard_is_symmetric(a, b):
    assert jaccard_similarity(a, b) == jaccard_similarity(b, a)


def test_jaccard_identical_and_disjoint():
    assert jaccard_similarity("Same words here", "same WORDS here") == 1.0
    assert jaccard_similarity("alpha beta", "gamma delta") == 0.0


def test_jaccard_empty_union_is_zero():
    assert jaccard_similarity("", "   ") == 0.0


def test_jaccard_partial_overlap():
    # {a, b, c} vs {b, c, d}: 2 / 4
    assert jaccard_similarity("a b c", "b c d") == pytest.approx(0.5)


def test_text_complexity_formula():
    # words: "Hi," (3) "there!" (6) -> avg 4.5, 2 punctuation marks, 2 words
    expected = 4.5 * 0.3 + 2 * 0.1 + 2 * 0.05
    assert text_complexity("Hi, there!") == pytest.approx(expected)


def test_text_complexity_empty_is_zero():
    assert text_complexity("") == 0.0
    assert text_complexity("   \n\t ") == 0.0


def test_text_complexity_is_capped():
    assert text_complexity("!" * 500) == 10.0


def test_extract_features_for_benign_pair():
    f = extract_features("Check out this amazing product!", "Wow this looks great! 👍")
    assert f.emoji_count == 1
    assert f.emoji_types == ("👍",)
    assert f.spammy_emoji_count == 0
    assert f.spammy_word_count == 0
    assert f.comment_length == len("Wow this looks great! 👍")
    # {check, out, this, amazing, product!} vs {wow, this, looks, great!, 👍}
    assert f.similarity == pytest.approx(1 / 9)


def test_extract_features_dedupes_spammy_words_but_counts_all():
    f = extract_features("post", "free free FREE click")
    assert f.spammy_word_count == 4
    assert f.spammy_words == ("free", "click")


def test_features_are_immutable():
    f = extract_features("post", "comment")
    with pytest.raises(Exception):
        f.emoji_count = 5


def test_emoji_list_fields_cannot_be_mutated_in_place():
    f = extract_features("post", "free 🔥 👍")
    assert isinstance(f.emoji_types, tuple)
    assert isinstance(f.spammy_emojis, tuple)
    assert isinstance(f.spammy_words, tuple)
    with pytest.raises(AttributeError):
        f.emoji_types.append("💰")
