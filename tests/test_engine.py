import pytest
from hangmanai.engine import (
    Constraints, filter_candidates, frequency_of, merge, choose_letter,
    InvalidLengthError, NoCandidateWordsError, NoUnguessedLettersError,
)

WORDS = ["cat", "dog", "bat", "rat", "goat", "letter", "at"]


# --- filter_candidates ---
def test_filter_length_only():
    assert filter_candidates(WORDS, 3) == ["cat", "dog", "bat", "rat"]
    assert filter_candidates(WORDS, 3, set(), {}) == ["cat", "dog", "bat", "rat"]


def test_filter_fixed_position():
    # after 't' is confirmed at index 2 of a 3-letter word
    words = ["cat", "bat", "rat", "dog"]
    assert filter_candidates(words, 3, set(), {"t": 2}) == ["cat", "bat", "rat"]


def test_filter_excluded_letters():
    cand = filter_candidates(WORDS, 3, {"c", "r"})
    assert cand == ["dog", "bat"]
    assert not any(ch in w for w in cand for ch in "cr")


def test_filter_combined_and_index_past_end():
    assert filter_candidates(WORDS, 4, {"d"}, {"g": 0, "t": 3}) == ["goat"]
    assert filter_candidates(WORDS, 3, (), {"a": 5}) == []


def test_filter_negative_index_never_matches():
    assert filter_candidates(["cat", "dog"], 3, (), {"t": -1}) == []


def test_filter_idempotent():
    once = filter_candidates(WORDS, 3, {"d"}, {"a": 1})
    assert filter_candidates(once, 3, {"d"}, {"a": 1}) == once


@pytest.mark.parametrize("length", [0, -3, 2.0, "3", None, True])
def test_filter_rejects_bad_length(length):
    with pytest.raises(InvalidLengthError):
        filter_candidates(WORDS, length)


# --- frequency / merge ---
@pytest.mark.parametrize("word", ["cat", "letter", "mississippi", "a"])
def test_frequency_sums_to_length(word):
    assert sum(frequency_of(word).values()) == len(word)


def test_frequency_counts_repeats():
    assert frequency_of("letter") == {"l": 1, "e": 2, "t": 2, "r": 1}


def test_merge_edge_cases():
    assert merge([]) == {}
    m = {"a": 2, "b": 0}
    assert merge([m]) == m


def test_merge_sums_over_union_of_keys():
    merged = merge([frequency_of("see"), frequency_of("sea"), {"z": 1}])
    assert merged == {"s": 2, "e": 3, "a": 1, "z": 1}


# --- choose_letter ---
def test_choose_letter_picks_max_frequency():
    # 'a' and 't' both appear 3 times among 3-letter words; lexicographic tie-break
    cand = filter_candidates(["cat", "dog", "bat", "rat"], 3)
    assert choose_letter(cand, set()) == "a"


def test_choose_letter_skips_guessed():
    cand = ["cat", "bat", "rat"]
    assert choose_letter(cand, {"a"}) == "t"
    assert choose_letter(cand, {"a", "t"}) == "b"


def test_choose_letter_repeats_outweigh_document_frequency():
    # 'e' twice in one word and 'o' once in two words tie at 2 ('e' wins on order);
    # 'x' three times in a single word beats both
    assert choose_letter(["ee", "oa", "ob", "xxx"], set()) == "x"
    assert choose_letter(["ee", "oa", "ob"], set()) == "e"


def test_choose_letter_never_returns_guessed():
    cand = ["cat", "bat", "rat", "dog"]
    guessed = set()
    for _ in range(len(set("".join(cand)))):
        letter = choose_letter(cand, guessed)
        assert letter not in guessed
        guessed.add(letter)
    with pytest.raises(NoUnguessedLettersError):
        choose_letter(cand, guessed)


def test_choose_letter_empty_candidates():
    with pytest.raises(NoCandidateWordsError):
        choose_letter([], set())


# --- Constraints ---
def test_constraints_are_replaced_not_mutated():
    c0 = Constraints()
    c1 = c0.with_wrong("x")
    c2 = c1.with_correct("a", 1)
    assert c0.excluded == frozenset() and c0.fixed == {}
    assert c1.excluded == {"x"} and c1.fixed == {}
    assert c2.excluded == {"x"} and c2.fixed == {"a": 1}
    assert c2.letters == {"x", "a"}


def test_constraints_reject_letter_both_fixed_and_excluded():
    with pytest.raises(ValueError):
        Constraints().with_correct("a", 0).with_wrong("a")


def test_constraints_hash_by_value():
    a = Constraints().with_wrong("x").with_correct("a", 1)
    b = Constraints(excluded=frozenset("x"), fixed={"a": 1})
    assert a == b
    assert hash(a) == hash(b)
    assert hash(Constraints()) == hash(Constraints())
