"""Tests for Segmenter sentence and word splitting."""

from meeting_summarizer.services.segmenter import Segmenter


class TestSentences:
    """Tests for Segmenter.sentences."""

    def test_splits_on_terminal_punctuation(self):
        seg = Segmenter("The budget was approved today! Who owns the rollout plan? We ship next week.")
        assert list(seg.sentences()) == [
            "The budget was approved today",
            "Who owns the rollout plan",
            "We ship next week",
        ]

    def test_repeated_punctuation_is_one_boundary(self):
        seg = Segmenter("Wait, that cannot be right?!... Let us check the numbers again")
        assert list(seg.sentences()) == [
            "Wait, that cannot be right",
            "Let us check the numbers again",
        ]

    def test_short_fragments_dropped(self):
        seg = Segmenter("Hi. Ok. The quarterly numbers look strong.")
        assert list(seg.sentences()) == ["The quarterly numbers look strong"]

    def test_exactly_ten_characters_is_noise(self):
        seg = Segmenter("abcdefghij. abcdefghijk.")
        assert list(seg.sentences()) == ["abcdefghijk"]

    def test_length_measured_after_trim(self):
        seg = Segmenter("      short      . A much longer sentence here.")
        assert list(seg.sentences()) == ["A much longer sentence here"]

    def test_empty_input(self):
        assert list(Segmenter("").sentences()) == []

    def test_none_input(self):
        assert list(Segmenter(None).sentences()) == []  # type: ignore[arg-type]


class TestRawFragments:
    """Tests for Segmenter.raw_fragments."""

    def test_keeps_short_fragments(self):
        assert list(Segmenter("Hi. Ok. Go.").raw_fragments()) == ["Hi", "Ok", "Go"]

    def test_drops_empty_fragments(self):
        assert list(Segmenter("...!!").raw_fragments()) == []


class TestWords:
    """Tests for Segmenter.words."""

    def test_lowercases_and_splits_on_whitespace(self):
        seg = Segmenter("Project  Apollo\nkickoff\tMeeting.")
        assert list(seg.words()) == ["project", "apollo", "kickoff", "meeting."]

    def test_empty_input(self):
        assert list(Segmenter("   ").words()) == []


class TestRestartable:
    """The same segmenter serves several consumers."""

    def test_each_call_returns_fresh_iterator(self):
        seg = Segmenter("First sentence of the call. Second sentence of the call.")
        first = list(seg.sentences())
        second = list(seg.sentences())
        assert first == second
        assert len(first) == 2

    def test_words_and_sentences_independent(self):
        seg = Segmenter("Alpha bravo charlie delta echo.")
        sentences = seg.sentences()
        words = list(seg.words())
        assert words == ["alpha", "bravo", "charlie", "delta", "echo."]
        assert list(sentences) == ["Alpha bravo charlie delta echo"]
