import pytest

from raqim.services.evaluator import (
    count_words,
    detect_contradictions,
    evaluate_length,
    evaluate_repetition,
    evaluate_response,
    evaluate_structure,
)


def _words(n: int) -> str:
    return " ".join(["word"] * n)


class TestEvaluateLength:
    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (10, 30),
            (19, 30),
            (20, 60),
            (30, 60),
            (49, 60),
            (50, 100),
            (150, 100),
            (200, 100),
            (201, 90),
            (300, 90),
            (400, 90),
            (401, 75),
            (500, 75),
            (600, 75),
            (601, 50),
            (700, 50),
        ],
    )
    def test_word_count_bands(self, n: int, expected: int):
        assert evaluate_length(_words(n)).score == expected

    def test_empty_and_blank_text_are_too_short(self):
        assert evaluate_length("").score == 30
        assert evaluate_length("   \n\t ").score == 30

    def test_blank_text_counts_one_token(self):
        assert count_words("") == 1
        assert count_words("  a  b\n c  ") == 3

    def test_feedback_is_present(self):
        assert evaluate_length(_words(100)).feedback == "طول الرد مثالي ومناسب."


class TestEvaluateRepetition:
    def test_too_few_sentences_is_no_signal(self):
        result = evaluate_repetition("short. tiny. ok")
        assert result.score == 100
        assert result.feedback == "لا يوجد تكرار ملحوظ."

    def test_sentence_repeated_three_times_scores_40(self):
        sentence = "The quick brown fox jumps over the lazy dog"
        text = ". ".join([sentence] * 3) + "."
        result = evaluate_repetition(text)
        assert result.score == 40

    def test_single_duplicate_sentence_scores_70(self):
        text = (
            "Please review the document carefully. "
            "Please review the document carefully. "
            "Then send your feedback soon."
        )
        assert evaluate_repetition(text).score == 70

    def test_diverse_text_scores_100(self):
        text = (
            "The weather is pleasant today. "
            "We walked along the river bank. "
            "Dinner was served at eight."
        )
        result = evaluate_repetition(text)
        assert result.score == 100
        assert result.feedback == "لا يوجد تكرار. المحتوى متنوع وجيد."

    def test_arabic_comma_splits_sentences(self):
        text = "هذه جملة طويلة بما يكفي، هذه جملة طويلة بما يكفي"
        assert evaluate_repetition(text).score == 70

    def test_sentence_comparison_ignores_case(self):
        text = "Hello there my good friend\nhello there my good friend\nSomething else entirely"
        assert evaluate_repetition(text).score == 70

    def test_many_repeated_trigrams_score_40(self):
        # Six distinct trigrams recur three times, no sentence repeats
        chunk = "alpha beta gamma delta epsilon zeta eta theta"
        text = f"{chunk} one! {chunk} two? {chunk} three."
        assert evaluate_repetition(text).score == 40

    @pytest.mark.parametrize(
        ("chunk_words", "expected"),
        [
            (5, 70),  # 3 repeated trigrams
            (7, 70),  # 5 repeated trigrams
            (8, 40),  # 6 repeated trigrams
        ],
    )
    def test_repeated_trigram_thresholds(self, chunk_words: int, expected: int):
        vocabulary = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta"]
        chunk = " ".join(vocabulary[:chunk_words])
        text = f"{chunk} one! {chunk} two? {chunk} three."
        assert evaluate_repetition(text).score == expected


class TestEvaluateStructure:
    def test_plain_paragraph_scores_base(self):
        result = evaluate_structure("Just a simple sentence without any formatting at all")
        assert result.score == 70
        assert result.feedback == "بنية جيدة. يمكن إضافة تنظيم أفضل."

    def test_paragraphs_list_and_header_capped_at_100(self):
        text = "# Title\n\nIntro paragraph here.\n\n- first item\n- second item"
        result = evaluate_structure(text)
        assert result.score == 100
        assert result.feedback.startswith("بنية ممتازة: ")

    def test_all_bonuses_still_capped(self):
        text = "## Setup\n\nRun this:\n\n1. install\n2. run `make`"
        assert evaluate_structure(text).score == 100

    def test_paragraphs_and_list_reach_excellent_tier(self):
        text = "First paragraph.\n\n* bullet one\n* bullet two"
        result = evaluate_structure(text)
        assert result.score == 90
        assert "تقسيم جيد للفقرات" in result.feedback
        assert "استخدام جيد للقوائم" in result.feedback

    def test_bold_line_counts_as_header(self):
        result = evaluate_structure("**Overview**\nSome text follows here")
        assert result.score == 80
        assert result.feedback == "بنية جيدة. وجود عناوين تنظيمية"

    def test_numbered_list(self):
        assert evaluate_structure("Steps:\n1. Open\n2. Close").score == 80

    def test_inline_code(self):
        assert evaluate_structure("Run `pip install` now").score == 75

    def test_fenced_code(self):
        assert evaluate_structure("Example:\n```\nprint(1)\n```").score == 75

    def test_four_hashes_is_not_a_header(self):
        assert evaluate_structure("#### too deep").score == 70

    def test_dash_inside_a_line_is_not_a_list(self):
        assert evaluate_structure("well - maybe not").score == 70

    def test_arabic_indic_digits_are_not_a_numbered_list(self):
        assert evaluate_structure("١. افتح الملف").score == 70


class TestEvaluateResponse:
    def test_overall_is_rounded_mean(self):
        result = evaluate_response("")
        assert result.length.score == 30
        assert result.repetition.score == 100
        assert result.structure.score == 70
        assert result.overall_score == 67

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "hello",
            _words(120),
            "# Title\n\n- a list item here\n- another list item\n\nClosing paragraph text.",
            "The quick brown fox jumps over the lazy dog. " * 5,
        ],
    )
    def test_overall_invariant(self, text: str):
        result = evaluate_response(text)
        mean = (result.length.score + result.repetition.score + result.structure.score) / 3
        assert result.overall_score == round(mean)
        assert 0 <= result.overall_score <= 100

    def test_is_idempotent(self):
        text = "# Plan\n\n- step one is here\n- step two is there\n\nDone for today."
        assert evaluate_response(text) == evaluate_response(text)


class TestDetectContradictions:
    def test_arabic_must_and_must_not(self):
        result = detect_contradictions("يجب الحضور. لا يجب التأخير.")
        assert 'تناقض محتمل بين "يجب" و "لا يجب"' in result

    def test_end_to_end_arabic_pairs(self):
        result = detect_contradictions("نعم هذا صحيح دائماً. لكن لا هذا خاطئ أبداً.")
        assert result == [
            'تناقض محتمل بين "دائماً" و "أبداً"',
            'تناقض محتمل بين "نعم" و "لا"',
            'تناقض محتمل بين "صحيح" و "خاطئ"',
        ]

    def test_one_side_only_is_empty(self):
        assert detect_contradictions("Always double check your work before submitting it.") == []
        assert detect_contradictions("يجب عليك الحضور مبكراً.") == []

    def test_cross_sentence_pairs_fire(self):
        result = detect_contradictions("It is always true in theory. Never say never again please.")
        assert result == ['تناقض محتمل بين "always" و "never"']

    def test_order_follows_table(self):
        result = detect_contradictions(
            "You say yes and I say no to that. We always disagree and never agree."
        )
        assert len(result) == 2
        assert '"always"' in result[0]
        assert '"yes"' in result[1]

    def test_short_fragments_are_ignored(self):
        assert detect_contradictions("yes. no.") == []

    def test_empty_text(self):
        assert detect_contradictions("") == []
