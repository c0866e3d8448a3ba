"""Unit tests for the grammar analyzer."""

import pytest

from sift.contexts.inspection.grammar import (
    check_common_mistakes,
    check_grammar,
    is_sentence_line,
    needs_capital,
)
from sift.contexts.inspection.patterns import GrammarMessages
from sift.contexts.intake.segmenter import parse_resume_sections


@pytest.mark.unit
class TestSentenceSelection:
    def test_long_line_is_sentence(self):
        assert is_sentence_line("• Built a payments service for retail")

    def test_short_line(self):
        assert not is_sentence_line("Python, Go")

    def test_label_line(self):
        assert not is_sentence_line("Stack: Python, Go, Postgres and Redis")

    def test_title_like_line(self):
        assert not is_sentence_line("Senior Engineer at Acme Corporation")


@pytest.mark.unit
class TestNeedsCapital:
    def test_lowercase_sentence(self):
        assert needs_capital("• reduced latency across services.")

    def test_unpunctuated_line_ignored(self):
        assert not needs_capital("• reduced latency across services")

    def test_allowed_lowercase_terms(self):
        assert not needs_capital("• iOS app shipped to the store.")
        assert not needs_capital("e-commerce platform rebuilt from scratch.")

    def test_digit_start_allowed(self):
        assert not needs_capital("3 services migrated to the cloud.")


@pytest.mark.unit
class TestCommonMistakes:
    def test_confused_word(self):
        assert check_common_mistakes("Proud of its culture") == [GrammarMessages.CONFUSED_WORDS]

    def test_confused_word_case_insensitive(self):
        assert check_common_mistakes("It's done") == [GrammarMessages.CONFUSED_WORDS]

    def test_multiple_spaces(self):
        assert check_common_mistakes("Led  the team") == [GrammarMessages.MULTIPLE_SPACES]

    def test_newline_runs_count_as_spacing(self):
        assert check_common_mistakes("Led\n\nthe team") == [GrammarMessages.MULTIPLE_SPACES]

    def test_repeated_punctuation(self):
        assert check_common_mistakes("Wait.. what") == [GrammarMessages.REPEATED_PUNCTUATION]

    def test_conjunction_punctuation(self):
        assert check_common_mistakes("Python and, Go") == [GrammarMessages.CONJUNCTION_PUNCTUATION]

    def test_clean_text(self):
        assert check_common_mistakes("Led the team") == []


@pytest.mark.unit
class TestCheckGrammar:
    """Tests for check_grammar function."""

    def test_clean_resume(self, clean_resume):
        assert check_grammar(clean_resume, parse_resume_sections(clean_resume)) == ()

    def test_mixed_endings(self):
        sections = {
            "PROJECTS": "• Built a payments service for retail.\n• Designed the search ranking pipeline\n"
        }
        assert check_grammar("", sections) == (GrammarMessages.MIXED_ENDINGS,)

    def test_other_punctuation(self):
        sections = {"PROJECTS": "• Shipped the mobile app to production!\n"}
        assert check_grammar("", sections) == (GrammarMessages.OTHER_PUNCTUATION,)

    def test_capitalization(self):
        sections = {"PROJECTS": "• reduced latency across services.\n"}
        assert check_grammar("", sections) == (GrammarMessages.CAPITALIZATION,)

    def test_irrelevant_sections_ignored(self):
        sections = {"EDUCATION": "• studied physics at the university.\n"}
        assert check_grammar("", sections) == ()

    def test_messages_deduplicated(self):
        sections = {"EXPERIENCE": "• reduced latency across services.\n• lowered costs for the team.\n"}
        assert check_grammar("", sections) == (GrammarMessages.CAPITALIZATION,)

    def test_whole_text_rules_use_resume(self):
        """Mechanical rules scan the raw text even without any sections."""
        assert check_grammar("Proud of its culture", {}) == (GrammarMessages.CONFUSED_WORDS,)
