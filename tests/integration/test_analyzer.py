"""
Integration tests for the full resume analysis pipeline.

Tests: resume text -> sections -> formatting/clarity/grammar/job fit -> report.
"""

import asyncio

import pytest

from sift.analyzer import ResumeAnalyzer
from sift.contexts.inspection.patterns import ClarityMessages, FormattingMessages, GrammarMessages
from sift.contexts.reporting.report import PositiveMessages, SuggestionMessages
from sift.contexts.reporting.highlights import find_highlights
from sift.contexts.intake.pdf_extractor import ParsedPdfContent, TextItem
from sift.utils.config import load_analysis_config


def _analyze(resume, job_description=None):
    return asyncio.run(ResumeAnalyzer(resume).analyze_resume(job_description))


@pytest.mark.integration
def test_clean_resume_is_all_clear(clean_resume, no_config_env):
    report = _analyze(clean_resume, "Python, Kubernetes and leadership")

    assert report.formatting == (PositiveMessages.FORMATTING,)
    assert report.clarity == (PositiveMessages.CLARITY,)
    assert report.grammar == (PositiveMessages.GRAMMAR,)
    assert report.job_fit.score == 100
    assert report.suggestions == (SuggestionMessages.ALL_CLEAR,)


@pytest.mark.integration
def test_messy_resume_issues(messy_resume, no_config_env):
    report = _analyze(messy_resume)

    assert report.formatting == (
        FormattingMessages.BLANK_LINE_RUN,
        FormattingMessages.BULLET_STYLE,
        FormattingMessages.REMOVE_PERIODS,
        FormattingMessages.LEADING_SPACING,
        FormattingMessages.DATE_FORMATS,
    )
    assert report.clarity == (
        ClarityMessages.ACTION_VERBS,
        ClarityMessages.METRICS,
        ClarityMessages.WEAK_PHRASES,
    )
    assert report.grammar == (
        GrammarMessages.MIXED_ENDINGS,
        GrammarMessages.OTHER_PUNCTUATION,
        GrammarMessages.CAPITALIZATION,
        GrammarMessages.MULTIPLE_SPACES,
        GrammarMessages.CONFUSED_WORDS,
    )
    assert report.job_fit is None
    assert report.suggestions == (
        SuggestionMessages.FORMATTING,
        SuggestionMessages.CLARITY,
        SuggestionMessages.GRAMMAR,
    )


@pytest.mark.integration
def test_analysis_is_idempotent(messy_resume, no_config_env):
    analyzer = ResumeAnalyzer(messy_resume)

    first = asyncio.run(analyzer.analyze_resume("python docker"))
    second = asyncio.run(analyzer.analyze_resume("python docker"))

    assert first == second
    assert first is not second
    assert analyzer.resume == messy_resume


@pytest.mark.integration
def test_individual_analyses_match_report(messy_resume, no_config_env):
    analyzer = ResumeAnalyzer(messy_resume)
    report = asyncio.run(analyzer.analyze_resume())

    assert asyncio.run(analyzer.check_formatting()) == report.formatting
    assert asyncio.run(analyzer.analyze_clarity()) == report.clarity
    assert asyncio.run(analyzer.check_grammar()) == report.grammar


@pytest.mark.integration
def test_sections_are_read_only(clean_resume, no_config_env):
    analyzer = ResumeAnalyzer(clean_resume)

    assert list(analyzer.sections) == ["EXPERIENCE", "EDUCATION", "SKILLS"]
    with pytest.raises(TypeError):
        analyzer.sections["EXTRA"] = "x"


@pytest.mark.integration
def test_resume_without_headers(no_config_env):
    """No sections: clarity asks for bullets, job fit still sees the raw text."""
    analyzer = ResumeAnalyzer("Jane Doe writes Python services")
    report = asyncio.run(analyzer.analyze_resume("python"))

    assert analyzer.sections == {}
    assert report.clarity == (ClarityMessages.NO_BULLETS,)
    assert report.job_fit.score == 100


@pytest.mark.integration
def test_empty_job_description_skips_job_fit(clean_resume, no_config_env):
    assert _analyze(clean_resume, "").job_fit is None


@pytest.mark.integration
def test_job_fit_example(no_config_env):
    report = _analyze("python react leadership", "python kubernetes leadership")

    assert report.job_fit.score == 67
    assert report.job_fit.missing_keywords == ("kubernetes",)
    assert "Consider adding keywords related to: kubernetes" in report.suggestions


@pytest.mark.integration
def test_config_thresholds_flow_through(clean_resume, no_config_env, tmp_path):
    override = tmp_path / "strict.yaml"
    override.write_text("job_fit:\n  passing_score: 101\n")
    analyzer = ResumeAnalyzer(clean_resume, config=load_analysis_config(override))

    report = asyncio.run(analyzer.analyze_resume("python"))

    # A perfect match still fails an unreachable bar, but nothing is missing
    assert report.job_fit.score == 100
    assert report.suggestions == ()
    assert report.formatting == ()


@pytest.mark.integration
def test_from_pdf_pipeline(no_config_env, monkeypatch, tmp_path):
    """PDF intake feeds the same pipeline and supplies highlight positions."""
    pdf_path = tmp_path / "resume.pdf"
    pdf_path.write_bytes(b"%PDF-1.4 stub")
    captured = {}

    def fake_extract(path, y_tolerance, word_gap):
        captured["args"] = (path, y_tolerance, word_gap)
        return ParsedPdfContent(
            text="EXPERIENCE\n• Helped the team\n- Led 5 engineers",
            items=(
                TextItem("•", 10.0, 20.0, 5.0, 10.0),
                TextItem("Helped", 20.0, 20.0, 30.0, 10.0),
            ),
            width=612.0,
            height=792.0,
            page_count=1,
        )

    monkeypatch.setattr("sift.analyzer.extract_pdf_content", fake_extract)

    analyzer, content = ResumeAnalyzer.from_pdf(pdf_path)
    report = asyncio.run(analyzer.analyze_resume())
    highlights = find_highlights(content.items, report)

    assert captured["args"] == (pdf_path, 3.0, 5.0)
    assert FormattingMessages.BULLET_STYLE in report.formatting
    assert [h.category for h in highlights] == ["formatting"]


@pytest.mark.integration
def test_from_pdf_missing_file(tmp_path, no_config_env):
    with pytest.raises(FileNotFoundError):
        ResumeAnalyzer.from_pdf(tmp_path / "missing.pdf")

