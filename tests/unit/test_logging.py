"""Unit tests for session logging and context log prefixes."""

import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

from sift import __version__
from sift.contexts.inspection import check_grammar
from sift.contexts.targeting.job_fit import analyze_job_fit
from sift.utils.logger import new_session_dir, provenance_lines, setup_logger

REPO_ROOT = Path(__file__).resolve().parents[2]


@pytest.fixture
def captured():
    """Collect formatted log messages at DEBUG and above."""
    messages = []
    logger.enable("sift")
    logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.disable("sift")


@pytest.mark.unit
def test_new_session_dir_is_timestamped(tmp_path):
    session = new_session_dir("analyze", logs_root=tmp_path)

    assert session.parent == tmp_path
    assert session.name.startswith("analyze_")
    assert not session.exists()


@pytest.mark.unit
def test_setup_logger_writes_provenance(tmp_path):
    log_file = setup_logger(
        context_name="analyze",
        log_dir=tmp_path / "session",
        extra_provenance={"Resume": "resume.pdf"},
    )
    logger.debug("detail line")
    logger.remove()

    text = log_file.read_text()
    assert log_file.name == "analyze.log"
    assert f"SIFT: {__version__}" in text
    assert "Resume: resume.pdf" in text
    assert "detail line" in text


@pytest.mark.unit
def test_library_import_is_silent_by_default():
    """Analyzing without setup_logger() writes nothing to stderr."""
    code = (
        "import asyncio\n"
        "from sift.analyzer import ResumeAnalyzer\n"
        "asyncio.run(ResumeAnalyzer('EXPERIENCE\\n\\u2022 Helped the team').analyze_resume('python'))\n"
    )
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
    )

    assert result.returncode == 0, result.stderr
    assert result.stderr == ""


@pytest.mark.unit
def test_rule_hits_logged_with_prefix(captured):
    check_grammar("Proud of its culture", {})
    assert any(
        message.startswith("DEBUG [inspect] grammar: Review usage") for message in captured
    )


@pytest.mark.unit
def test_keywordless_job_description_warns(captured):
    analyze_job_fit("a an the", "python")
    assert any(message.startswith("WARNING [target]") for message in captured)


@pytest.mark.unit
def test_provenance_lines_include_version_and_extras():
    lines = provenance_lines({"Job description": "inline"})

    assert lines[0] == f"SIFT: {__version__}"
    assert lines[-1] == "Job description: inline"
