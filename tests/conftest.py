"""
Shared fixtures for sift tests.

Loguru sinks are removed for every test so analyzer debug output never reaches
the terminal; tests that assert on log records add their own sink.
"""

import pytest
from loguru import logger


CLEAN_RESUME = """Jane Doe
Software Engineer
EXPERIENCE
Acme Corp 2019 - 2023
• Led a team of 5 engineers serving 300 users
• Increased test coverage by 40%
• Reduced cloud spend by $500 per month
EDUCATION
State University 2015 - 2019
SKILLS
Python, Kubernetes, Leadership"""


MESSY_RESUME = """  • John Smith
EXPERIENCE


• Helped the team with its migration.
- Worked on billing features
    • responsible for deployments.
Jan 2020 - 2021
PROJECTS
• Built a dashboard for 200 users!"""


@pytest.fixture(autouse=True)
def silence_logger():
    """Drop all loguru sinks for the duration of a test."""
    logger.remove()
    yield
    logger.remove()
    logger.disable("sift")


@pytest.fixture
def clean_resume():
    return CLEAN_RESUME


@pytest.fixture
def messy_resume():
    return MESSY_RESUME


@pytest.fixture
def no_config_env(monkeypatch):
    """Ensure SIFT_CONFIG_PATH from the environment or a .env file doesn't leak in."""
    monkeypatch.delenv("SIFT_CONFIG_PATH", raising=False)
