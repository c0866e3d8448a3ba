"""
Resume analysis facade.

ResumeAnalyzer owns one resume's raw text and its section map and sequences the
analyzers from the inspection and targeting contexts into a finished report.

The public methods are coroutines so callers can drive analyses from an event
loop, but all work is pure computation: there is no I/O and nothing awaits
anything external. Each call builds its own report; the analyzer's text and
section map are never modified after construction.

Example:
    analyzer = ResumeAnalyzer(resume_text)
    report = asyncio.run(analyzer.analyze_resume(job_description))
"""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from omegaconf import DictConfig

from sift.contexts.inspection import analyze_clarity, check_formatting, check_grammar
from sift.contexts.intake.pdf_extractor import ParsedPdfContent, extract_pdf_content
from sift.contexts.intake.segmenter import parse_resume_sections
from sift.contexts.reporting.report import AnalysisReport, assemble_report
from sift.contexts.targeting.job_fit import JobFitResult, analyze_job_fit
from sift.utils.config import load_analysis_config


class ResumeAnalyzer:
    """
    Runs formatting, clarity, grammar and job-fit analysis on one resume.

    Attributes:
        resume: Raw resume text, exactly as given
        sections: Read-only section map built once at construction
        config: Analysis thresholds (see sift/configs/analysis.yaml)
    """

    def __init__(self, resume_text: str, config: Optional[DictConfig] = None):
        """
        Segment the resume and keep it for later analyses.

        Args:
            resume_text: Plain resume text, newline-separated
            config: Analysis thresholds (defaults to load_analysis_config())
        """
        self.config = config if config is not None else load_analysis_config()
        self._resume = resume_text
        self._sections = MappingProxyType(parse_resume_sections(resume_text))

    @classmethod
    def from_pdf(
        cls, pdf_path: Union[str, Path], config: Optional[DictConfig] = None
    ) -> Tuple["ResumeAnalyzer", ParsedPdfContent]:
        """
        Build an analyzer from the first page of a resume PDF.

        Args:
            pdf_path: Path to the resume PDF
            config: Analysis thresholds (defaults to load_analysis_config())

        Returns:
            (analyzer, extracted content); the content's word items feed
            find_highlights()

        Raises:
            FileNotFoundError: If the PDF doesn't exist
            ResumeExtractionError: If the PDF can't be parsed
        """
        if config is None:
            config = load_analysis_config()

        content = extract_pdf_content(
            pdf_path,
            y_tolerance=config.pdf.y_tolerance,
            word_gap=config.pdf.word_gap,
        )
        return cls(content.text, config=config), content

    @property
    def resume(self) -> str:
        return self._resume

    @property
    def sections(self) -> Mapping[str, str]:
        return self._sections

    async def check_formatting(self) -> Tuple[str, ...]:
        return check_formatting(
            self._resume,
            dict(self._sections),
            max_indent_levels=self.config.formatting.max_indent_levels,
        )

    async def analyze_clarity(self) -> Tuple[str, ...]:
        return analyze_clarity(
            dict(self._sections),
            min_bullet_length=self.config.clarity.min_bullet_length,
        )

    async def check_grammar(self) -> Tuple[str, ...]:
        return check_grammar(self._resume, dict(self._sections))

    async def analyze_job_fit(self, job_description: str) -> JobFitResult:
        return analyze_job_fit(job_description, self._resume)

    async def analyze_resume(self, job_description: Optional[str] = None) -> AnalysisReport:
        """
        Run every analyzer and assemble a report.

        Args:
            job_description: Optional job description; job fit is skipped when
                it is None or empty

        Returns:
            A new AnalysisReport
        """
        formatting = await self.check_formatting()
        clarity = await self.analyze_clarity()
        grammar = await self.check_grammar()
        job_fit = await self.analyze_job_fit(job_description) if job_description else None

        return assemble_report(
            formatting,
            clarity,
            grammar,
            job_fit,
            passing_score=self.config.job_fit.passing_score,
        )
