"""
Shared utilities for SIFT.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Analysis configuration loading
- PDF character and word grouping
- Timestamps for session naming
"""

from sift.utils.config import load_analysis_config
from sift.utils.timestamp import now, now_exact

__all__ = ["load_analysis_config", "now", "now_exact"]
