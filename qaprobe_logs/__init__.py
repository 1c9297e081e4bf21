"""
qaprobe_logs - evidence for qaprobe test runs

This package provides:
- Markdown run reports with named attachments
- An in-memory evidence sink for unit tests and quiet runs
- Screenshot capture and organisation
- Request/response attachment helpers

Usage:
    from qaprobe_logs import RunReport, take_screenshot

    report = RunReport(title="Smart TV search")
    await take_screenshot(driver, report, "Página inicial")
    report.finalize(success=True)
"""

from .run_report import Attachment, MemoryEvidence, RunReport, create_run_report
from .screenshots import cleanup_old_screenshots, get_run_screenshot_dir, take_screenshot
from .attachments import (
    attach_error_message,
    attach_request_body,
    attach_response_body,
    log_test_start,
)

__all__ = [
    # Reports
    'Attachment',
    'MemoryEvidence',
    'RunReport',
    'create_run_report',

    # Screenshots
    'cleanup_old_screenshots',
    'get_run_screenshot_dir',
    'take_screenshot',

    # Attachments
    'attach_error_message',
    'attach_request_body',
    'attach_response_body',
    'log_test_start',
]

__version__ = '1.0.0'
