"""
Run Report - Markdown evidence log for one test run

Provides:
- Table of Contents generation
- Text, key-value, JSON and table sections
- Named attachments (text or PNG bytes), kept in memory as well
- Run summary

Page objects and API clients only see the ``attach(name, data)`` method,
so MemoryEvidence can stand in wherever no file is wanted.
"""

import json
import os
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Union

TOC_START = "<!-- TOC -->"
TOC_END = "<!-- /TOC -->"


@dataclass
class Attachment:
    """One piece of evidence recorded during a run"""
    name: str
    data: Union[str, bytes]
    path: Optional[str] = None

    @property
    def is_binary(self) -> bool:
        return isinstance(self.data, bytes)


class MemoryEvidence:
    """Evidence sink that only keeps attachments in memory."""

    def __init__(self):
        self.attachments: List[Attachment] = []

    def attach(self, name: str, data: Union[str, bytes]) -> Attachment:
        attachment = Attachment(name=name, data=data)
        self.attachments.append(attachment)
        return attachment

    def names(self) -> List[str]:
        return [a.name for a in self.attachments]

    def get(self, name: str) -> Optional[Attachment]:
        """Last attachment recorded under name"""
        for attachment in reversed(self.attachments):
            if attachment.name == name:
                return attachment
        return None


class RunReport(MemoryEvidence):
    """
    Markdown run report (with TOC and embedded screenshots).

    Usage:
        report = RunReport(title="Smart TV search", url="https://www.americanas.com.br/")

        report.log_heading("Search")
        report.attach("Busca realizada", await driver.screenshot())

        report.log_table(["Nome", "Preço"], [["TV 55", "3999.0"]], "Produtos")
        report.finalize(success=True, duration_ms=8200)
    """

    def __init__(
        self,
        title: str,
        url: Optional[str] = None,
        log_dir: Union[str, Path] = "./logs",
        screenshot_dir: Optional[Union[str, Path]] = None,
        session_id: Optional[str] = None,
    ):
        """
        Initialize the report file.

        Args:
            title: What the run exercises
            url: Target URL, if any
            log_dir: Directory for the Markdown file
            screenshot_dir: Where binary attachments are saved
                (defaults to <log_dir>/run-<session_id>)
            session_id: Optional run ID (timestamp when not provided)
        """
        super().__init__()
        self.session_id = session_id or datetime.now().strftime('%Y%m%d-%H%M%S')
        self.dir = Path(log_dir)
        self.dir.mkdir(parents=True, exist_ok=True)
        self.path = self.dir / f'run-{self.session_id}.md'
        self.screenshot_dir = Path(screenshot_dir) if screenshot_dir else self.dir / f'run-{self.session_id}'
        self._toc: List[str] = []

        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(f"# {title} ({self.session_id})\n\n")
            f.write("## Navigation\n\n")
            f.write(f"{TOC_START}\n(no sections yet)\n{TOC_END}\n\n")
            if url:
                f.write(f"- **URL**: {url}\n\n")

    def _write(self, text: str):
        with open(self.path, 'a', encoding='utf-8') as f:
            f.write(text)

    def log_heading(self, text: str):
        """Section heading, also added to the TOC"""
        self._write("\n---\n\n")
        self._write(f"## {text}\n\n")
        self._toc.append(text)
        self._update_toc()

    def log_text(self, text: str):
        self._write(f"{text}\n\n")

    def log_kv(self, key: str, value: Any):
        self._write(f"- {key}: {value}\n")

    def log_code(self, lang: str, code: str):
        self._write(f"```{lang}\n{code}\n```\n\n")

    def log_json(self, data: Any, title: str = "Data"):
        self._write(f"### {title}\n\n")
        self._write(f"```json\n{json.dumps(data, indent=2, ensure_ascii=False)}\n```\n\n")

    def log_image(self, image_path: Union[str, Path], alt: str = ""):
        """Embed an image using a path relative to the report"""
        img = Path(image_path)
        rel = os.path.relpath(img.resolve(), start=self.dir.resolve())
        self._write(f"![{alt or img.name}]({rel})\n\n")

    def log_table(self, headers: List[str], rows: List[List[Any]], title: str = ""):
        """
        Log a Markdown table.

        Args:
            headers: Column headers
            rows: Rows of cell values
            title: Optional title above the table
        """
        if title:
            self._write(f"### {title}\n\n")
        if not headers or not rows:
            return

        col_widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row[:len(headers)]):
                col_widths[i] = max(col_widths[i], len(str(cell)))

        self._write("| " + " | ".join(h.ljust(col_widths[i]) for i, h in enumerate(headers)) + " |\n")
        self._write("|" + "|".join("-" * (w + 2) for w in col_widths) + "|\n")
        for row in rows:
            padded = list(row) + [""] * (len(headers) - len(row))
            self._write("| " + " | ".join(str(c).ljust(col_widths[i]) for i, c in enumerate(padded[:len(headers)])) + " |\n")
        self._write("\n")

    def log_success(self, message: str):
        self._write(f"✅ **SUCCESS:** {message}\n\n")

    def log_warning(self, message: str):
        self._write(f"⚠️ **WARNING:** {message}\n\n")

    def log_error(self, message: str):
        self._write(f"❌ **ERROR:** {message}\n\n")

    def attach(self, name: str, data: Union[str, bytes]) -> Attachment:
        """
        Record a named attachment in the report.

        Bytes are saved as a PNG under screenshot_dir and embedded; text is
        written as a fenced block (pretty-printed when it parses as JSON).
        """
        attachment = super().attach(name, data)
        self._write(f"### 📎 {name}\n\n")

        if isinstance(data, bytes):
            self.screenshot_dir.mkdir(parents=True, exist_ok=True)
            target = self.screenshot_dir / f"{len(self.attachments):02d}_{self._slugify(name) or 'attachment'}.png"
            target.write_bytes(data)
            attachment.path = str(target)
            self.log_image(target, name)
            return attachment

        try:
            parsed = json.loads(data)
        except (TypeError, ValueError):
            self.log_code("text", str(data))
        else:
            self.log_code("json", json.dumps(parsed, indent=2, ensure_ascii=False))
        return attachment

    def finalize(self, success: bool, duration_ms: int = 0, error: Optional[str] = None):
        """
        Close the report with a summary.

        Args:
            success: Whether the run passed
            duration_ms: Total run time
            error: Failure message, if any
        """
        self._write("\n---\n\n")
        self._write("## Summary\n\n")
        self._write(f"**Status:** {'✅ SUCCESS' if success else '❌ FAILED'}\n")
        self._write(f"**Duration:** {duration_ms}ms\n")
        self._write(f"**Attachments:** {len(self.attachments)}\n")
        if error:
            self._write(f"\n**Error:** {error}\n")
        self._write("\n")

    # --- Helpers ---
    def _slugify(self, text: str) -> str:
        s = text.strip().lower()
        s = re.sub(r"[^a-z0-9\s-]", "", s)
        s = re.sub(r"\s+", "-", s)
        return s

    def _update_toc(self):
        content = self.path.read_text(encoding='utf-8')
        items = "\n".join(f"- [{title}](#{self._slugify(title)})" for title in self._toc)
        pattern = re.compile(re.escape(TOC_START) + r".*?" + re.escape(TOC_END), re.DOTALL)
        content = pattern.sub(lambda _: f"{TOC_START}\n{items}\n{TOC_END}", content, count=1)
        self.path.write_text(content, encoding='utf-8')

    @property
    def log_path(self) -> str:
        return str(self.path)


def create_run_report(
    title: str,
    url: Optional[str] = None,
    log_dir: Union[str, Path] = "./logs",
    screenshot_dir: Optional[Union[str, Path]] = None,
) -> RunReport:
    """Create a new run report"""
    return RunReport(title=title, url=url, log_dir=log_dir, screenshot_dir=screenshot_dir)
