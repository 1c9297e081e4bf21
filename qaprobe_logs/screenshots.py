"""
Screenshot helpers - capture into an evidence sink and organise on disk

Directory layout:
    screenshots/
    └── domain/
        └── run-TIMESTAMP/
            ├── 01_pagina-inicial.png
            └── ...
"""

import logging
import shutil
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)


def get_run_screenshot_dir(base_dir: Union[str, Path], domain: str, run_id: str) -> Path:
    """
    Get (and create) the screenshot directory for one run.

    Args:
        base_dir: Base screenshots directory
        domain: Domain name (e.g., "www.americanas.com.br")
        run_id: Run identifier (e.g., "20251125-081436")

    Returns:
        Path to the run-specific directory
    """
    run_dir = Path(base_dir) / domain / f"run-{run_id}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def cleanup_old_screenshots(base_dir: Union[str, Path] = "screenshots", max_age_days: int = 7) -> int:
    """
    Remove run directories older than max_age_days.

    Returns:
        Number of run directories removed
    """
    base = Path(base_dir)
    if not base.exists():
        return 0

    cutoff = datetime.now() - timedelta(days=max_age_days)
    removed = 0

    for domain_dir in base.iterdir():
        if not domain_dir.is_dir():
            continue
        for run_dir in domain_dir.iterdir():
            if not run_dir.is_dir():
                continue
            mtime = datetime.fromtimestamp(run_dir.stat().st_mtime)
            if mtime < cutoff:
                try:
                    shutil.rmtree(run_dir)
                    removed += 1
                    logger.info(f"Removed old screenshots: {run_dir}")
                except OSError as e:
                    logger.warning(f"Failed to remove {run_dir}: {e}")

    return removed


async def take_screenshot(driver, sink, name: str) -> Optional[bytes]:
    """
    Capture the current viewport and attach it under name.

    Screenshots are evidence, not assertions: a failed capture is logged
    and returns None instead of failing the run.
    """
    try:
        data = await driver.screenshot()
    except Exception as e:
        logger.warning(f"Screenshot '{name}' failed: {e}")
        return None
    if sink is not None:
        sink.attach(name, data)
    logger.debug(f"Screenshot attached: {name}")
    return data
