"""
Template staging — copy the extension template into the output directory.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def stage_template(src: Path, dst: Path) -> bool:
    """Copy the template tree at *src* over *dst*.

    Existing files in *dst* are overwritten; files only in *dst* are
    left alone. Nothing happens when *src* is missing or when both
    paths point at the same directory.

    Returns:
        True if a copy was made.

    Raises:
        OSError: If the copy fails.
    """
    if src.resolve() == dst.resolve():
        logger.debug("Template and output are the same directory (%s), skipping copy", src)
        return False
    if not src.exists():
        logger.info("No extension template at %s, skipping copy", src)
        return False

    dst.mkdir(parents=True, exist_ok=True)
    shutil.copytree(str(src), str(dst), dirs_exist_ok=True)
    logger.info("Copied extension template %s → %s", src, dst)
    return True
