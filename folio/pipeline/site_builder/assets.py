"""Static asset copying for the generated site.

Mirrors ``<assets>/styles/**/*.css`` and ``<assets>/js/*.js`` into the output
root. The styles directory is required once an asset root is configured;
the scripts directory is optional.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from folio.config import SCRIPTS_SUBDIR, STYLES_SUBDIR
from folio.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _copy_matching(source_dir: Path, dest_dir: Path, pattern: str) -> list[Path]:
    copied: list[Path] = []
    for source in sorted(source_dir.glob(pattern)):
        if not source.is_file():
            continue
        target = dest_dir / source.relative_to(source_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
        copied.append(target)
    return copied


def copy_static_assets(assets_dir: Path, output_dir: Path) -> list[Path]:
    """Copy stylesheets and scripts from ``assets_dir`` into ``output_dir``.

    Parameters
    ----------
    assets_dir : Path
        Asset source root holding ``styles/`` and optionally ``js/``.
    output_dir : Path
        Output root of the site.

    Returns
    -------
    list[Path]
        The copied destination files.

    Raises
    ------
    ConfigurationError
        If the styles directory is missing or copying fails.
    """
    styles_dir = Path(assets_dir) / STYLES_SUBDIR
    if not styles_dir.is_dir():
        raise ConfigurationError(
            f"Missing styles directory: {styles_dir}",
            context={"assets_dir": str(assets_dir)},
        )
    try:
        copied = _copy_matching(styles_dir, Path(output_dir) / STYLES_SUBDIR, "**/*.css")
        scripts_dir = Path(assets_dir) / SCRIPTS_SUBDIR
        if scripts_dir.is_dir():
            copied += _copy_matching(
                scripts_dir, Path(output_dir) / SCRIPTS_SUBDIR, "*.js"
            )
        else:
            logger.info("No JS directory to copy, skipping")
    except OSError as exc:
        raise ConfigurationError(
            f"Error copying static assets: {exc}",
            context={"assets_dir": str(assets_dir)},
        ) from exc
    logger.info(f"Copied {len(copied)} static assets")
    return copied
