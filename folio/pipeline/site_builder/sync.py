"""Output synchronizer: removes stale detail pages after a build.

Only ``*.html`` files directly inside the detail-page directory are
considered. Nothing outside that directory is listed or deleted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from folio.config import DETAIL_PAGE_SUFFIX

logger = logging.getLogger(__name__)


def remove_file(file_path: Path) -> bool:
    """Delete one file, best effort.

    Returns
    -------
    bool
        True if the file was removed. A file that is already gone and any
        other OS error both return False; the latter is logged.
    """
    try:
        file_path.unlink()
    except FileNotFoundError:
        return False
    except OSError as error:
        logger.error(f"Error removing file {file_path}: {error}")
        return False
    logger.info(f"Removed: {file_path}")
    return True


def sync_detail_pages(
    detail_dir: Path,
    rendered_ids: Iterable[str],
    preserve_ids: Iterable[str] = (),
) -> list[Path]:
    """Delete detail pages whose id was neither rendered nor preserved.

    Parameters
    ----------
    detail_dir : Path
        Directory holding the generated detail pages.
    rendered_ids : Iterable[str]
        Ids whose page was written during this run.
    preserve_ids : Iterable[str], optional
        Ids that still exist in the source but failed to load or render this
        run. Their previous page is kept instead of being treated as stale.

    Returns
    -------
    list[Path]
        The files that were removed.

    Examples
    --------
    >>> from pathlib import Path
    >>> sync_detail_pages(Path("/nonexistent/project"), ["a"])
    []
    """
    keep = set(rendered_ids) | set(preserve_ids)
    try:
        candidates = sorted(
            path
            for path in Path(detail_dir).iterdir()
            if path.suffix == DETAIL_PAGE_SUFFIX and path.is_file()
        )
    except FileNotFoundError:
        return []
    except OSError as error:
        logger.error(f"Error cleaning up old pages in {detail_dir}: {error}")
        return []
    removed: list[Path] = []
    for path in candidates:
        if path.stem in keep:
            continue
        if remove_file(path):
            removed.append(path)
    return removed
