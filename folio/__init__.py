"""Folio static site builder package.

This module is the root of the folio package, which turns a directory of
content items (one folder per item holding ``metadata.json`` and
``content.md``) into a fully materialized static HTML site.

Package Structure
-----------------
- `pipeline/site_builder/`:
    Headless build pipeline: content discovery, publication filtering,
    detail-page rendering, listing composition, output synchronization and
    the orchestrating runner.
- `build_site.py`: Command-line entry point (argument parsing, logging setup).
- `config.py`: All configuration constants (paths, filenames, defaults), as UPPER_SNAKE_CASE.
- `exceptions.py`: Project-specific exception classes.

Examples
--------
>>> from folio.pipeline.site_builder import SiteConfig, run_from_config
>>> # run_from_config(SiteConfig(content_dir=..., output_dir=...))
"""
