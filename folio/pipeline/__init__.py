"""Headless processing pipelines for the folio site builder."""
