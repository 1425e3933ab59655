"""Ragged rows in, rectangular rows out."""

from data_translators.datasets.normalizer import fill_rows, to_dataset

__all__ = ["fill_rows", "to_dataset"]
