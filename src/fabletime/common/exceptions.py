"""Contains all the custom-defined exceptions used in fabletime."""

from __future__ import annotations


class LocaleError(Exception):
    """Exception indicating a malformed or unknown locale."""


class NamedStoreError(Exception):
    """Raised during failed named persistence requests."""
