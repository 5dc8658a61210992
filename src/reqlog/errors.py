"""Exceptions raised by reqlog."""

from __future__ import annotations


class ReqLogError(Exception):
    """Base class for reqlog errors."""


class InvalidConfiguration(ReqLogError, ValueError):
    """Logger construction input is malformed (e.g. missing ``service``)."""
