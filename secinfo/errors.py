# secinfo/errors.py
from __future__ import annotations


class MalformedCSVError(ValueError):
    """A roster line without the ``name,url`` separator."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"file is not a CSV file: Text: {text}")


class LookupFailed(Exception):
    """Base for per-streamer SullyGnome failures (never fatal to a run)."""


class RemoteUnavailable(LookupFailed):
    pass


class DecodeFailure(LookupFailed):
    pass


class TemplateAnchorError(ValueError):
    def __init__(self, anchor: str, template_name: str = "template"):
        self.anchor = anchor
        super().__init__(f"anchor {anchor!r} not found in {template_name}")
