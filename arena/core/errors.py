"""
Error classes for clearer exception sources.

Game-rule violations during a battle are never raised; they come back as
failed ``ActionResult`` values. These classes cover contract violations by the
calling layer and broken data files.
"""
from __future__ import annotations

class ArenaError(Exception):
    pass

class DataLoadError(ArenaError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed to load {path}: {detail}")
        self.path = path
        self.detail = detail

class ValidationError(ArenaError):
    pass

class ActionParseError(ValidationError):
    def __init__(self, payload: object, detail: str):
        super().__init__(f"Malformed action {payload!r}: {detail}")
        self.payload = payload
        self.detail = detail

class DraftError(ArenaError):
    pass
