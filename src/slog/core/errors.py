from __future__ import annotations

class SlogError(Exception):
    """Base for errors raised by slog."""

class FormatError(SlogError, ValueError):
    def __init__(self, template: str, detail: str):
        super().__init__(f"Bad log template '{template}': {detail}")
        self.template = template
        self.detail = detail

class StreamError(SlogError):
    def __init__(self, stream_name: str, detail: str):
        super().__init__(f"Writing to '{stream_name}' failed: {detail}")
        self.stream_name = stream_name
        self.detail = detail
