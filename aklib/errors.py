"""Error type carrying an errno code, a syscall name or a message."""

from __future__ import annotations

import os


class Error(Exception):
    """An error described by an errno code, a failed syscall, or a literal message."""

    def __init__(self, code: int = 0, string_literal: str = "", syscall: bool = False) -> None:
        self.code = code
        self.string_literal = string_literal
        self.syscall = syscall
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.syscall:
            return f"{self.string_literal}: {os.strerror(self.code)}"
        if self.code:
            return os.strerror(self.code)
        return self.string_literal

    @classmethod
    def from_errno(cls, code: int) -> "Error":
        return cls(code=code)

    @classmethod
    def from_syscall(cls, syscall_name: str, rc: int) -> "Error":
        """Error for a syscall that returned a negated errno value."""
        return cls(code=-rc, string_literal=syscall_name, syscall=True)

    @classmethod
    def from_string_literal(cls, string_literal: str) -> "Error":
        return cls(string_literal=string_literal)

    def is_errno(self) -> bool:
        return self.code != 0

    def is_syscall(self) -> bool:
        return self.syscall

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={self.code!r}, "
            f"string_literal={self.string_literal!r}, syscall={self.syscall!r})"
        )