from __future__ import annotations

import os


class _Ansi:
    def __init__(self) -> None:
        self.enabled = (
            os.environ.get("NO_COLOR") is None
            and os.environ.get("TERM") not in (None, "", "dumb")
        )

    def _wrap(self, s: str, code: str) -> str:
        if not self.enabled:
            return s
        return f"\x1b[{code}m{s}\x1b[0m"

    def bold(self, s: str) -> str: return self._wrap(s, "1")
    def dim(self, s: str) -> str: return self._wrap(s, "2")

    def green(self, s: str) -> str: return self._wrap(s, "32")
    def cyan(self, s: str) -> str: return self._wrap(s, "36")


A = _Ansi()


def hr(char: str = "─", n: int = 72) -> str:
    return char * n
