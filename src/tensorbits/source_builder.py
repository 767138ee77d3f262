from __future__ import annotations

__all__ = ["SourceBuilder"]

from contextlib import contextmanager
from typing import Any, Callable, Dict, List


class SourceBuilder:
    """Accumulate lines of Python source and compile them into a function."""

    def __init__(self):
        self.lines: List[str] = []
        self.indent = 0

    def append(self, line: str):
        self.lines.append(" " * self.indent + line)

    def extend(self, lines: List[str]):
        for line in lines:
            self.append(line)

    @contextmanager
    def block(self, header: str, n: int = 4):
        self.append(header)
        self.indent += n
        try:
            yield
        finally:
            self.indent -= n

    def source(self) -> str:
        return "\n".join(self.lines) + "\n"

    def compile(self, name: str, namespace: Dict[str, Any]) -> Callable:
        code = compile(self.source(), f"<tensorbits kernel {name}>", "exec")
        scope = dict(namespace)
        exec(code, scope)
        return scope[name]
