"""Rendered bills of the current session, oldest first."""

from __future__ import annotations


class OrderHistory:
    """Append-only, in-memory, unbounded. Nothing is deduplicated."""

    def __init__(self) -> None:
        self._bills: list[str] = []

    def append(self, bill_text: str) -> None:
        self._bills.append(bill_text)

    def all(self) -> list[str]:
        return list(self._bills)

    def __len__(self) -> int:
        return len(self._bills)
