"""
Summary: Rewrite mount-prefixed POSIX paths in raw output back to drive form.
Why: Host tools parse paths printed by the POSIX-side program.
"""

from __future__ import annotations

from typing import ClassVar, final

from .drive_mapper import DEFAULT_MOUNT_ROOT


@final
class ReverseTranslator:
    """Single-pass scanner replacing ``/mnt/<letter>/...`` with ``<letter>:/...``.

    Works on bytes because subprocess output is not guaranteed to decode.
    Only the matched spans change; every other byte is copied as is.
    """

    WHITESPACE: ClassVar[frozenset[int]] = frozenset(b" \t\n\r\x0b\x0c")

    marker: bytes

    def __init__(self, mount_root: str = DEFAULT_MOUNT_ROOT) -> None:
        self.marker = mount_root.rstrip("/").encode("utf-8") + b"/"

    def to_host(self, data: bytes) -> bytes:
        """Translate every qualifying path occurrence in ``data``."""

        marker = self.marker
        marker_length = len(marker)
        size = len(data)
        chunks: list[bytes] = []
        copied = 0
        position = data.find(marker)

        while position != -1:
            letter_index = position + marker_length
            slash_index = letter_index + 1
            if (
                slash_index < size
                and self._is_ascii_letter(data[letter_index])
                and data[slash_index] == 0x2F
            ):
                end = slash_index + 1
                while end < size and data[end] not in self.WHITESPACE:
                    end += 1
                chunks.append(data[copied:position])
                chunks.append(data[letter_index:slash_index] + b":")
                chunks.append(data[slash_index:end])
                copied = end
                position = data.find(marker, end)
            else:
                position = data.find(marker, position + 1)

        if copied == 0:
            return bytes(data)
        chunks.append(data[copied:])
        return b"".join(chunks)

    @staticmethod
    def _is_ascii_letter(value: int) -> bool:
        return 0x41 <= value <= 0x5A or 0x61 <= value <= 0x7A


__all__ = ["ReverseTranslator"]
