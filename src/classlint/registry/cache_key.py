# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fingerprint every input that influences registry contents."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Sequence
from typing import Final

from ..config import CatalogueSetting, CatalogueSettings
from .files import ResolvedFile

_ENCODING: Final[str] = "utf-8"
_ABSENT_MARKER: Final[bytes] = b"\x00absent"

SECTION_FILES: Final[bytes] = b"files"
SECTION_ALLOWLIST: Final[bytes] = b"allowlist"
SECTION_BLOCKLIST: Final[bytes] = b"blocklist"
SECTION_CATALOGUE: Final[bytes] = b"catalogue"
SECTION_CWD: Final[bytes] = b"cwd"


def serialize_catalogue_setting(setting: CatalogueSetting) -> bytes:
    """Return a deterministic encoding of the catalogue setting.

    Args:
        setting: ``None`` when unset, a boolean flag, or explicit settings.

    Returns:
        bytes: Encoding in which ``None`` is distinct from every concrete value.
    """

    if setting is None:
        return _ABSENT_MARKER
    if isinstance(setting, CatalogueSettings):
        payload: object = setting.model_dump(mode="json")
    else:
        payload = setting
    return json.dumps(payload, sort_keys=True, separators=(",", ":")).encode(_ENCODING)


class _DigestStream:
    """Length-prefixed field writer so adjacent fields can never alias."""

    __slots__ = ("_hasher",)

    def __init__(self) -> None:
        self._hasher = hashlib.sha256()

    def field(self, value: bytes) -> None:
        self._hasher.update(len(value).to_bytes(8, "big"))
        self._hasher.update(value)

    def text(self, value: str) -> None:
        self.field(value.encode(_ENCODING, errors="surrogatepass"))

    def section(self, tag: bytes, count: int) -> None:
        self.field(tag)
        self._hasher.update(count.to_bytes(8, "big"))

    def strings(self, tag: bytes, values: Sequence[str]) -> None:
        self.section(tag, len(values))
        for value in values:
            self.text(value)

    def hexdigest(self) -> str:
        return self._hasher.hexdigest()


def build_cache_key(
    resolved_files: Iterable[ResolvedFile],
    allowlist: Sequence[str],
    blocklist: Sequence[str],
    catalogue: CatalogueSetting,
    cwd: str,
) -> str:
    """Return the SHA-256 fingerprint of a registry configuration.

    Fields are streamed in a fixed order: resolved files (path then
    modification time, in resolution order), allowlist patterns, blocklist
    patterns, catalogue setting, working directory. Any differing byte in
    any field yields a different digest.

    Args:
        resolved_files: Stylesheet files with modification times.
        allowlist: Allowlist entries in configured order.
        blocklist: Blocklist entries in configured order.
        catalogue: Catalogue flag or settings; ``None`` when unset.
        cwd: Working directory the configuration was resolved against.

    Returns:
        str: 64-character lowercase hexadecimal digest.
    """

    stream = _DigestStream()
    files = tuple(resolved_files)
    stream.section(SECTION_FILES, len(files))
    for resolved in files:
        stream.text(resolved.path)
        stream.text(repr(resolved.mtime))
    stream.strings(SECTION_ALLOWLIST, allowlist)
    stream.strings(SECTION_BLOCKLIST, blocklist)
    stream.section(SECTION_CATALOGUE, 1)
    stream.field(serialize_catalogue_setting(catalogue))
    stream.section(SECTION_CWD, 1)
    stream.text(cwd)
    return stream.hexdigest()


__all__ = ["build_cache_key", "serialize_catalogue_setting"]
