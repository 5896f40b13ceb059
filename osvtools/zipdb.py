"""A local vulnerability database loaded from a zip archive of OSV records."""

from __future__ import annotations

import base64
import binascii
import io
import json
import os
import sys
import urllib.error
import urllib.request
import zipfile
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit

_CRC32C_POLY = 0x82F63B78
_HASH_PREFIX = "crc32c="
# The zero time marks a record that has not been withdrawn.
_ZERO_TIME_PREFIX = "0001-01-01T00:00:00"


def _crc32c_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        crc = n
        for _ in range(8):
            crc = (crc >> 1) ^ _CRC32C_POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _crc32c_table()


def crc32c(data: bytes) -> int:
    """CRC-32 checksum of ``data`` using the Castagnoli polynomial."""
    crc = 0xFFFFFFFF
    for byte in data:
        crc = _TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF


class DatabaseFetchError(Exception):
    """Raised when a database archive cannot be fetched or read."""


class OfflineDatabaseNotFoundError(DatabaseFetchError):
    """Raised when running offline and no cached archive exists."""

    def __init__(
        self, message: str = "no offline version of the OSV database is available"
    ) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class _Response:
    status: int
    reason: str
    headers: Any
    body: bytes


def _request(url: str, method: str, user_agent: str = "") -> _Response:
    scheme = urlsplit(url).scheme.lower()
    if scheme not in ("http", "https"):
        raise DatabaseFetchError(f"unsupported protocol scheme {scheme!r}")

    request = urllib.request.Request(url, method=method)
    if user_agent:
        request.add_header("User-Agent", user_agent)

    try:
        with urllib.request.urlopen(request) as response:
            return _Response(
                response.status, response.reason, response.headers, response.read()
            )
    except urllib.error.HTTPError as err:
        return _Response(err.code, str(err.reason), err.headers, b"")
    except (urllib.error.URLError, OSError, ValueError) as err:
        raise DatabaseFetchError(str(err)) from err


def _is_withdrawn(vulnerability: dict[str, Any]) -> bool:
    withdrawn = vulnerability.get("withdrawn")
    return bool(withdrawn) and not str(withdrawn).startswith(_ZERO_TIME_PREFIX)


@dataclass
class ZipDB:
    """OSV records read from a zip archive that is cached on disk."""

    name: str
    archive_url: str
    offline: bool
    stored_at: str
    user_agent: str = ""
    _vulnerabilities: list[dict[str, Any]] = field(
        init=False, default_factory=list, repr=False
    )

    def _fetch_remote_crc32c(self) -> int:
        response = _request(self.archive_url, "HEAD")
        if response.status != 200:
            raise DatabaseFetchError(
                f"db host returned {response.status} {response.reason}"
            )

        for value in response.headers.get_all("x-goog-hash") or []:
            if not value.startswith(_HASH_PREFIX):
                continue
            try:
                raw = base64.b64decode(value[len(_HASH_PREFIX):], validate=True)
            except binascii.Error as err:
                raise DatabaseFetchError(
                    f"could not decode crc32c= checksum: {err}"
                ) from err
            if len(raw) < 4:
                raise DatabaseFetchError("could not decode crc32c= checksum: too short")
            return int.from_bytes(raw[:4], "big")

        raise DatabaseFetchError("could not find crc32c= checksum")

    def _read_cache(self) -> bytes | None:
        try:
            with open(self.stored_at, "rb") as cache:
                return cache.read()
        except OSError:
            return None

    def _write_cache(self, body: bytes) -> None:
        try:
            os.makedirs(os.path.dirname(self.stored_at), mode=0o750, exist_ok=True)
            with open(self.stored_at, "wb") as cache:
                cache.write(body)
        except OSError as err:
            print(f"Failed to save database to {self.stored_at}: {err}", file=sys.stderr)

    def _fetch_zip(self) -> bytes:
        cache = self._read_cache()

        if self.offline:
            if cache is None:
                raise OfflineDatabaseNotFoundError()
            return cache

        if cache is not None and crc32c(cache) == self._fetch_remote_crc32c():
            return cache

        try:
            response = _request(self.archive_url, "GET", self.user_agent)
        except DatabaseFetchError as err:
            raise DatabaseFetchError(
                f"could not retrieve OSV database archive: {err}"
            ) from err

        if response.status != 200:
            raise DatabaseFetchError(
                f"db host returned {response.status} {response.reason}"
            )

        self._write_cache(response.body)
        return response.body

    def _load_entry(self, archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> None:
        try:
            content = archive.read(info)
        except (zipfile.BadZipFile, OSError, NotImplementedError) as err:
            print(f"Could not read {info.filename}: {err}", file=sys.stderr)
            return

        try:
            vulnerability = json.loads(content)
        except ValueError as err:
            print(f"{info.filename} is not a valid JSON file: {err}", file=sys.stderr)
            return

        if not isinstance(vulnerability, dict):
            print(
                f"{info.filename} is not a valid JSON file: expected an object",
                file=sys.stderr,
            )
            return

        self._vulnerabilities.append(vulnerability)

    def load(self) -> None:
        """Fetch the archive, using the cache where it is current, and read
        every ``.json`` record in it."""
        self._vulnerabilities = []
        body = self._fetch_zip()

        try:
            archive = zipfile.ZipFile(io.BytesIO(body))
        except zipfile.BadZipFile as err:
            raise DatabaseFetchError(
                f"could not read OSV database archive: {err}"
            ) from err

        with archive:
            for info in archive.infolist():
                if info.filename.endswith(".json"):
                    self._load_entry(archive, info)

    def vulnerabilities(self, include_withdrawn: bool) -> list[dict[str, Any]]:
        """The loaded records, optionally leaving out withdrawn ones."""
        if include_withdrawn:
            return list(self._vulnerabilities)
        return [v for v in self._vulnerabilities if not _is_withdrawn(v)]


def new_zipped_db(db_base_path: str, name: str, url: str, offline: bool) -> ZipDB:
    """Create a database cached under ``db_base_path/name`` and load it."""
    db = ZipDB(
        name=name,
        archive_url=url,
        offline=offline,
        stored_at=os.path.join(db_base_path, name, "all.zip"),
    )
    try:
        db.load()
    except DatabaseFetchError as err:
        raise type(err)(f"unable to fetch OSV database: {err}") from err
    return db