"""This file defines the per-identity configuration store.

Every user or server has at most one JSON document at `<root>/<id>.json`.
Documents are always rewritten as a whole, and nothing serializes concurrent
writers for the same ID, so the last writer wins.
"""

import asyncio
import enum
import json
import logging
import os
import pathlib
import re
from dataclasses import dataclass
from typing import Any, Literal, Optional, Union

_logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]+")

ConfigKind = Literal["user", "server"]
CONFIG_KINDS: frozenset[str] = frozenset(("user", "server"))


class ReadStatus(enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    CORRUPT = "corrupt"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class ReadResult:
    status: ReadStatus
    document: Optional[dict[str, Any]] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.status is ReadStatus.OK


@dataclass(frozen=True)
class UserConfig:
    type: str
    language: Optional[str] = None

    FIELDS = frozenset(("language",))

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "UserConfig":
        _log_unknown_keys(document, cls.FIELDS)
        return cls(type=document["type"], language=document.get("language"))


@dataclass(frozen=True)
class ServerConfig:
    type: str
    language: Optional[str] = None

    FIELDS = frozenset(("language",))

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "ServerConfig":
        _log_unknown_keys(document, cls.FIELDS)
        return cls(type=document["type"], language=document.get("language"))


_VARIANTS: dict[str, Union[type[UserConfig], type[ServerConfig]]] = {
    "user": UserConfig,
    "server": ServerConfig,
}


def _log_unknown_keys(document: dict[str, Any], fields: frozenset[str]) -> None:
    unknown = document.keys() - fields - {"type"}
    if unknown:
        _logger.debug(
            "Ignoring unknown configuration keys: %s", ", ".join(sorted(unknown))
        )


class ConfigStore:
    def __init__(self, root: Union[str, os.PathLike] = "data/config") -> None:
        self.root = pathlib.Path(root)

    def path_for(self, id: Union[int, str]) -> Optional[pathlib.Path]:
        """Resolve the document path of the given user/server ID.

        Returns `None` for IDs that aren't plain tokens, as those can't be
        safely used as file names.
        """
        id = str(id)
        if not _ID_PATTERN.fullmatch(id):
            return None
        return (self.root / f"{id}.json").resolve()

    async def read_result(self, id: Union[int, str]) -> ReadResult:
        """Read the configuration document of a user/server, reporting exactly
        why a document could not be produced.

        Args:
            id (Union[int, str]): The ID of the user/server.

        Returns:
            ReadResult: `OK` along with the parsed document, or one of
              `NOT_FOUND`, `CORRUPT` or `IO_ERROR` along with the causing
              exception, if any.
        """
        path = self.path_for(id)
        if path is None:
            return ReadResult(ReadStatus.NOT_FOUND)

        try:
            raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError as exc:
            return ReadResult(ReadStatus.NOT_FOUND, error=exc)
        except (OSError, UnicodeDecodeError) as exc:
            return ReadResult(ReadStatus.IO_ERROR, error=exc)

        try:
            document = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            return ReadResult(ReadStatus.CORRUPT, error=exc)

        if not isinstance(document, dict) or document.get("type") not in CONFIG_KINDS:
            return ReadResult(ReadStatus.CORRUPT)

        return ReadResult(ReadStatus.OK, document=document)

    async def read(self, id: Union[int, str]) -> Optional[dict[str, Any]]:
        """Fetch the configuration document of a user/server.

        Missing, unreadable and malformed documents are all reported as `None`.
        """
        result = await self.read_result(id)
        if not result.ok:
            if result.status is not ReadStatus.NOT_FOUND:
                _logger.debug(
                    "Configuration for %s is unavailable (%s): %r",
                    id,
                    result.status.value,
                    result.error,
                )
            return None
        return result.document

    async def read_user_config(self, id: Union[int, str]) -> Optional[UserConfig]:
        document = await self.read(id)
        return UserConfig.from_document(document) if document is not None else None

    async def read_server_config(
        self, id: Union[int, str]
    ) -> Optional[ServerConfig]:
        document = await self.read(id)
        return ServerConfig.from_document(document) if document is not None else None

    async def write(self, id: Union[int, str], key: str, value: Any) -> bool:
        """Set a single key of an existing configuration document and persist
        the whole document again.

        Nothing is written if the user/server has no readable document yet.
        Failures are logged and never raised.

        Args:
            id (Union[int, str]): The ID of the user/server.
            key (str): The configuration key to change. Must belong to the
              document's kind.
            value (Any): The new JSON-serializable value.

        Returns:
            bool: Whether the document was written.
        """
        document = await self.read(id)
        if document is None:
            return False

        fields = _VARIANTS[document["type"]].FIELDS
        if key not in fields:
            _logger.warning(
                "Refusing to set unknown %s configuration key %r for %s",
                document["type"],
                key,
                id,
            )
            return False

        document[key] = value
        return await self._dump(id, document)

    async def create(
        self, id: Union[int, str], kind: ConfigKind, **fields: Any
    ) -> bool:
        """Create a new configuration document for a user/server that has none.

        Existing documents are never replaced, including unreadable ones.

        Args:
            id (Union[int, str]): The ID of the user/server.
            kind (ConfigKind): Either `"user"` or `"server"`.
            **fields (Any): Initial values, restricted to the keys of `kind`.

        Returns:
            bool: Whether a new document was written.

        Raises:
            ValueError: Unknown document kind or configuration keys.
        """
        if kind not in CONFIG_KINDS:
            raise ValueError(f"unknown configuration kind {kind!r}")

        unknown = fields.keys() - _VARIANTS[kind].FIELDS
        if unknown:
            raise ValueError(
                f"unknown {kind} configuration keys: {', '.join(sorted(unknown))}"
            )

        if (await self.read_result(id)).status is not ReadStatus.NOT_FOUND:
            return False

        return await self._dump(id, {"type": kind, **fields})

    async def _dump(self, id: Union[int, str], document: dict[str, Any]) -> bool:
        path = self.path_for(id)
        if path is None:
            return False

        try:
            data = json.dumps(document, indent=4)
            await asyncio.to_thread(_write_file, path, data)
        except (OSError, TypeError, ValueError) as exc:
            _logger.error(
                "Failed to write configuration for %s to '%s'", id, path, exc_info=exc
            )
            return False
        return True


def _write_file(path: pathlib.Path, data: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data, encoding="utf-8")
