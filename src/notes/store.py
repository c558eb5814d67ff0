"""
Notes Store — локальное хранилище заметок

Явный жизненный цикл вместо mount/unmount экрана:
- open(storage_key) → NotesState: загрузка сохраненных заметок
- close(state): запись документа (всегда, flush гарантирован)
- opened(storage_key): context manager, вызывающий close даже при исключении

Формат: один JSON документ на ключ, <root_dir>/<storage_key>.json,
проверяемый контрактом contracts/schema/notes_document.json.

Ключ хранилища выводится из имени пользователя через SHA-256;
пароль в ключ не входит.
"""

import hashlib
import json
import logging
import os
import re
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Final, Iterator, Optional

import jsonschema
from pydantic import ValidationError

from src.core.contracts import NotesDocumentValidator
from src.core.domain.note import Note, NotesDocument
from src.notes.session import NotesSession
from src.notes.validation import NoteValidator

logger = logging.getLogger(__name__)

DEFAULT_KEY_PREFIX: Final[str] = "notes-"

_SAFE_KEY_RE: Final[re.Pattern[str]] = re.compile(r"^[A-Za-z0-9_.-]+$")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NotesStorageError(Exception):
    """
    Сохраненный документ не читается или не соответствует контракту,
    либо ключ хранилища не является безопасным именем файла.
    """
    pass


# =============================================================================
# CONFIG & STATE
# =============================================================================


@dataclass(frozen=True)
class StorageConfig:
    """Конфигурация хранилища заметок."""

    root_dir: Path
    key_prefix: str = DEFAULT_KEY_PREFIX


@dataclass(frozen=True)
class NotesState:
    """Снапшот заметок одного ключа хранилища."""

    storage_key: str
    notes: tuple[Note, ...] = ()

    def with_note(self, note: Note) -> "NotesState":
        """Новый снапшот с заметкой в конце."""
        return NotesState(storage_key=self.storage_key, notes=self.notes + (note,))

    def to_document(self) -> NotesDocument:
        return NotesDocument(storage_key=self.storage_key, notes=self.notes)


def derive_storage_key(username: str, prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """
    Ключ хранилища для пользователя: prefix + sha256(username) в hex.
    """
    digest = hashlib.sha256(username.encode("utf-8")).hexdigest()
    return f"{prefix}{digest}"


# =============================================================================
# STORE
# =============================================================================


class NotesStore:
    """Файловое хранилище заметок с явными open/close."""

    def __init__(self, config: StorageConfig, validator: Optional[NoteValidator] = None):
        self.config = config
        self.note_validator = validator or NoteValidator()
        self._contract = NotesDocumentValidator()

    def key_for(self, username: str) -> str:
        return derive_storage_key(username, self.config.key_prefix)

    def path_for(self, storage_key: str) -> Path:
        """Путь к документу ключа.

        Raises:
            NotesStorageError: если ключ не является безопасным именем файла
        """
        if not _SAFE_KEY_RE.fullmatch(storage_key) or storage_key in (".", ".."):
            raise NotesStorageError(f"Unsafe storage key: {storage_key!r}")
        return self.config.root_dir / f"{storage_key}.json"

    def open(self, storage_key: str) -> NotesState:
        """
        Загрузка заметок ключа.

        Args:
            storage_key: ключ хранилища (см. derive_storage_key)

        Returns:
            NotesState; пустой, если документа еще нет

        Raises:
            NotesStorageError: документ поврежден или не соответствует контракту
        """
        path = self.path_for(storage_key)

        if not path.exists():
            logger.debug("No stored notes for %s", storage_key)
            return NotesState(storage_key=storage_key)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._contract.validate(data)
            document = NotesDocument.model_validate(data)
        except (OSError, json.JSONDecodeError, jsonschema.ValidationError, ValidationError) as e:
            logger.warning("Stored notes document %s is invalid: %s", path, e)
            raise NotesStorageError(f"Cannot load notes document {path.name}") from e

        if document.storage_key != storage_key:
            logger.warning(
                "Stored notes document %s has key %s", path, document.storage_key
            )
            raise NotesStorageError(f"Storage key mismatch in {path.name}")

        logger.debug("Loaded %d notes for %s", len(document.notes), storage_key)
        return NotesState(storage_key=storage_key, notes=document.notes)

    def close(self, state: NotesState) -> Path:
        """
        Запись заметок (flush).

        Документ пишется во временный файл и атомарно заменяет старый.

        Returns:
            Путь к записанному документу
        """
        path = self.path_for(state.storage_key)
        self.config.root_dir.mkdir(parents=True, exist_ok=True)

        data = state.to_document().model_dump(mode="json")
        self._contract.validate(data)

        # Уникальный временный файл на каждый вызов; при сбое он удаляется
        tmp = tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.config.root_dir,
            prefix=f"{state.storage_key}.",
            suffix=".tmp",
            delete=False,
        )
        tmp_path = Path(tmp.name)
        try:
            with tmp:
                json.dump(data, tmp, ensure_ascii=False, indent=2)
            os.replace(tmp_path, path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

        logger.info("Flushed %d notes for %s", len(state.notes), state.storage_key)
        return path

    @contextmanager
    def opened(self, storage_key: str) -> Iterator[NotesSession]:
        """
        Сессия заметок с гарантированным flush.

        Example:
            with store.opened(store.key_for("joe")) as session:
                session.add_note("Sum", "2+3")
        """
        session = NotesSession(self.open(storage_key), self.note_validator)
        try:
            yield session
        finally:
            self.close(session.state)
