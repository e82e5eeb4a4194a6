"""YAML-backed hierarchical settings document.

Implements ``SettingsStorePort`` on top of a single YAML file. Values are
addressed by dotted paths (``lang.noPermission`` is the ``noPermission``
entry of the ``lang`` section). Registered defaults live beside the
document and are only written to disk when copy-defaults is enabled.

Typed getters never raise. They return the explicit value when it has the
right shape, else the registered default when that has the right shape,
else the zero value of the type.

Usage:
    store = YamlSettingsStore("plugins/SelectionVisualizer/config.yml")
    store.ensure_document()
    store.add_default("maxSize", 10000)
    store.get_int("maxSize")
"""

from __future__ import annotations

import copy
import os
import shutil
import tempfile
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from selvis.foundation.domain.exceptions import SettingsDocumentError
from selvis.foundation.domain.setting_descriptors import SettingType, matches_type
from selvis.infra.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from selvis.infra.persistence.store_settings import StoreSettings

logger = get_logger(__name__)

_MISSING = object()


def _lookup(document: dict[str, Any], key: str) -> Any:
    node: Any = document
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return _MISSING
        node = node[part]
    # explicit nulls count as absent
    return _MISSING if node is None else node


def _assign(document: dict[str, Any], key: str, value: Any) -> None:
    *parents, leaf = key.split(".")
    node = document
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            child = {}
            node[part] = child
        node = child
    if value is None:
        node.pop(leaf, None)
    else:
        node[leaf] = value


class YamlSettingsStore:
    """Settings document persisted as YAML.

    Args:
        path: Location of the YAML document.
        template_path: Optional document copied into place by
            ``ensure_document()`` when ``path`` does not exist.
        indent: Indentation width used when saving.

    Attributes:
        save_count: Number of successful ``save()`` calls.
    """

    def __init__(
        self,
        path: str | Path,
        *,
        template_path: str | Path | None = None,
        indent: int = 2,
    ) -> None:
        self._path = Path(path)
        self._template_path = Path(template_path) if template_path is not None else None
        self._indent = indent
        self._document: dict[str, Any] = {}
        self._defaults: dict[str, Any] = {}
        self._copy_defaults = False
        self._lock = threading.RLock()
        self.save_count = 0

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> YamlSettingsStore:
        """Create a store from ``StoreSettings``."""
        return cls(
            settings.config_path,
            template_path=settings.config_template_path,
            indent=settings.config_indent,
        )

    @property
    def path(self) -> Path:
        return self._path

    # -- lifecycle -------------------------------------------------------

    def ensure_document(self) -> None:
        """Create the document if it is missing, then read it.

        Raises:
            SettingsDocumentError: If the document is not valid YAML or its
                root is not a mapping.
        """
        with self._lock:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                if self._template_path is not None and self._template_path.exists():
                    shutil.copyfile(self._template_path, self._path)
                else:
                    self._path.write_text("", encoding="utf-8")
                logger.info(
                    "settings_document_created",
                    path=str(self._path),
                    template=str(self._template_path) if self._template_path else None,
                )
            self._document = self._read()

    def reload(self) -> None:
        """Discard in-memory changes and re-read the document.

        Registered defaults are kept.

        Raises:
            SettingsDocumentError: If the document cannot be parsed.
        """
        with self._lock:
            self._document = self._read()
        logger.debug("settings_document_reloaded", path=str(self._path))

    def save(self) -> None:
        """Write the document, atomically replacing the file.

        With copy-defaults enabled, every registered default whose key has no
        explicit value is written too and becomes part of the document.
        """
        with self._lock:
            if self._copy_defaults:
                for key, value in self._defaults.items():
                    if _lookup(self._document, key) is _MISSING:
                        _assign(self._document, key, copy.deepcopy(value))

            text = yaml.safe_dump(
                self._document,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
                indent=self._indent,
            )
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(text)
                if self._path.exists():
                    shutil.copymode(self._path, tmp_name)
                os.replace(tmp_name, self._path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                logger.exception("settings_document_save_failed", path=str(self._path))
                raise
            self.save_count += 1

        logger.debug("settings_document_saved", path=str(self._path), saves=self.save_count)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                content = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise SettingsDocumentError(str(self._path), f"invalid YAML: {exc}") from exc

        # safe_load returns None for empty files
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise SettingsDocumentError(
                str(self._path),
                f"root must be a mapping, got {type(content).__name__}",
            )
        return content

    # -- access ----------------------------------------------------------

    def get(self, key: str, fallback: Any = None) -> Any:
        """Return the explicit value at ``key`` or ``fallback``."""
        with self._lock:
            value = _lookup(self._document, key)
        return fallback if value is _MISSING else value

    def get_bool(self, key: str) -> bool:
        value: bool = self._typed(key, SettingType.BOOLEAN, bool, False)
        return value

    def get_int(self, key: str) -> int:
        value: int = self._typed(key, SettingType.INTEGER, int, 0)
        return value

    def get_float(self, key: str) -> float:
        value: float = self._typed(key, SettingType.FLOAT, float, 0.0)
        return value

    def get_string(self, key: str) -> str:
        value: str = self._typed(key, SettingType.STRING, str, "")
        return value

    def _typed(
        self,
        key: str,
        setting_type: SettingType,
        convert: Callable[[Any], Any],
        zero: Any,
    ) -> Any:
        value = self.get(key)
        if value is not None and matches_type(setting_type, value):
            return convert(value)
        default = self._defaults.get(key)
        if default is not None and matches_type(setting_type, default):
            return convert(default)
        return zero

    def add_default(self, key: str, value: Any) -> None:
        """Register ``value`` as the default of ``key``."""
        with self._lock:
            self._defaults[str(key)] = value

    def set(self, key: str, value: Any) -> None:
        """Write ``value`` at ``key`` in memory; ``None`` removes the key."""
        with self._lock:
            _assign(self._document, str(key), value)

    def copy_defaults(self, enabled: bool) -> None:
        with self._lock:
            self._copy_defaults = enabled

    def as_dict(self) -> dict[str, Any]:
        """Deep copy of the in-memory document."""
        with self._lock:
            return copy.deepcopy(self._document)
