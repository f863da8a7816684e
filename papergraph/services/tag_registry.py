"""Tag registry with case-insensitive name uniqueness"""

from __future__ import annotations

from datetime import UTC, datetime
import logging
from typing import Callable

from papergraph.models.tag import Tag

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = frozenset({"name", "description", "color", "category"})
_REQUIRED_FIELDS = ("name", "color", "category")


def _name_key(name: str) -> str:
    return name.strip().lower()


class TagRegistry:
    """
    In-memory tag store

    Names are unique ignoring case. `create` rejects a taken name and
    `get_or_create` returns the existing tag instead.
    """

    def __init__(self) -> None:
        self._tags: dict[int, Tag] = {}
        self._ids_by_name: dict[str, int] = {}
        self._next_id = 1
        self._delete_listeners: list[Callable[[int], None]] = []

    def on_delete(self, callback: Callable[[int], None]) -> None:
        """Register a callback invoked with the tag id after a tag is deleted"""
        self._delete_listeners.append(callback)

    def create(
        self,
        *,
        name: str,
        color: str,
        category: str,
        description: str | None = None,
    ) -> Tag | None:
        """Create a tag, or return None if the name is already taken"""
        key = _name_key(name)
        if not key:
            raise ValueError("Tag name must not be blank")
        if key in self._ids_by_name:
            logger.debug(f"Tag name already registered: {name}")
            return None

        tag = Tag(
            id=self._next_id,
            name=name,
            description=description,
            color=color,
            category=category,
            usage_count=0,
            created_at=datetime.now(UTC),
        )
        self._next_id += 1
        self._tags[tag.id] = tag
        self._ids_by_name[key] = tag.id
        logger.debug(f"Created tag {tag.id}: {tag.name}")
        return tag

    def get_or_create(
        self,
        *,
        name: str,
        color: str,
        category: str,
        description: str | None = None,
    ) -> Tag:
        existing = self.get_by_name(name)
        if existing is not None:
            return existing
        return self.create(name=name, color=color, category=category, description=description)

    def get(self, tag_id: int) -> Tag | None:
        return self._tags.get(tag_id)

    def get_by_name(self, name: str) -> Tag | None:
        tag_id = self._ids_by_name.get(_name_key(name))
        return self._tags.get(tag_id) if tag_id is not None else None

    def exists(self, tag_id: int) -> bool:
        return tag_id in self._tags

    def list_all(self) -> list[Tag]:
        return list(self._tags.values())

    def get_all_by_category(self, category: str) -> list[Tag]:
        return [tag for tag in self._tags.values() if tag.category == category]

    def update(self, tag_id: int, **fields) -> Tag | None:
        """
        Update tag metadata in place

        Id, usage count and associations are preserved. Returns None when the
        tag does not exist or the new name belongs to another tag.
        """
        tag = self._tags.get(tag_id)
        if tag is None:
            return None

        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Unknown tag fields: {sorted(unknown)}")
        for key in _REQUIRED_FIELDS:
            if key in fields and fields[key] is None:
                raise ValueError(f"Tag {key} cannot be cleared")

        new_name = fields.get("name")
        if new_name is not None:
            if not _name_key(new_name):
                raise ValueError("Tag name must not be blank")
            owner = self._ids_by_name.get(_name_key(new_name))
            if owner is not None and owner != tag_id:
                return None
            del self._ids_by_name[_name_key(tag.name)]
            self._ids_by_name[_name_key(new_name)] = tag_id

        for key, value in fields.items():
            setattr(tag, key, value)
        return tag

    def adjust_usage(self, tag_id: int, delta: int) -> Tag | None:
        """Shift the usage counter by delta, never going below zero"""
        tag = self._tags.get(tag_id)
        if tag is None:
            return None
        tag.usage_count = max(0, tag.usage_count + delta)
        return tag

    def delete(self, tag_id: int) -> bool:
        """Delete a tag; listeners drop every association referencing it"""
        tag = self._tags.pop(tag_id, None)
        if tag is None:
            return False

        self._ids_by_name.pop(_name_key(tag.name), None)
        for callback in self._delete_listeners:
            callback(tag_id)
        logger.info(f"Deleted tag {tag_id}: {tag.name}")
        return True

    def __len__(self) -> int:
        return len(self._tags)
