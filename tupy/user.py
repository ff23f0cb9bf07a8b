"""User profiles and the user's top items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from tupy.common import (
    ExternalUrls,
    Followers,
    Image,
    Paged,
    _bool,
    _items,
    _mapping,
    _opt_str,
    _require,
    _str,
)


@dataclass
class ExplicitContent:
    """The user's explicit content settings."""

    filter_enabled: bool
    filter_locked: bool

    @classmethod
    def from_dict(cls, data: Any) -> ExplicitContent:
        data = _mapping(data)
        return cls(
            filter_enabled=_bool(data, "filter_enabled"),
            filter_locked=_bool(data, "filter_locked"),
        )


@dataclass
class Profile:
    """A user profile."""

    id: str
    display_name: str | None
    followers: Followers
    href: str
    uri: str
    external_urls: ExternalUrls
    images: list[Image]
    product: str | None
    country: str | None
    email: str | None
    explicit: ExplicitContent | None

    @classmethod
    def from_dict(cls, data: Any) -> Profile:
        data = _mapping(data)
        explicit = data.get("explicit_content")
        return cls(
            id=_str(data, "id"),
            display_name=_opt_str(data, "display_name"),
            followers=Followers.from_dict(_require(data, "followers")),
            href=_str(data, "href"),
            uri=_str(data, "uri"),
            external_urls=ExternalUrls.from_dict(_require(data, "external_urls")),
            images=_items(data, "images", Image.from_dict),
            product=_opt_str(data, "product"),
            country=_opt_str(data, "country"),
            email=_opt_str(data, "email"),
            explicit=None if explicit is None else ExplicitContent.from_dict(explicit),
        )


@dataclass
class TopItems(Paged):
    """A page of the user's top artists or tracks."""

    @classmethod
    def from_dict(cls, data: Any, item_parser: Callable[[Any], Any]) -> TopItems:
        return cls._from_page(data, item_parser)

    def page(self) -> int:
        """The number of this page, counted from 0 at offset 0."""
        if self.offset == 0:
            return 0
        return -(-self.offset // self.limit)

    def max_page(self) -> int:
        """The number of pages available (0 when there are none)."""
        if self.total == 0:
            return 0
        return -(-self.total // self.limit)