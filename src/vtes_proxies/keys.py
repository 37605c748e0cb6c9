"""Structured image keys and their canonical filename serialization."""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional


IMAGE_EXTENSION = ".jpg"

# Groups are numbered 1..7
MAX_GROUP = 7

ADVANCED_SUFFIX = "adv"

_KEY_RE = re.compile(r"^(?P<base>.+?)(?:g(?P<group>[1-7]))?(?P<adv>adv)?$")


@dataclass(frozen=True)
class ImageKey:
    """
    Lookup name of a card image, split into its parts.

    The serialized form is `base`, then `g<N>` when a group is set, then
    `adv` for advanced vampires: `ur`, `urg2`, `urg2adv`.
    """

    base: str
    group: Optional[int] = None
    advanced: bool = False

    def __post_init__(self) -> None:
        if not self.base:
            raise ValueError("Image key base must not be empty.")
        if self.group is not None and not 1 <= self.group <= MAX_GROUP:
            raise ValueError(f"Group must be between 1 and {MAX_GROUP}, got {self.group}.")

    @classmethod
    def parse(cls, text: str) -> "ImageKey":
        """Split a normalized card name such as `draculag3` into a key."""
        match = _KEY_RE.match(text)
        if match is None:
            raise ValueError(f"Cannot build an image key from {text!r}.")
        group = match.group("group")
        return cls(
            base=match.group("base"),
            group=int(group) if group else None,
            advanced=match.group("adv") is not None,
        )

    @property
    def has_group(self) -> bool:
        return self.group is not None

    @property
    def filename(self) -> str:
        return f"{self}{IMAGE_EXTENSION}"

    def with_group(self, group: int) -> "ImageKey":
        return replace(self, group=group)

    def __str__(self) -> str:
        group_tag = f"g{self.group}" if self.group is not None else ""
        adv_tag = ADVANCED_SUFFIX if self.advanced else ""
        return f"{self.base}{group_tag}{adv_tag}"
