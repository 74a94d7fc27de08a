"""Skeleton lookup: bone identities and the resolver interface consumed by baking."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class BoneBlueprint:
    """Identity of one skeleton bone. Used only as a mapping key by the baker."""

    name: str
    parent: str | None = None


@runtime_checkable
class SkeletonResolver(Protocol):
    """Read-only bone lookup by name."""

    def lookup_bone(self, name: str) -> BoneBlueprint | None:
        """Return the bone called *name*, or ``None`` if there is none."""
        ...


class SkeletonBlueprint:
    """A flat name -> bone map implementing :class:`SkeletonResolver`."""

    def __init__(self, bones: Iterable[BoneBlueprint] = ()) -> None:
        self._bones: dict[str, BoneBlueprint] = {bone.name: bone for bone in bones}

    @property
    def bone_map(self) -> Mapping[str, BoneBlueprint]:
        return dict(self._bones)

    def lookup_bone(self, name: str) -> BoneBlueprint | None:
        return self._bones.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._bones

    def __len__(self) -> int:
        return len(self._bones)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> SkeletonBlueprint:
        return cls(BoneBlueprint(name) for name in names)

    @classmethod
    def from_outliner(cls, outliner: Iterable[Any]) -> SkeletonBlueprint:
        """Build a skeleton from a Blockbench outliner tree.

        Groups are dicts with a ``name`` and nested ``children``; plain strings
        in ``children`` are cube uuids and are ignored.
        """
        bones: list[BoneBlueprint] = []

        def _walk(nodes: Iterable[Any], parent: str | None) -> None:
            for node in nodes:
                if not isinstance(node, Mapping):
                    continue
                name = node.get("name")
                if not isinstance(name, str):
                    continue
                bones.append(BoneBlueprint(name, parent))
                children = node.get("children")
                if isinstance(children, list):
                    _walk(children, name)

        _walk(outliner, None)
        return cls(bones)
