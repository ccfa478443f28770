from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from enum import Enum
from typing import ClassVar

from shapely.geometry import Point

from osmdm.osm.coords import decode
from osmdm.osm.coords import encode_point

OsmTags = dict[str, str]

NON_AREA_KEYS = frozenset(["highway", "barrier"])


class MemberType(Enum):
    NODE = "node"
    WAY = "way"
    RELATION = "relation"


@dataclass(frozen=True)
class OsmInfo:
    """Attributes common to every element.

    Only `id` is required. The remaining fields are `None` when the source
    omits them, e.g. minimal extracts without authorship. `visible=False`
    marks a deleted version in history data, `None` means it was not stated.
    """

    id: int
    user: str | None = None
    uid: int | None = None
    timestamp: datetime | None = None
    visible: bool | None = None
    version: int | None = None
    changeset: int | None = None


@dataclass(frozen=True)
class OsmRelationMember:
    member_type: MemberType
    reference: int
    role: str = ""


class _OsmElementMixin:
    element_type: ClassVar[MemberType]
    info: OsmInfo

    @property
    def id(self) -> int:
        return self.info.id

    def as_member(self, role: str = "") -> OsmRelationMember:
        return OsmRelationMember(member_type=self.element_type, reference=self.info.id, role=role)


def _own_tags(element: object, tags: OsmTags | None) -> None:
    object.__setattr__(element, "tags", dict(tags) if tags else {})


@dataclass(frozen=True, eq=False)
class OsmNode(_OsmElementMixin):
    """A point, with coordinates stored as fixed-point integers (degrees * 1e7).

    Two nodes are equal when id and position match; metadata such as version
    or user is not compared.
    """

    element_type: ClassVar[MemberType] = MemberType.NODE

    info: OsmInfo
    lat: int
    lon: int
    tags: OsmTags = field(default_factory=dict)

    def __post_init__(self) -> None:
        _own_tags(self, self.tags)

    @classmethod
    def from_degrees(cls, info: OsmInfo, lat: float, lon: float, tags: OsmTags | None = None) -> OsmNode:
        encoded_lat, encoded_lon = encode_point(lon, lat)
        return cls(info=info, lat=encoded_lat, lon=encoded_lon, tags=tags or {})

    @property
    def latitude(self) -> float:
        return decode(self.lat)

    @property
    def longitude(self) -> float:
        return decode(self.lon)

    def to_point(self) -> tuple[float, float]:
        """Returns (x, y), i.e. longitude first."""
        return decode(self.lon), decode(self.lat)

    def to_geometry(self) -> Point:
        return Point(decode(self.lon), decode(self.lat))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OsmNode):
            return NotImplemented
        return self.info.id == other.info.id and self.lat == other.lat and self.lon == other.lon

    def __hash__(self) -> int:
        return hash((self.info.id, self.lat, self.lon))


@dataclass(frozen=True)
class OsmWay(_OsmElementMixin):
    element_type: ClassVar[MemberType] = MemberType.WAY

    info: OsmInfo
    nodes: tuple[int, ...]
    tags: OsmTags = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))
        _own_tags(self, self.tags)

    def is_closed(self) -> bool:
        return len(self.nodes) > 0 and self.nodes[0] == self.nodes[-1]

    def is_area(self, tags: OsmTags | None = None) -> bool:
        """Closed ways are areas unless tagged highway=* or barrier=*."""
        if tags is None:
            tags = self.tags
        return self.is_closed() and NON_AREA_KEYS.isdisjoint(tags)


@dataclass(frozen=True)
class OsmRelation(_OsmElementMixin):
    element_type: ClassVar[MemberType] = MemberType.RELATION

    info: OsmInfo
    members: tuple[OsmRelationMember, ...]
    tags: OsmTags = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))
        _own_tags(self, self.tags)

    def __iter__(self) -> Iterator[OsmRelationMember]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def members_of_type(self, member_type: MemberType) -> list[OsmRelationMember]:
        return [member for member in self.members if member.member_type is member_type]


OsmElement = OsmNode | OsmWay | OsmRelation
