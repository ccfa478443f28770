"""Shared fixtures for osmdm tests."""
from datetime import datetime
from datetime import timezone

import pytest

from osmdm.osm.coords import encode
from osmdm.osm.types import MemberType
from osmdm.osm.types import OsmInfo
from osmdm.osm.types import OsmNode
from osmdm.osm.types import OsmRelation
from osmdm.osm.types import OsmRelationMember
from osmdm.osm.types import OsmWay


@pytest.fixture
def full_info():
    """Info record with every metadata field populated."""
    return OsmInfo(
        id=1,
        user="mapper",
        uid=42,
        timestamp=datetime(2020, 1, 1, 12, 30, tzinfo=timezone.utc),
        visible=True,
        version=3,
        changeset=1000,
    )


@pytest.fixture
def london_node(full_info):
    return OsmNode(
        info=full_info,
        lat=encode(51.509865),
        lon=encode(-0.118092),
        tags={"amenity": "cafe"},
    )


@pytest.fixture
def building_way():
    return OsmWay(info=OsmInfo(id=100), nodes=[1, 2, 3, 1], tags={"building": "yes"})


@pytest.fixture
def multipolygon():
    return OsmRelation(
        info=OsmInfo(id=500, version=1),
        members=[
            OsmRelationMember(MemberType.WAY, 10, "outer"),
            OsmRelationMember(MemberType.WAY, 11, "inner"),
            OsmRelationMember(MemberType.WAY, 10, "inner"),
            OsmRelationMember(MemberType.NODE, 1, ""),
        ],
        tags={"type": "multipolygon"},
    )
