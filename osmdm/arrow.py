from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Sequence
from dataclasses import dataclass

import pyarrow as pa
from more_itertools import batched

from osmdm.osm.types import MemberType
from osmdm.osm.types import OsmElement
from osmdm.osm.types import OsmNode
from osmdm.osm.types import OsmRelation
from osmdm.osm.types import OsmWay

logger = logging.getLogger(__name__)

ARROW_TAGS_TYPE = pa.map_(pa.string(), pa.string())

ARROW_MEMBER_TYPE = pa.struct(
    [
        pa.field("type", pa.string()),
        pa.field("reference", pa.int64()),
        pa.field("role", pa.string()),
    ]
)

ARROW_INFO_FIELDS = [
    pa.field("version", pa.int32()),
    pa.field("timestamp", pa.timestamp("us", tz="UTC")),
    pa.field("changeset", pa.int64()),
    pa.field("uid", pa.int32()),
    pa.field("user", pa.string()),
    pa.field("visible", pa.bool_()),
]

ARROW_NODE_FIELDS = [
    pa.field("id", pa.int64(), nullable=False),
    pa.field("tags", ARROW_TAGS_TYPE),
    pa.field("lat", pa.int32()),
    pa.field("lon", pa.int32()),
    *ARROW_INFO_FIELDS,
]

ARROW_NODE_SCHEMA = pa.schema(ARROW_NODE_FIELDS)


ARROW_WAY_FIELDS = [
    pa.field("id", pa.int64(), nullable=False),
    pa.field("tags", ARROW_TAGS_TYPE),
    pa.field("nodes", pa.list_(pa.int64())),
    *ARROW_INFO_FIELDS,
]

ARROW_WAY_SCHEMA = pa.schema(ARROW_WAY_FIELDS)


ARROW_RELATION_FIELDS = [
    pa.field("id", pa.int64(), nullable=False),
    pa.field("tags", ARROW_TAGS_TYPE),
    pa.field("members", pa.list_(ARROW_MEMBER_TYPE)),
    *ARROW_INFO_FIELDS,
]

ARROW_RELATION_SCHEMA = pa.schema(ARROW_RELATION_FIELDS)


@dataclass
class BatchConfig:
    batch_size: int = 64 * 1024


def _info_arrays(elements: Sequence[OsmElement]) -> list[pa.Array]:
    infos = [element.info for element in elements]
    return [
        pa.array([info.version for info in infos], type=pa.int32()),
        pa.array([info.timestamp for info in infos], type=pa.timestamp("us", tz="UTC")),
        pa.array([info.changeset for info in infos], type=pa.int64()),
        pa.array([info.uid for info in infos], type=pa.int32()),
        pa.array([info.user for info in infos], type=pa.string()),
        pa.array([info.visible for info in infos], type=pa.bool_()),
    ]


def _tags_array(elements: Sequence[OsmElement]) -> pa.Array:
    return pa.array([list(element.tags.items()) for element in elements], type=ARROW_TAGS_TYPE)


def record_batch_for_nodes(nodes: Sequence[OsmNode]) -> pa.RecordBatch | None:
    if not nodes:
        return None

    arrays = [
        pa.array([node.info.id for node in nodes], type=pa.int64()),
        _tags_array(nodes),
        pa.array([node.lat for node in nodes], type=pa.int32()),
        pa.array([node.lon for node in nodes], type=pa.int32()),
        *_info_arrays(nodes),
    ]

    return pa.RecordBatch.from_arrays(arrays, schema=ARROW_NODE_SCHEMA)


def record_batch_for_ways(ways: Sequence[OsmWay]) -> pa.RecordBatch | None:
    if not ways:
        return None

    arrays = [
        pa.array([way.info.id for way in ways], type=pa.int64()),
        _tags_array(ways),
        pa.array([list(way.nodes) for way in ways], type=pa.list_(pa.int64())),
        *_info_arrays(ways),
    ]

    return pa.RecordBatch.from_arrays(arrays, schema=ARROW_WAY_SCHEMA)


def record_batch_for_relations(relations: Sequence[OsmRelation]) -> pa.RecordBatch | None:
    if not relations:
        return None

    members = []
    for relation in relations:
        members.append(
            [
                {"type": member.member_type.value, "reference": member.reference, "role": member.role}
                for member in relation.members
            ]
        )

    arrays = [
        pa.array([relation.info.id for relation in relations], type=pa.int64()),
        _tags_array(relations),
        pa.array(members, type=pa.list_(ARROW_MEMBER_TYPE)),
        *_info_arrays(relations),
    ]

    return pa.RecordBatch.from_arrays(arrays, schema=ARROW_RELATION_SCHEMA)


def record_batches(
    elements: Iterable[OsmElement], config: BatchConfig | None = None
) -> Iterator[tuple[MemberType, pa.RecordBatch]]:
    """Split a mixed element stream into per-kind record batches.

    Elements are consumed in chunks of `config.batch_size`; each chunk yields
    up to one batch per kind, nodes first, and keeps the input order within a kind.
    """
    config = config or BatchConfig()

    for chunk in batched(elements, config.batch_size):
        nodes: list[OsmNode] = []
        ways: list[OsmWay] = []
        relations: list[OsmRelation] = []
        for element in chunk:
            if isinstance(element, OsmNode):
                nodes.append(element)
            elif isinstance(element, OsmWay):
                ways.append(element)
            elif isinstance(element, OsmRelation):
                relations.append(element)
            else:
                raise TypeError(f"Not an OSM element: {element!r}")
        logger.debug("Chunk with %d nodes, %d ways, %d relations", len(nodes), len(ways), len(relations))

        for member_type, batch in (
            (MemberType.NODE, record_batch_for_nodes(nodes)),
            (MemberType.WAY, record_batch_for_ways(ways)),
            (MemberType.RELATION, record_batch_for_relations(relations)),
        ):
            if batch is not None:
                yield member_type, batch
