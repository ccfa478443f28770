from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from osmdm.osm.types import OsmElement
from osmdm.osm.types import OsmNode
from osmdm.osm.types import OsmRelation
from osmdm.osm.types import OsmWay

logger = logging.getLogger(__name__)


@dataclass
class Stats:
    nodes: int = 0
    ways: int = 0
    relations: int = 0
    deleted: int = 0

    @property
    def total(self) -> int:
        return self.nodes + self.ways + self.relations

    def update(self, element: OsmElement) -> None:
        if isinstance(element, OsmNode):
            self.nodes += 1
        elif isinstance(element, OsmWay):
            self.ways += 1
        elif isinstance(element, OsmRelation):
            self.relations += 1
        else:
            raise TypeError(f"Not an OSM element: {element!r}")

        if element.info.visible is False:
            self.deleted += 1

    @classmethod
    def collect(cls, elements: Iterable[OsmElement]) -> Stats:
        stats = cls()
        for element in elements:
            stats.update(element)
        logger.debug("Counted %s", stats)
        return stats
