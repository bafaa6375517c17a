"""Carrier timetable citations and source-attribution backfill."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from flightchord_core.schemas import RouteSource

from .config import settings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from flightchord_core.schemas import AirportShard

    from .store import ShardStore

logger = logging.getLogger(__name__)

# Carrier code → official timetable page
TIMETABLE_SOURCES: dict[str, RouteSource] = {
    "NH": RouteSource(title="ANA公式時刻表", url="https://www.ana.co.jp/ja/jp/book-plan/flight-schedule/"),
    "JL": RouteSource(title="JAL公式時刻表", url="https://www.jal.co.jp/jp/ja/jmb/flightschedule/"),
    "BC": RouteSource(title="スカイマーク公式時刻表", url="https://www.skymark.co.jp/ja/timetable/"),
    "GK": RouteSource(title="ジェットスター・ジャパン公式時刻表", url="https://www.jetstar.com/jp/ja/flight-schedules"),
    "MM": RouteSource(title="ピーチ・アビエーション公式時刻表", url="https://www.flypeach.com/jp/ja/schedule"),
    "6J": RouteSource(title="ソラシドエア公式時刻表", url="https://www.solaseedair.jp/timetable/"),
    "NU": RouteSource(title="JTA公式時刻表", url="https://www.jta.co.jp/schedule/"),
    "RC": RouteSource(title="JAC公式時刻表", url="https://www.jac.co.jp/schedule/"),
    "OC": RouteSource(title="RAC公式時刻表", url="https://www.rac.co.jp/schedule/"),
    "UA": RouteSource(title="ユナイテッド航空公式時刻表", url="https://www.united.com/ja/jp/fly/schedules"),
    "SQ": RouteSource(title="シンガポール航空公式時刻表", url="https://www.singaporeair.com/ja_JP/jp/plan-travel/timetables/"),
    "KE": RouteSource(title="大韓航空公式時刻表", url="https://www.koreanair.com/jp/ja/schedule/"),
    "7G": RouteSource(title="スターフライヤー公式時刻表", url="https://www.starflyer.jp/timetable/"),
}


class SourceCatalog:
    """Lookup of the citation to attach to a route synthesized for a carrier.

    Carriers missing from *templates* get a placeholder that marks the route
    as requiring manual verification.
    """

    def __init__(
        self,
        templates: Mapping[str, RouteSource] | None = None,
        fallback_url: str | None = None,
    ) -> None:
        self._templates = dict(TIMETABLE_SOURCES if templates is None else templates)
        self._fallback_url = fallback_url or settings.placeholder_source_url

    def __contains__(self, carrier: object) -> bool:
        return carrier in self._templates

    def placeholder(self, carrier: str) -> RouteSource:
        return RouteSource(title=f"{carrier}公式時刻表（要確認）", url=self._fallback_url)

    def sources_for(self, carrier: str) -> list[RouteSource]:
        """Return a fresh one-element source list for *carrier*."""
        template = self._templates.get(carrier)
        if template is None:
            return [self.placeholder(carrier)]
        return [RouteSource(title=template.title, url=template.url)]


class BackfillResult(BaseModel):
    """Outcome of a source-attribution backfill."""

    updated_shards: set[str] = Field(default_factory=set)
    updated_routes: int = 0
    processed_routes: int = 0
    placeholders: int = 0


def backfill_sources(
    shards: Mapping[str, AirportShard],
    catalog: SourceCatalog | None = None,
    today: date | None = None,
) -> BackfillResult:
    """Attach a carrier citation to every route that has none.

    Routes that already carry a non-empty ``sources`` list are left alone.
    """
    if catalog is None:
        catalog = SourceCatalog()
    stamp = (today or date.today()).isoformat()
    result = BackfillResult()

    for code, shard in shards.items():
        for carrier, route in shard.iter_routes():
            result.processed_routes += 1
            if route.has_sources:
                continue
            route.sources = catalog.sources_for(carrier)
            route.last_checked = stamp
            result.updated_routes += 1
            result.updated_shards.add(code)
            if carrier in catalog:
                logger.info("Added source: %s %s→%s", carrier, code, route.iata)
            else:
                result.placeholders += 1
                logger.warning(
                    "Added placeholder: %s %s→%s (requires verification)",
                    carrier,
                    code,
                    route.iata,
                )

    for code in result.updated_shards:
        shards[code].updated_at = stamp

    return result


def backfill_store(
    store: ShardStore,
    catalog: SourceCatalog | None = None,
    today: date | None = None,
) -> BackfillResult:
    """Load all shards, backfill sources and write back the changed ones."""
    shards = store.load_shards()
    result = backfill_sources(shards, catalog, today)
    store.write_shards(shards, result.updated_shards)
    return result
