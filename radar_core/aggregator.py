# radar_core/aggregator.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, TypeVar
import logging

from . import config
from .normalizer import NormalizedItem
from .types import AXES, AXIS_BOTH, HORIZONS, ROLES
from .weights import item_weight

log = logging.getLogger(__name__)

K = TypeVar("K")
S = TypeVar("S", bound="Stat")


def _emit_trace(**values: object) -> None:
    if not config.DEBUG_TRACE:
        return
    ordered = []
    for key in config.TRACE_FIELDS:
        if key in values:
            ordered.append(f"{key}={values[key]}")
    if ordered:
        log.info("trace %s", " ".join(ordered))


@dataclass
class Stat:
    sum: float = 0.0
    count: int = 0

    def add(self, value: float) -> None:
        self.sum += value
        self.count += 1

    @property
    def avg(self) -> float:
        return self.sum / self.count if self.count > 0 else 0.0


def _horizon_stats() -> Dict[int, Stat]:
    return {h: Stat() for h in HORIZONS}


@dataclass
class RoleStat(Stat):
    horizons: Dict[int, Stat] = field(default_factory=_horizon_stats)


@dataclass
class BlockStat(Stat):
    horizon_freq: Dict[int, int] = field(default_factory=dict)

    def dominant_horizon(self) -> int:
        best, best_n = 0, 0
        for h in HORIZONS:
            n = self.horizon_freq.get(h, 0)
            if n > best_n:
                best, best_n = h, n
        return best


@dataclass
class Accumulators:
    """Running sums for one scoring call; never shared between calls."""

    weighted_sum: float = 0.0
    max_sum: float = 0.0
    axes: Dict[str, Stat] = field(default_factory=lambda: {a: Stat() for a in AXES})
    roles: Dict[str, RoleStat] = field(default_factory=lambda: {r: RoleStat() for r in ROLES})
    dilemma_roles: Dict[str, Stat] = field(default_factory=lambda: {r: Stat() for r in ROLES})
    horizons: Dict[int, Stat] = field(default_factory=_horizon_stats)
    blocks: Dict[str, BlockStat] = field(default_factory=dict)
    categories: Dict[str, Stat] = field(default_factory=dict)
    category_values: Dict[str, List[int]] = field(default_factory=dict)
    omitted: List[NormalizedItem] = field(default_factory=list)
    scored: int = 0


def _fan_out(
    table: Dict[K, S],
    keys: Iterable[K],
    value: float,
    create: Optional[Callable[[], S]] = None,
    on_hit: Optional[Callable[[K, S], None]] = None,
) -> None:
    """Add ``value`` to every bucket named by ``keys``.

    With ``create`` missing buckets are made on first use; without it unknown
    keys are skipped so fixed tables (roles, horizons) stay fixed.
    """
    for key in keys:
        bucket = table.get(key)
        if bucket is None:
            if create is None:
                log.debug("ignoring unknown tag %r", key)
                continue
            bucket = table[key] = create()
        bucket.add(value)
        if on_hit is not None:
            on_hit(key, bucket)


def _axis_keys(axis: str) -> List[str]:
    if axis == AXIS_BOTH:
        return list(AXES)
    return [axis]


def add_item(acc: Accumulators, item: NormalizedItem, level: str) -> None:
    if item.omitted or item.value is None:
        acc.omitted.append(item)
        return

    val = item.value
    w = item_weight(level, item.source, item.weight_horizon)
    acc.weighted_sum += val * w
    acc.max_sum += config.LIKERT_MAX * w
    acc.scored += 1

    # "Both" adds the full value to each axis, never a split.
    _fan_out(acc.axes, _axis_keys(item.axis), val)

    def _role_horizons(_role: str, stat: RoleStat) -> None:
        _fan_out(stat.horizons, item.horizons, val)

    _fan_out(acc.roles, item.roles, val, on_hit=_role_horizons)
    if item.source == "dilemma":
        _fan_out(acc.dilemma_roles, item.roles, val)

    _fan_out(acc.horizons, item.horizons, val)

    if item.block:
        block = acc.blocks.get(item.block)
        if block is None:
            block = acc.blocks[item.block] = BlockStat()
        block.add(val)
        for h in item.horizons:
            if h in HORIZONS:
                block.horizon_freq[h] = block.horizon_freq.get(h, 0) + 1

    _fan_out(acc.categories, item.categories, val, create=Stat)
    for cat in item.categories:
        acc.category_values.setdefault(cat, []).append(val)

    _emit_trace(
        item_id=item.item_id,
        source=item.source,
        value=val,
        weight=w,
        axis=item.axis,
        roles=",".join(item.roles),
        horizons=",".join(str(h) for h in item.horizons),
        categories=",".join(item.categories),
    )


def aggregate(items: Iterable[NormalizedItem], level: str) -> Accumulators:
    acc = Accumulators()
    for item in items:
        add_item(acc, item, level)
    log.debug("aggregated %d scored items, %d omitted", acc.scored, len(acc.omitted))
    return acc
