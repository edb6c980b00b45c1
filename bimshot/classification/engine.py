"""Mini README: Status-to-visual-state classification engine.

Structure:
    * ClassificationEngine - decides colour, opacity and visibility for
      every scene object from the status feed and the selected product.
    * classify - convenience wrapper around a default engine.
    * find_metric / coerce_delay / delay_bucket - the rule building blocks.

Evaluation order for one object:
    1. no status record            -> hidden
    2. SECTORIZACION / NIVELES     -> black shading driven by the level
    3. no metric for the element   -> translucent placeholder or hidden
    4. mode stage (``tipo``)       -> colour and visibility
    5. undefined-delay stage       -> overrides stage 4 when the metric has
                                      no delay at all

Stage 5 runs after stage 4 and always wins, even where it contradicts the
mode (for example it makes objects visible in ``atencion`` mode). Its
colour precedence is Atencion, then EstadoPlanner, then ColorEstadoReal.
In ``futuro`` mode stage 4 looks at EstadoPlanner before ColorEstadoReal
and ignores Atencion, so the two stages disagree on precedence; both are
kept as they are.

The engine holds no state between calls. Malformed content only ever
degrades the affected object to a visible neutral gray.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, Optional, Sequence

from ..logging_utils import get_logger
from .levels import LevelRanking
from .palettes import (
    BLACK,
    EARLY,
    LATE,
    NEUTRAL_GRAY,
    ON_TIME,
    attention_color,
    hex_to_rgb,
    status_color,
)
from .records import (
    MODE_ATENCION,
    MODE_DELAY_MAYOR,
    MODE_DELAY_MENOR_IGUAL,
    MODE_FUTURO,
    MODE_LLEGADA,
    PRODUCT_NIVELES,
    PRODUCT_SECTORIZACION,
    RGB,
    Metric,
    SelectedProduct,
    StatusRecord,
    VisualState,
)

HIDDEN = VisualState(colorize=BLACK, opacity=0.0, visible=False)
SHADED = VisualState(colorize=BLACK, opacity=0.8, visible=True)
PLACEHOLDER = VisualState(colorize=BLACK, opacity=0.2, visible=True)
NEUTRAL = VisualState(colorize=NEUTRAL_GRAY, opacity=1.0, visible=True)

_DELAY_MODES = (MODE_LLEGADA, MODE_DELAY_MENOR_IGUAL, MODE_DELAY_MAYOR)


def find_metric(metrics: Sequence[Metric], key: str) -> Optional[Metric]:
    """Return the metric for ``key``: exact name first, then containment.

    The containment tier accepts a name contained in the key or a key
    contained in the name. Within each tier the first metric in list order
    wins. Empty keys and empty names never match.
    """

    if not key:
        return None
    for metric in metrics:
        if metric.name and metric.name == key:
            return metric
    for metric in metrics:
        if metric.name and (metric.name in key or key in metric.name):
            return metric
    return None


def coerce_delay(value: Any) -> Optional[float]:
    """Numeric delay, 0 when absent, ``None`` when it cannot be read as a number."""

    if value is None:
        return 0.0
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, str):
            number = float(value.strip())
        elif isinstance(value, (int, float)):
            number = float(value)
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return None if math.isnan(number) else number


def delay_bucket(value: Any) -> Optional[str]:
    """Map a delay to Early / On Time / Late, or ``None`` when unknown."""

    number = coerce_delay(value)
    if number is None:
        return None
    if number < 0:
        return EARLY
    if number > 0:
        return LATE
    return ON_TIME


def _visible(colorize: RGB) -> VisualState:
    return VisualState(colorize=colorize, opacity=1.0, visible=True)


class ClassificationEngine:
    """Compute per-object visual states for one render request."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or get_logger(__name__)

    def classify(
        self,
        records: Iterable[StatusRecord],
        product: Optional[SelectedProduct],
        object_ids: Iterable[str],
    ) -> Dict[str, VisualState]:
        """Return one ``VisualState`` per distinct object id."""

        records = tuple(records)
        product = product or SelectedProduct()
        ranking = LevelRanking.from_records(records)

        by_id: Dict[str, StatusRecord] = {}
        for record in records:
            if not isinstance(record.id, str):
                self.logger.warning("Ignoring status record with non-text id %r", record.id)
                continue
            by_id.setdefault(record.id, record)

        states: Dict[str, VisualState] = {}
        for object_id in object_ids:
            if object_id in states:
                continue
            states[object_id] = self._classify_object(
                object_id, by_id.get(object_id), product, ranking
            )

        self.logger.debug(
            "Classified %s objects (%s visible) with mode %s, %s metrics, highest level %s",
            len(states),
            sum(1 for state in states.values() if state.visible),
            product.tipo,
            len(product.metrics),
            ranking.highest,
        )
        return states

    def _classify_object(
        self,
        object_id: str,
        record: Optional[StatusRecord],
        product: SelectedProduct,
        ranking: LevelRanking,
    ) -> VisualState:
        if record is None:
            return HIDDEN
        try:
            return self._evaluate(record, product, ranking)
        except (TypeError, ValueError, AttributeError) as error:
            self.logger.warning(
                "Falling back to neutral state for object %s: %s", object_id, error
            )
            return NEUTRAL

    def _evaluate(
        self, record: StatusRecord, product: SelectedProduct, ranking: LevelRanking
    ) -> VisualState:
        if record.product_code == PRODUCT_SECTORIZACION:
            on_top = ranking.highest is not None and record.level == ranking.highest
            return SHADED if on_top else HIDDEN
        if record.product_code == PRODUCT_NIVELES:
            return SHADED if ranking.contains(record.level) else HIDDEN

        metric = find_metric(product.metrics, record.metric_key())
        if metric is None:
            return PLACEHOLDER if ranking.contains(record.level) else HIDDEN

        state = self._mode_stage(product.tipo, metric)
        if not metric.has_delay:
            state = self._undefined_delay_stage(metric)
        return state

    def _mode_stage(self, tipo: Optional[str], metric: Metric) -> VisualState:
        """Colour and visibility dictated by the display mode."""

        if tipo in _DELAY_MODES:
            bucket = delay_bucket(metric.delay)
            if bucket is None:
                return NEUTRAL
            if tipo == MODE_DELAY_MENOR_IGUAL:
                visible = bucket != LATE
            elif tipo == MODE_DELAY_MAYOR:
                visible = bucket == LATE
            else:
                visible = True
            return VisualState(
                colorize=status_color(bucket),
                opacity=1.0 if visible else 0.0,
                visible=visible,
            )
        if tipo == MODE_ATENCION:
            if metric.atencion:
                return _visible(attention_color(metric.atencion))
            return VisualState(colorize=NEUTRAL_GRAY, opacity=0.0, visible=False)
        if tipo == MODE_FUTURO:
            if metric.estado_planner:
                return _visible(status_color(metric.estado_planner))
            if metric.color_estado_real:
                return _visible(hex_to_rgb(metric.color_estado_real))
            return NEUTRAL
        return NEUTRAL

    def _undefined_delay_stage(self, metric: Metric) -> VisualState:
        """Late correction for metrics without a delay; replaces the mode stage."""

        if metric.atencion:
            return _visible(attention_color(metric.atencion))
        if metric.estado_planner:
            return _visible(status_color(metric.estado_planner))
        if metric.color_estado_real:
            return _visible(hex_to_rgb(metric.color_estado_real))
        return NEUTRAL


_DEFAULT_ENGINE: Optional[ClassificationEngine] = None


def classify(
    records: Iterable[StatusRecord],
    product: Optional[SelectedProduct],
    object_ids: Iterable[str],
) -> Dict[str, VisualState]:
    """Classify with a shared default engine logging to this module's logger."""

    global _DEFAULT_ENGINE
    if _DEFAULT_ENGINE is None:
        _DEFAULT_ENGINE = ClassificationEngine()
    return _DEFAULT_ENGINE.classify(records, product, object_ids)
