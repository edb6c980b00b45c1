"""Mini README: Typed records flowing through the classification engine.

Structure:
    * StatusRecord - one model element's status attributes from the feed.
    * Metric - one tracked work item of the selected product.
    * SelectedProduct - display mode plus the ordered metrics.
    * VisualState - colour, opacity and visibility for one scene object.

The ``from_payload`` constructors read the JSON shapes sent by the status
feed (``TSC_*`` column names). They never validate values: the engine is
responsible for degrading gracefully on odd content.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

RGB = Tuple[float, float, float]

PRODUCT_SECTORIZACION = "SECTORIZACION"
PRODUCT_NIVELES = "NIVELES"
PRODUCT_ACEDIM = "ACEDIM"
PRODUCT_CONCRETO = "CONCRETO"

MODE_LLEGADA = "llegada"
MODE_ATENCION = "atencion"
MODE_DELAY_MENOR_IGUAL = "delayMenorIgual"
MODE_DELAY_MAYOR = "delayMayor"
MODE_FUTURO = "futuro"


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True, slots=True)
class StatusRecord:
    """Status attributes of a single model element."""

    id: str
    product_code: Optional[str] = None
    level: Optional[str] = None
    acedim_code: Optional[str] = None
    concreto_code: Optional[str] = None
    plano: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "StatusRecord":
        return cls(
            id=_optional_text(payload.get("id")) or "",
            product_code=_optional_text(payload.get("TSC_PRODUCTO")),
            level=_optional_text(payload.get("TSC_NIVEL")),
            acedim_code=_optional_text(payload.get("TSC_ACEDIM")),
            concreto_code=_optional_text(payload.get("TSC_CONCRETO")),
            plano=_optional_text(payload.get("PLANO")),
        )

    def metric_key(self) -> str:
        """Return the identifier used to look up this element's metric."""

        if self.product_code == PRODUCT_ACEDIM:
            key = self.acedim_code
        elif self.product_code == PRODUCT_CONCRETO:
            key = self.concreto_code
        else:
            key = self.plano
        return key or ""


@dataclass(frozen=True, slots=True)
class Metric:
    """A tracked work item. ``delay`` is kept exactly as received."""

    name: Optional[str] = None
    delay: Any = None
    atencion: Optional[str] = None
    estado_planner: Optional[str] = None
    color_estado_real: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Metric":
        return cls(
            name=_optional_text(payload.get("name")),
            delay=payload.get("delay"),
            atencion=_optional_text(payload.get("Atencion")),
            estado_planner=_optional_text(payload.get("EstadoPlanner")),
            color_estado_real=_optional_text(payload.get("ColorEstadoReal")),
        )

    @property
    def has_delay(self) -> bool:
        return self.delay is not None


@dataclass(frozen=True, slots=True)
class SelectedProduct:
    """The product being displayed: its mode (``tipo``) and its metrics."""

    tipo: Optional[str] = None
    metrics: Tuple[Metric, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> "SelectedProduct":
        if not payload:
            return cls()
        metrics = tuple(
            Metric.from_payload(entry)
            for entry in payload.get("metrics") or ()
            if isinstance(entry, Mapping)
        )
        return cls(tipo=_optional_text(payload.get("tipo")), metrics=metrics)


@dataclass(frozen=True, slots=True)
class VisualState:
    """Render attributes applied to one scene object."""

    colorize: RGB
    opacity: float
    visible: bool

    def to_payload(self) -> dict:
        return {
            "colorize": list(self.colorize),
            "opacity": self.opacity,
            "visible": self.visible,
        }
