"""Mini README: Tests for payload parsing into typed records."""

from __future__ import annotations

from bimshot.classification import Metric, SelectedProduct, StatusRecord, VisualState


def test_status_record_reads_feed_columns() -> None:
    record = StatusRecord.from_payload(
        {
            "id": 1234,
            "TSC_PRODUCTO": "ACEDIM",
            "TSC_NIVEL": "Nivel 3",
            "TSC_ACEDIM": "AC-01",
            "TSC_CONCRETO": "C-01",
            "PLANO": "P-01",
        }
    )
    assert record.id == "1234"
    assert record.level == "Nivel 3"
    assert record.metric_key() == "AC-01"


def test_metric_key_follows_product_code() -> None:
    base = {"id": "x", "TSC_ACEDIM": "AC", "TSC_CONCRETO": "CO", "PLANO": "PL"}
    assert StatusRecord.from_payload({**base, "TSC_PRODUCTO": "CONCRETO"}).metric_key() == "CO"
    assert StatusRecord.from_payload({**base, "TSC_PRODUCTO": "OTRO"}).metric_key() == "PL"
    assert StatusRecord.from_payload({"id": "x", "TSC_PRODUCTO": "ACEDIM"}).metric_key() == ""


def test_metric_keeps_raw_delay() -> None:
    metric = Metric.from_payload({"name": "P1", "delay": "3", "Atencion": "No Atendió"})
    assert metric.delay == "3"
    assert metric.has_delay
    assert not Metric.from_payload({"name": "P1"}).has_delay


def test_selected_product_tolerates_missing_payload() -> None:
    assert SelectedProduct.from_payload(None) == SelectedProduct()
    product = SelectedProduct.from_payload(
        {"tipo": "llegada", "metrics": [{"name": "P1", "delay": 1}, "junk"]}
    )
    assert product.tipo == "llegada"
    assert [metric.name for metric in product.metrics] == ["P1"]


def test_visual_state_payload_shape() -> None:
    state = VisualState(colorize=(1.0, 0.5, 0.0), opacity=0.8, visible=True)
    assert state.to_payload() == {"colorize": [1.0, 0.5, 0.0], "opacity": 0.8, "visible": True}
