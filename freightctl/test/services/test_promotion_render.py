from __future__ import annotations

import io
import json
from collections.abc import Mapping
from typing import TextIO

from freightctl.api.client import RemoteError
from freightctl.api.types import Promotion
from freightctl.output.printers import JsonPrinter
from freightctl.services.promotion import (
    PROMOTE_STAGE,
    PROMOTE_SUBSCRIBERS,
    PromotionOutcome,
    RemoteCallError,
    created_line,
    render,
)

_E = RemoteError("internal", "boom")


class RecordingPrinter:
    def __init__(self) -> None:
        self.objects: list[Mapping[str, object]] = []

    def print_obj(self, obj: Mapping[str, object], out: TextIO) -> None:
        self.objects.append(obj)
        out.write(f"<{obj['metadata']}>\n")  # type: ignore[index]


def _promo(name: str) -> Promotion:
    return Promotion.from_wire({"metadata": {"name": name, "namespace": "my-project"}})


class TestPlainMode:
    def test_single_stage_success(self) -> None:
        out = io.StringIO()
        error = render(PromotionOutcome(promotions=(_promo("promo-1"),)), None, out)
        assert out.getvalue() == 'Promotion Created: "promo-1"\n'
        assert error is None

    def test_single_stage_failure_prints_nothing(self) -> None:
        out = io.StringIO()
        call_error = RemoteCallError(PROMOTE_STAGE, _E)
        error = render(PromotionOutcome(error=call_error), None, out)
        assert out.getvalue() == ""
        assert error is call_error
        assert str(error) == "promote stage: internal: boom"

    def test_partial_subscribers_prints_created_then_returns_error(self) -> None:
        out = io.StringIO()
        call_error = RemoteCallError(PROMOTE_SUBSCRIBERS, _E)
        outcome = PromotionOutcome(promotions=(_promo("promo-2"), _promo("promo-3")), error=call_error)

        error = render(outcome, None, out)

        assert out.getvalue() == (
            'Promotion Created: "promo-2"\nPromotion Created: "promo-3"\n'
        )
        assert error == call_error

    def test_render_is_idempotent(self) -> None:
        outcome = PromotionOutcome(promotions=(_promo("a"), _promo("b")))
        first, second = io.StringIO(), io.StringIO()
        render(outcome, None, first)
        render(outcome, None, second)
        assert first.getvalue() == second.getvalue()

    def test_name_is_quoted(self) -> None:
        assert created_line('we"ird') == 'Promotion Created: "we\\"ird"'


class TestStructuredMode:
    def test_prints_every_object_in_order(self) -> None:
        out = io.StringIO()
        printer = RecordingPrinter()
        outcome = PromotionOutcome(promotions=(_promo("promo-2"), _promo("promo-3")))

        error = render(outcome, printer, out)

        assert error is None
        assert [o["metadata"] for o in printer.objects] == [  # type: ignore[index]
            {"name": "promo-2", "namespace": "my-project"},
            {"name": "promo-3", "namespace": "my-project"},
        ]
        assert all(o["kind"] == "Promotion" for o in printer.objects)
        assert "Promotion Created" not in out.getvalue()

    def test_partial_objects_printed_and_error_returned_unchanged(self) -> None:
        out = io.StringIO()
        printer = RecordingPrinter()
        call_error = RemoteCallError(PROMOTE_SUBSCRIBERS, _E)

        error = render(PromotionOutcome(promotions=(_promo("promo-2"),), error=call_error), printer, out)

        assert len(printer.objects) == 1
        assert error is call_error

    def test_json_documents(self) -> None:
        out = io.StringIO()
        render(PromotionOutcome(promotions=(_promo("promo-1"),)), JsonPrinter(), out)
        doc = json.loads(out.getvalue())
        assert doc["apiVersion"] == "kargo.akuity.io/v1alpha1"
        assert doc["metadata"]["name"] == "promo-1"
