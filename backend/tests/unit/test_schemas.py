"""Unit tests for the wire schemas."""

import warnings

from app.application.schemas import ResolvedModelResponse
from app.application.schemas.registry import _CamelModel


def test_model_prefixed_fields_do_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")

        class _ModelPayload(_CamelModel):
            model_path: str
            model_name: str

    assert _ModelPayload(model_path="/uploads/a.glb", model_name="a").model_path == "/uploads/a.glb"


def test_resolved_model_is_camel_case_on_the_wire():
    payload = ResolvedModelResponse(
        model_path="/uploads/1-tower.glb",
        client_name="Acme Co",
        project_name="p1",
        description="Tower",
    )

    assert payload.model_dump(by_alias=True) == {
        "modelPath": "/uploads/1-tower.glb",
        "clientName": "Acme Co",
        "projectName": "p1",
        "description": "Tower",
    }
