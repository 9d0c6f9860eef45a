"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_async_loader,
    make_catalog,
    make_failing_loader,
    make_params,
    make_slot_segment,
    make_text_segment,
)

__all__ = [
    "make_async_loader",
    "make_catalog",
    "make_failing_loader",
    "make_params",
    "make_slot_segment",
    "make_text_segment",
]
