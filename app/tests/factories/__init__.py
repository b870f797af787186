"""Test data factories for deterministic test data generation."""

from tests.factories.identity import (
    make_error_state,
    make_identity,
    make_identity_state,
    make_loading_state,
    make_profile,
    make_profiles,
)

__all__ = [
    "make_error_state",
    "make_identity",
    "make_identity_state",
    "make_loading_state",
    "make_profile",
    "make_profiles",
]
