"""Hypothesis profiles and shared pytest fixtures for the idcheck test suite."""

import pytest
from hypothesis import HealthCheck, settings

from idcheck import build_service
from idcheck.core.use_cases.validate_identity import IdentityValidationService

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=300,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def service() -> IdentityValidationService:
    return build_service()
