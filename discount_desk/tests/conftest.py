from __future__ import annotations

from pathlib import Path

import pytest

from discount_desk.domain.defaults import DEFAULT_CONFIG
from discount_desk.domain.models import DealInput, DealType, PricingConfig
from discount_desk.storage.local_cache import LocalConfigCache


@pytest.fixture
def default_config() -> PricingConfig:
    return DEFAULT_CONFIG


@pytest.fixture
def default_config_dict() -> dict:
    return DEFAULT_CONFIG.to_dict()


@pytest.fixture
def renewal_deal():
    def _make(current_ppl=120, current_licenses=100, proposed_licenses=100) -> DealInput:
        return DealInput(
            dealType=DealType.RENEWAL,
            currentPpl=current_ppl,
            currentLicenses=current_licenses,
            proposedLicenses=proposed_licenses,
        )

    return _make


@pytest.fixture
def net_new_deal():
    def _make(proposed_licenses=30) -> DealInput:
        return DealInput(dealType=DealType.NET_NEW, proposedLicenses=proposed_licenses)

    return _make


@pytest.fixture
def cache(tmp_path: Path) -> LocalConfigCache:
    return LocalConfigCache(tmp_path / "cache" / "discount_config_v2.json")
