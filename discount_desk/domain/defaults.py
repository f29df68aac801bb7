from __future__ import annotations

from .models import NetNewVolumeRule, PricingConfig, RenewalRule

CONFIG_KEY = "discount_config_v2"

DEFAULT_CONFIG = PricingConfig(
    netNewListPrice=225,
    renewalRules=(
        RenewalRule(minCurrentPpl=0, maxCurrentPpl=108, lowestAllowedPrice=175),
        RenewalRule(minCurrentPpl=109, maxCurrentPpl=131, lowestAllowedPrice=190),
        RenewalRule(minCurrentPpl=132, maxCurrentPpl=None, lowestAllowedPrice=205),
    ),
    netNewVolumeRules=(
        NetNewVolumeRule(minLicenses=1, maxLicenses=24, discountPct=5),
        NetNewVolumeRule(minLicenses=25, maxLicenses=49, discountPct=10),
        NetNewVolumeRule(minLicenses=50, maxLicenses=99, discountPct=15),
        NetNewVolumeRule(minLicenses=100, maxLicenses=249, discountPct=20),
        NetNewVolumeRule(minLicenses=250, maxLicenses=None, discountPct=25),
    ),
)
