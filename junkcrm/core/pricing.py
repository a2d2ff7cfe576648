"""
Estimate Pricing Module

The truck-load calculator used for quotes. The dashboard and the quotes API
both price through `calculate_estimate`, so a quote built from calculator
items can be re-derived on the server.
"""
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

# Volume tiers: fraction of a full truck load
TIER_PRICES: Dict[str, Decimal] = {
    "1/8": Decimal("125"),
    "1/4": Decimal("250"),
    "1/2": Decimal("450"),
    "Full": Decimal("800"),
}

SURCHARGE_PRICES: Dict[str, Decimal] = {
    "Mattress": Decimal("25"),
    "Appliance": Decimal("35"),
    "Tires": Decimal("10"),
    "Upstairs Labor": Decimal("50"),
}

# Item labels the dashboard writes onto quotes, e.g. "1/4 Truck Load", "Mattress Disposal"
_TIER_SUFFIXES = ("", " Truck Load")
_SURCHARGE_SUFFIXES = ("", " Disposal", " Removal", " Labor")

CENTS = Decimal("0.01")


class PricingError(ValueError):
    """Raised for an unknown tier or surcharge name."""


def calculate_estimate(tier: Optional[str] = None, surcharges: Iterable[str] = ()) -> str:
    """
    Sum a volume tier and surcharge flags into a fixed-point total.

    Args:
        tier: One of TIER_PRICES, or None for no load
        surcharges: Names from SURCHARGE_PRICES; each flag counts once

    Returns:
        str: The total with two fraction digits, e.g. "835.00"

    Raises:
        PricingError: If a tier or surcharge name is not priced
    """
    total = Decimal("0")
    if tier is not None:
        if tier not in TIER_PRICES:
            raise PricingError(f"Unknown tier: {tier}")
        total += TIER_PRICES[tier]

    for name in set(surcharges):
        if name not in SURCHARGE_PRICES:
            raise PricingError(f"Unknown surcharge: {name}")
        total += SURCHARGE_PRICES[name]

    return str(total.quantize(CENTS))


def _match_label(label: str, names: Iterable[str], suffixes: Tuple[str, ...]) -> Optional[str]:
    for name in names:
        for suffix in suffixes:
            if label == f"{name}{suffix}":
                return name
    return None


def parse_quote_items(items: List[str]) -> Optional[Tuple[Optional[str], List[str]]]:
    """
    Map quote item labels back to calculator selections.

    Returns:
        (tier, surcharges) when every item is a calculator label, or None if
        any item is free-form text and the quote cannot be re-priced.

    Raises:
        PricingError: If the items select more than one volume tier
    """
    if not items:
        return None
    tiers: List[str] = []
    surcharges: List[str] = []
    for item in items:
        label = item.strip()
        tier = _match_label(label, TIER_PRICES, _TIER_SUFFIXES)
        if tier is not None:
            tiers.append(tier)
            continue
        surcharge = _match_label(label, SURCHARGE_PRICES, _SURCHARGE_SUFFIXES)
        if surcharge is not None:
            surcharges.append(surcharge)
            continue
        return None

    if len(tiers) > 1:
        raise PricingError("A quote can select at most one volume tier")
    return (tiers[0] if tiers else None), surcharges


def verify_quote_total(items: List[str], total: Decimal) -> None:
    """
    Re-price calculator quotes and reject totals that do not match.

    Quotes with free-form items are left alone.

    Raises:
        PricingError: If the submitted total differs from the recomputed one
    """
    selection = parse_quote_items(items)
    if selection is None:
        return
    tier, surcharges = selection
    expected = calculate_estimate(tier, surcharges)
    if Decimal(expected) != Decimal(total).quantize(CENTS):
        raise PricingError(f"Quote total {Decimal(total).quantize(CENTS)} does not match calculated total {expected}")
