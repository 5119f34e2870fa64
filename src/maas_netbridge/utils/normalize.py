"""Normalization helpers for bridge configuration and interface data.

Normalization produces a stable, canonical form suitable for reliable
comparisons: lower-case colon-separated MAC addresses, sorted unique tags,
and ``None`` for the untagged VLAN sentinel.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from maas_netbridge.model.bridge import BridgeConfig
from maas_netbridge.vendor.maas.mappings import VLAN_UNTAGGED


def normalize_mac(mac: str) -> str:
    """Return *mac* in lower-case, colon-separated form.

    ``AA-BB-CC-DD-EE-FF`` and ``aa:bb:cc:dd:ee:ff`` both become
    ``aa:bb:cc:dd:ee:ff``.  Surrounding whitespace is stripped; the value is
    not otherwise validated.
    """
    return mac.strip().lower().replace("-", ":")


def normalize_tags(tags: Iterable[str]) -> list[str]:
    """Deduplicate, strip and sort *tags*, dropping empty names."""
    return sorted({t.strip() for t in tags if t and t.strip()})


def normalize_vlan(vlan: str | int | None) -> str | None:
    """Return the VLAN ID as a string, or ``None`` for the untagged sentinel."""
    if vlan is None:
        return None
    value = str(vlan).strip()
    if not value or value.lower() == VLAN_UNTAGGED:
        return None
    return value


def normalize_bridge_config(cfg: BridgeConfig) -> BridgeConfig:
    """Return a normalized copy of *cfg*.

    Normalization rules:

    - Canonicalize ``mac_address`` via :func:`normalize_mac`.
    - Deduplicate and sort ``tags``, keeping ``None`` as "not managed".
    - Map the ``"untagged"`` VLAN sentinel and empty strings to ``None``.
    - An empty ``name`` means "let MAAS choose" and becomes ``None``.
    """
    return replace(
        cfg,
        mac_address=normalize_mac(cfg.mac_address),
        tags=tuple(normalize_tags(cfg.tags)) if cfg.tags is not None else None,
        vlan=normalize_vlan(cfg.vlan),
        name=cfg.name or None,
    )
