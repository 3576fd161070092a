"""
Configuration loader for mesh address handling.

Loads YAML configuration holding display options and the known Label UUID
pool used for virtual address resolution.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .address.formatting import format_address
from .address.virtual import resolve_label_uuid


@dataclass
class MeshAddressConfig:
    """
    Mesh address configuration.

    Label UUID order is significant: on a hash collision the earlier
    entry wins resolution.
    """
    add_0x_prefix: bool = True
    label_uuids: List[uuid.UUID] = field(default_factory=list)

    def format(self, address: int) -> str:
        """Format an address using the configured prefix option."""
        return format_address(address, add_0x=self.add_0x_prefix)

    def resolve(self, address: int) -> Optional[uuid.UUID]:
        """Resolve a virtual address against the configured Label UUIDs."""
        return resolve_label_uuid(self.label_uuids, address)

    def validate(self) -> None:
        """Validate configuration values."""
        for label_uuid in self.label_uuids:
            if not isinstance(label_uuid, uuid.UUID):
                raise ValueError(f"label_uuids entries must be UUIDs: {label_uuid!r}")
        if len(set(self.label_uuids)) != len(self.label_uuids):
            raise ValueError("label_uuids contains duplicates")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for YAML serialization."""
        return {
            "mesh_address": {
                "add_0x_prefix": self.add_0x_prefix,
                "label_uuids": [str(u) for u in self.label_uuids],
            }
        }

    def save(self, path: Path) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_mesh_address_config(config_path: str | Path) -> MeshAddressConfig:
    """
    Load mesh address configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file.

    Returns:
        MeshAddressConfig instance.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Mesh address config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    return _parse_mesh_address_config(data)


def _parse_label_uuid(value: Any) -> uuid.UUID:
    """Parse a Label UUID from its string form (dashed or 32 hex digits)."""
    try:
        return uuid.UUID(str(value))
    except ValueError:
        raise ValueError(f"Invalid Label UUID: {value!r}") from None


def _parse_bool(value: Any, name: str) -> bool:
    """Require a real YAML boolean; strings like "false" are rejected."""
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def _parse_mesh_address_config(data: Dict[str, Any]) -> MeshAddressConfig:
    """Parse YAML data into MeshAddressConfig."""
    section = data.get("mesh_address", data)  # Support both nested and flat format

    config = MeshAddressConfig(
        add_0x_prefix=_parse_bool(section.get("add_0x_prefix", True), "add_0x_prefix"),
        label_uuids=[
            _parse_label_uuid(v) for v in (section.get("label_uuids") or [])
        ],
    )
    config.validate()
    return config


def get_default_config() -> MeshAddressConfig:
    """Get default configuration (0x prefix, empty Label UUID pool)."""
    return MeshAddressConfig()
