from typing import TYPE_CHECKING

from .data_transfer_object.hardware_details import HardwareDetails
from .pydantic_base import parse_payload

if TYPE_CHECKING:
    from . import ReplicateClient


class Hardware:
    """A hardware SKU models and deployments can run on, e.g. ``gpu-t4``."""

    def __init__(self, sku: str, name: str, client: "ReplicateClient"):
        self.sku = sku
        self.name = name
        self._client = client

    def __repr__(self):
        return f"Hardware(sku='{self.sku}', name='{self.name}')"

    def __str__(self):
        return f"{self.name} ({self.sku})"

    def __eq__(self, other):
        return (self.sku == other.sku) and (self.name == other.name)

    def __hash__(self):
        return hash(self.sku)

    @classmethod
    def from_json(cls, payload: dict, client: "ReplicateClient") -> "Hardware":
        details = parse_payload(HardwareDetails, payload)
        return cls(sku=details.sku, name=details.name, client=client)
