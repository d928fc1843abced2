from replicate_client.pydantic_base import DictCompatibleModel


class HardwareDetails(DictCompatibleModel):
    sku: str
    name: str
