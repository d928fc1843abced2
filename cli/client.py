import functools

from rich.console import Console


@functools.lru_cache()
def init_client():
    console = Console()
    with console.status("Initializing client"):
        import os

        import replicate_client

        access_token = os.environ.get("REPLICATE_API_TOKEN", None)
        if access_token:
            client = replicate_client.ReplicateClient(access_token=access_token)
        else:
            raise RuntimeError("Set REPLICATE_API_TOKEN")
        return client
