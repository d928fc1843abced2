import os
from urllib.parse import urljoin


def replicate_url(sub_path: str):
    replicate_base = os.environ.get(
        "REPLICATE_DASHBOARD", "https://replicate.com/"
    )
    return urljoin(replicate_base, sub_path.lstrip("/"))
