"""Runtime settings, read from ``STOREFRONT_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    cart_file: Path
    log_level: str = "INFO"
    shipping_provider: str = "mock"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        data_dir = Path(env.get("STOREFRONT_DATA_DIR", DEFAULT_DATA_DIR))
        cart_file = Path(env.get("STOREFRONT_CART_FILE", data_dir / "cart.json"))
        return cls(
            data_dir=data_dir,
            cart_file=cart_file,
            log_level=env.get("STOREFRONT_LOG_LEVEL", "INFO").upper(),
            shipping_provider=env.get("STOREFRONT_SHIPPING_PROVIDER", "mock"),
        )
