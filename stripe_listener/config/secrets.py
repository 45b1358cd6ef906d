"""Secrets and authentication configuration."""

from __future__ import annotations

import os

ENV_STRIPE_API_KEY = "STRIPE_API_KEY"


def get_stripe_api_key() -> str:
    return (os.getenv(ENV_STRIPE_API_KEY) or "").strip()


__all__ = ["ENV_STRIPE_API_KEY", "get_stripe_api_key"]
