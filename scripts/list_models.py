#!/usr/bin/env python3
"""Print the models each provider currently advertises."""

import argparse
import asyncio
import logging
import time

from model_catalog import ModelCatalog, is_recommended, settings
from model_catalog.config import PROVIDER_CATALOGUE, initialize_provider_env_vars


async def main(providers):
    catalog = ModelCatalog()
    for p in providers:
        catalog.prefetch(p)

    for p in providers:
        models = await catalog.get_available_models(p)
        entry = catalog.get_entry(p)
        status = entry.error.value if entry and entry.error else "ok"
        fetched = time.strftime("%H:%M:%S", time.localtime(entry.fetched_at)) if entry else "-"
        print(f"--- {p} ({len(models)} models, {status}, fetched {fetched}) ---")
        for m in models:
            marker = "*" if is_recommended(m) else " "
            print(f" {marker} {m}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="List models available from providers.")
    parser.add_argument(
        "providers",
        nargs="*",
        default=sorted(PROVIDER_CATALOGUE),
        help="Provider names (default: every known provider)",
    )
    args = parser.parse_args()

    initialize_provider_env_vars()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
    asyncio.run(main(args.providers))
