"""show and edit the config file

every change is written back immediately
"""

import logging
from pathlib import Path

from .config import ConfigStore

logger = logging.getLogger(__name__)


def show(store: ConfigStore) -> str:
    # make sure there is a file to show
    store.load()
    return store.read_text()


def set_base(store: ConfigStore, base: Path) -> None:
    config = store.load()
    config.base = base
    store.store(config)
    logger.info(f"base = {base}")


def add_mapping(store: ConfigStore, host: str, path: Path) -> None:
    config = store.load()
    config.add_mapping(host, path)
    store.store(config)
    logger.info(f"mapping {host} -> {path}")


def remove_mapping(store: ConfigStore, host: str) -> None:
    config = store.load()
    if host not in config.mappings:
        logger.info(f"no mapping for {host}")
    config.remove_mapping(host)
    store.store(config)
