# src/prepdeck/commands/seed.py
"""Seed command - merge the project seed file into the store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from prepdeck.commands.base import SeedResult, open_tracker
from prepdeck.config import ConfigError
from prepdeck.seed import SeedLoader

if TYPE_CHECKING:
    from prepdeck.tracker import Tracker


def seed(
    path: str | Path | None = None,
    force: bool = False,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
    tracker: Tracker | None = None,
) -> SeedResult:
    """Merge seed questions.

    Without force the seed is merged only into an empty store. With force
    it is merged regardless, replacing stored copies of seed questions.

    Args:
        path: Seed file to use instead of the configured one
        force: Merge even when the store already has questions
        data_dir: Override data directory
        config_path: Override config file path
        tracker: Use this tracker instead of building one from config
    """
    opened = open_tracker(tracker, data_dir, config_path, bootstrap=False)
    if isinstance(opened, ConfigError):
        return SeedResult(success=False, error=opened.message)

    if path is not None:
        opened.seed_loader = SeedLoader(path)
    seed_path = str(opened.seed_loader.path)

    if opened.seed_loader.load() is None:
        return SeedResult(
            success=False,
            seed_path=seed_path,
            error=f"No usable seed file at {seed_path}",
        )

    merged = opened.bootstrap(policy="always" if force else "if_empty")
    return SeedResult(
        success=True,
        seed_path=seed_path,
        merged=merged,
        total=opened.question_store.count_questions(),
    )
