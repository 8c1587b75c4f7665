"""
Suppression filtering for diagnostics of one file.

Applies the "ignore" rules of every "paths" entry matching the file.
"""

from __future__ import annotations

import os
from typing import Any

from workflowlint.config.models import Config, message_of, path_configs_for
from workflowlint.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class SuppressionFilter:
    """Drops diagnostics ignored by the "paths" configuration."""

    @staticmethod
    def apply(
        config: Config | None,
        path: str | os.PathLike[str],
        diagnostics: list[Any],
    ) -> list[Any]:
        """
        Apply path-based suppression rules.

        A diagnostic is dropped when ANY entry whose glob matches ``path``
        ignores its message.

        Args:
            config: Loaded configuration, or None when the repository has none
            path: File the diagnostics belong to, relative to the project root
            diagnostics: Messages, or objects with a ``message`` attribute

        Returns:
            Diagnostics that are not suppressed, in their original order
        """
        if not diagnostics:
            return diagnostics

        matching = path_configs_for(config, path)
        if not matching:
            return diagnostics

        kept = []
        for diagnostic in diagnostics:
            matched = next((cfg for cfg in matching if cfg.ignores(diagnostic)), None)
            if matched is None:
                kept.append(diagnostic)
                continue

            logger.info(
                "diagnostic_suppressed_by_config",
                file=os.fspath(path),
                message=message_of(diagnostic),
                matched_glob=matched.glob,
            )

        suppressed_count = len(diagnostics) - len(kept)
        if suppressed_count > 0:
            logger.info(
                "suppression_filter_summary",
                file=os.fspath(path),
                total_diagnostics=len(diagnostics),
                suppressed=suppressed_count,
                remaining=len(kept),
            )

        return kept
