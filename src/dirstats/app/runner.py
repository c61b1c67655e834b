"""Application runner for dirstats."""

from __future__ import annotations

import logging

from dirstats.config import InspectionConfig
from dirstats.core.policies import create_policy
from dirstats.core.report import ReportEmitter
from dirstats.core.traversal import DirectoryTraversal
from dirstats.types.models import TraversalSummary
from dirstats.utils.logging import directory_context

logger = logging.getLogger(__name__)


class ApplicationRunner:
    """Runs one inspection: traversal under the selected policy, then the summary."""

    def __init__(
        self,
        config: InspectionConfig,
        emitter: ReportEmitter | None = None,
        *,
        show_header: bool = False,
    ) -> None:
        """Initialize the application runner.

        Args:
            config: Validated settings for this run
            emitter: Output sink for the listing (default: standard output)
            show_header: Print the "Listing files in directory" banner (full listing)
        """
        self.config: InspectionConfig = config
        self.emitter: ReportEmitter = emitter or ReportEmitter()
        self.show_header: bool = show_header
        self.traversal: DirectoryTraversal = DirectoryTraversal(
            max_path_length=config.max_path_length,
            link_buffer_size=config.link_buffer_size,
        )

    def run(self) -> TraversalSummary:
        """Run the inspection.

        Returns:
            Totals for the inspected directory

        Raises:
            DirectoryOpenError: If the directory cannot be opened
        """
        directory = self.config.directory
        policy = create_policy(self.config.mode, self.emitter, show_header=self.show_header)

        with directory_context(directory):
            logger.info("Inspecting directory in mode %d", self.config.mode)
            summary = self.traversal.traverse(directory, policy)
            policy.finish(summary)

        if summary.failed_entries:
            logger.info("%d entries could not be inspected", summary.failed_entries)
        return summary
