"""Binary resolver use case for walking the resolution tiers in priority order."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

from lsp_binary.domain.binary import BinaryDescriptor
from lsp_binary.usecases.resolution_strategies import ResolutionSource, ResolutionStrategy

if TYPE_CHECKING:
    from lsp_binary.adapters.ports import LoggingPort, WorkspacePort


@dataclass(frozen=True)
class BinaryResolutionResult:
    """Result of walking the resolution tiers.

    Attributes:
        source: The tier that produced the binary, or None if no tier did.
        descriptor: The resolved binary, or None if no tier produced one.
    """

    source: ResolutionSource | None
    descriptor: BinaryDescriptor | None

    @property
    def found(self) -> bool:
        """Return True if a tier produced a binary."""
        return self.descriptor is not None


class BinaryResolver:
    """Use case for resolving the language-server binary without installing.

    Tries an ordered list of resolution strategies; the first strategy that
    returns a descriptor wins. The default order reflects trust:
    1. Explicit configuration in host settings
    2. The workspace shell's PATH
    3. A binary installed earlier in this process

    A miss means the caller should fall back to installing the binary.
    """

    def __init__(
        self,
        strategies: Sequence[ResolutionStrategy],
        logger: LoggingPort,
    ) -> None:
        """Initialize the binary resolver use case.

        Args:
            strategies: Resolution strategies in priority order.
            logger: Port for reporting which tier resolved the binary.
        """
        self._strategies = tuple(strategies)
        self._logger = logger

    @property
    def strategies(self) -> tuple[ResolutionStrategy, ...]:
        """Return the strategies in priority order."""
        return self._strategies

    def __call__(self, workspace: WorkspacePort) -> BinaryResolutionResult:
        """Execute the resolution workflow.

        Args:
            workspace: Workspace the language server is started for.

        Returns:
            BinaryResolutionResult with the winning tier and descriptor, or
            with both fields None when every tier missed.
        """
        for strategy in self._strategies:
            descriptor = strategy.resolve(workspace)
            if descriptor is not None:
                self._logger.info(
                    f"Resolved {descriptor.path} from {strategy.source.value}"
                )
                return BinaryResolutionResult(source=strategy.source, descriptor=descriptor)

        return BinaryResolutionResult(source=None, descriptor=None)
