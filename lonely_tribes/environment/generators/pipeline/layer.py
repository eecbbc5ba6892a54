"""Abstract base class for generation layers.

Each layer in the pipeline implements the GenerationLayer interface and
transforms the GenerationContext in some way - carving walls or adding
sprite placements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationLayer(ABC):
    """Abstract base class for level generation layers.

    Layers are applied sequentially by the PipelineGenerator. Each layer
    receives a GenerationContext and modifies it in place.

    Subclasses must implement the apply() method to perform their specific
    generation logic.
    """

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Apply this layer's generation logic to the context.

        This method should modify the context in place. It may:
        - Write the wall grid (ctx.walls), room layer only
        - Append sprite placements (ctx.placements)
        - Draw from named streams of ctx.rng for random decisions

        Layers must never remove placements written by earlier layers.

        Args:
            ctx: The generation context to modify.

        Raises:
            LevelGenerationError: If the layer cannot complete. The run is
                aborted and no partial level is returned.
        """
        raise NotImplementedError
