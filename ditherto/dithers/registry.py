"""Name-keyed registry of dithering algorithms."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, Optional, Sequence

from ..image import RawImage

ApplyFn = Callable[[RawImage, Sequence[Sequence[int]], int], RawImage]


@dataclass(frozen=True)
class DitherAlgorithm:
    """A named, stateless ``(image, palette, step) -> image`` transform."""

    name: str
    apply: ApplyFn

    def __call__(self, image: RawImage, palette: Sequence[Sequence[int]], step: int = 1) -> RawImage:
        return self.apply(image, palette, step)


class AlgorithmRegistry:
    """Mapping of algorithm names to :class:`DitherAlgorithm` entries.

    Registering a name that already exists replaces the previous entry.
    Lookups are case-sensitive and never raise; callers decide how to report
    a missing name.
    """

    def __init__(self) -> None:
        self._algorithms: Dict[str, DitherAlgorithm] = {}

    def register(self, algorithm: DitherAlgorithm) -> DitherAlgorithm:
        self._algorithms[algorithm.name] = algorithm
        return algorithm

    def get(self, name: str) -> Optional[DitherAlgorithm]:
        return self._algorithms.get(name)

    def clear(self) -> None:
        self._algorithms.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._algorithms

    def __len__(self) -> int:
        return len(self._algorithms)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._algorithms))

    def list(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._algorithms)


__all__ = ["ApplyFn", "DitherAlgorithm", "AlgorithmRegistry"]
