# pathviz/core/playback.py
#!/usr/bin/env python3
"""
Frame-by-frame replay of a finished search, one frame per step() for animation.

API expected by the viewer:
- reset() - step() -> StepResult - finished

The search itself has already run to completion; this object only walks its
exploration frames and then reports the path (or that there is none).
"""

from dataclasses import dataclass, field
from typing import List

from pathviz.core.types import Position, SearchResult, StepResult


@dataclass
class Playback:
    result: SearchResult
    name: str = ""

    # Internal state
    shown: int = 0
    explored_count: int = 0
    done: bool = False
    seen: set = field(default_factory=set)

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        """Rewind to before the first frame."""
        self.shown = 0
        self.explored_count = 0
        self.done = False
        self.seen.clear()

    @property
    def finished(self) -> bool:
        return self.done

    @property
    def found(self) -> bool:
        return bool(self.result.path)

    # -------------------- main stepping logic --------------------

    def step(self) -> StepResult:
        """
        Advance by ONE frame:
          - While frames remain, hand back the next one as `closed`.
          - Then finish with the path ("done") or "no_path".
          - Once finished, keep repeating the terminal status.
        """
        frames = self.result.explored
        if self.shown < len(frames):
            frame: List[Position] = list(frames[self.shown])
            self.shown += 1
            for p in frame:
                if p not in self.seen:
                    self.seen.add(p)
                    self.explored_count += 1
            return StepResult(
                status="running",
                closed=frame,
                current=frame[-1] if frame else None,
                metrics=self._metrics(),
            )

        self.done = True
        if not self.found:
            return StepResult(status="no_path", metrics=self._metrics())
        path = list(self.result.path)
        return StepResult(
            status="done",
            current=path[-1],
            path=path,
            metrics=self._metrics(path_len=len(path)),
        )

    # -------------------- metrics --------------------

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "frames": len(self.result.explored),
            "shown": self.shown,
            "explored_count": self.explored_count,
            "path_len": path_len,
        }
