"""In-memory filter graph model serialised to ``-filter_complex`` text.

Stages are collected first and checked as a whole before any text is
produced: every label is produced once, every produced label is consumed
exactly once downstream, and only the terminal ``out`` label is left for
``-map``.
"""
from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

OUT_LABEL = "out"

_SOURCE_RE = re.compile(r"^\d+:v$")


class GraphError(ValueError):
    """Raised when a filter graph breaks its labelling rules."""


def source_label(input_index: int) -> str:
    """Label addressing the video stream of encoder input ``input_index``."""
    return f"{input_index}:v"


@dataclass(frozen=True)
class Stage:
    """A filter chain reading ``inputs`` and writing ``output``."""

    inputs: Tuple[str, ...]
    filters: Tuple[str, ...]
    output: str

    def render(self) -> str:
        ins = "".join(f"[{label}]" for label in self.inputs)
        return f"{ins}{','.join(self.filters)}[{self.output}]"


@dataclass
class FilterGraph:
    stages: List[Stage] = field(default_factory=list)

    def add(self, inputs: Sequence[str], filters: Sequence[str], output: str) -> str:
        """Append a stage and return its output label."""
        if not filters:
            raise GraphError(f"stage [{output}] has no filters")
        if any(s.output == output for s in self.stages):
            raise GraphError(f"label [{output}] produced twice")
        self.stages.append(Stage(tuple(inputs), tuple(filters), output))
        return output

    @property
    def outputs(self) -> List[str]:
        return [s.output for s in self.stages]

    def validate(self) -> None:
        """Check label usage; raise :class:`GraphError` on the first problem."""
        produced = set()
        consumed: Counter = Counter()
        for stage in self.stages:
            for label in stage.inputs:
                if _SOURCE_RE.match(label):
                    continue
                if label not in produced:
                    raise GraphError(f"label [{label}] used before it is produced")
                consumed[label] += 1
            produced.add(stage.output)

        if OUT_LABEL not in produced:
            raise GraphError(f"graph has no [{OUT_LABEL}] stage")
        if consumed[OUT_LABEL]:
            raise GraphError(f"[{OUT_LABEL}] must not feed another stage")
        for label in produced - {OUT_LABEL}:
            if consumed[label] != 1:
                raise GraphError(
                    f"label [{label}] consumed {consumed[label]} times, expected 1"
                )

    def serialize(self) -> str:
        self.validate()
        return ";".join(stage.render() for stage in self.stages)
