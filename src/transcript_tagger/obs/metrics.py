from __future__ import annotations
import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable

@dataclass
class _Timer:
    sum_ms: float = 0.0
    count: int = 0

class Metrics:
    """Process-local request counters, timers and per-category tag counts."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._requests: Counter[str] = Counter()
        self._tags: Counter[str] = Counter()
        self._timers: Dict[str, _Timer] = {}

    def inc(self, name: str, n: int = 1) -> None:
        with self._lock:
            self._requests[name] += int(n)

    def observe_ms(self, name: str, ms: float) -> None:
        with self._lock:
            t = self._timers.setdefault(name, _Timer())
            t.sum_ms += float(ms)
            t.count += 1

    def record_tags(self, tags: Iterable[str]) -> None:
        with self._lock:
            self._tags.update(tags)

    def tag_counts(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._tags)

    def export_prom(self) -> str:
        lines: list[str] = []
        with self._lock:
            for k in sorted(self._requests):
                lines.append(f"# TYPE {k} counter")
                lines.append(f"{k} {self._requests[k]}")
            if self._tags:
                lines.append("# TYPE tags_emitted_total counter")
                for cat in sorted(self._tags):
                    lines.append(f'tags_emitted_total{{category="{cat}"}} {self._tags[cat]}')
            for k in sorted(self._timers):
                t = self._timers[k]
                lines.append(f"# TYPE {k}_ms summary")
                lines.append(f"{k}_ms_sum {t.sum_ms:.3f}")
                lines.append(f"{k}_ms_count {t.count}")
        return "\n".join(lines) + "\n"

    def reset(self) -> None:
        with self._lock:
            self._requests.clear()
            self._tags.clear()
            self._timers.clear()

METRICS = Metrics()
