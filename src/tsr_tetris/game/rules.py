from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_points: int = 100
    hard_drop_points_per_row: int = 2
    lines_per_level: int = 10
    base_drop_interval_ms: int = 1000
    drop_interval_step_ms: int = 100
    min_drop_interval_ms: int = 100

    def hard_drop_score(self, rows: int) -> int:
        return max(0, rows) * self.hard_drop_points_per_row

    def score_for_lines(self, lines: int, level: int) -> int:
        # Level is the one in effect before this clear is counted.
        if lines <= 0:
            return 0
        return self.line_clear_points * lines * level

    def level_for_lines(self, total_lines: int) -> int:
        return total_lines // self.lines_per_level + 1

    def drop_interval_for_level(self, level: int) -> int:
        interval = self.base_drop_interval_ms - (level - 1) * self.drop_interval_step_ms
        return max(self.min_drop_interval_ms, interval)
