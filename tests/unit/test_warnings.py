"""Tests for the structural warning engine."""

from __future__ import annotations

from shelfgrid.domain import DesignParams, DesignWarning, MergeSpec, generate_warnings
from shelfgrid.domain.services import GridSizeRule, MergeSpanRule, WarningEngine
from shelfgrid.domain.value_objects import WarningSeverity


class _DoorRule:
    """Example custom rule flagging designs with doors."""

    name = "doors"

    def check(self, params: DesignParams) -> list[DesignWarning]:
        if not params.has_doors:
            return []
        return [
            DesignWarning(
                type="doors", message="Doors enabled", severity=WarningSeverity.INFO
            )
        ]


class TestMergeSpanRule:
    """Tests for merge span warnings."""

    def test_no_warnings_for_small_merges(self) -> None:
        """Spans under three modules are fine."""
        params = DesignParams(rows=2, cols=2, merges=(MergeSpec(0, 0, 1, 1),))
        assert generate_warnings(params) == []

    def test_horizontal_span(self) -> None:
        """A merge three modules wide is flagged with its index."""
        params = DesignParams(
            rows=2,
            cols=4,
            merges=(MergeSpec(1, 0, 1, 0), MergeSpec(0, 0, 0, 2)),
        )
        warnings = generate_warnings(params)
        assert warnings == [
            DesignWarning(
                type="span_too_large",
                message="Horizontal span of 3 modules may require additional support",
                severity=WarningSeverity.WARNING,
                merge_index=1,
            )
        ]

    def test_both_directions_give_two_warnings(self) -> None:
        """A merge long in both directions gets a warning for each."""
        params = DesignParams(rows=3, cols=3, merges=(MergeSpec(0, 0, 2, 2),))
        warnings = MergeSpanRule().check(params)
        assert [w.message for w in warnings] == [
            "Horizontal span of 3 modules may require additional support",
            "Vertical span of 3 modules may require additional support",
        ]
        assert all(w.merge_index == 0 for w in warnings)

    def test_custom_threshold(self) -> None:
        """The span threshold is configurable."""
        params = DesignParams(rows=2, cols=2, merges=(MergeSpec(0, 0, 0, 1),))
        assert len(MergeSpanRule(max_modules=2).check(params)) == 1


class TestGridSizeRule:
    """Tests for the large grid note."""

    def test_four_by_four_is_fine(self) -> None:
        """Grids up to 4x4 produce no note."""
        assert GridSizeRule().check(DesignParams(rows=4, cols=4)) == []

    def test_large_grid_info(self) -> None:
        """More than four rows or columns produces one unindexed info note."""
        warnings = generate_warnings(DesignParams(rows=5, cols=2))
        assert len(warnings) == 1
        assert warnings[0].severity == WarningSeverity.INFO
        assert warnings[0].merge_index is None
        assert "bracing" in warnings[0].message


class TestWarningEngine:
    """Tests for WarningEngine."""

    def test_rules_run_in_order(self) -> None:
        """Warnings from each rule are concatenated in rule order."""
        params = DesignParams(rows=5, cols=5, merges=(MergeSpec(0, 0, 0, 3),))
        warnings = WarningEngine().generate(params)
        assert [w.severity for w in warnings] == [
            WarningSeverity.WARNING,
            WarningSeverity.INFO,
        ]

    def test_with_rules_extends_engine(self) -> None:
        """Extra rules are appended without changing the original engine."""
        engine = WarningEngine()
        extended = engine.with_rules(_DoorRule())
        params = DesignParams(has_doors=True)
        assert engine.generate(params) == []
        assert [w.type for w in extended.generate(params)] == ["doors"]

    def test_empty_rule_set(self) -> None:
        """An engine without rules never warns."""
        params = DesignParams(rows=6, cols=6, merges=(MergeSpec(0, 0, 5, 5),))
        assert WarningEngine(rules=()).generate(params) == []
