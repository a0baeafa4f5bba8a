"""Tests for ActionEfficiencyService."""

import pytest

from pathviz.domain.actions import ActionEfficiencyService
from pathviz.domain.metrics import InvalidYearRangeError
from tests.shared.fixtures.factories import TestActionFactory


class TestDerive:
    def test_efficiency_is_cost_per_absolute_impact(self):
        actions, overview = TestActionFactory.mixed_impact_actions()

        derived = ActionEfficiencyService.derive(actions, overview, 2020, 2030)

        a, b = derived
        assert a.cumulative_impact == -5.0
        assert a.cumulative_cost == 50.0
        assert a.cumulative_efficiency == 10.0
        assert b.cumulative_efficiency == 2.0

    def test_impact_on_target_year_from_action_metric(self):
        actions, overview = TestActionFactory.mixed_impact_actions()

        derived = ActionEfficiencyService.derive(actions, overview, 2020, 2030)

        assert [d.impact_on_target_year for d in derived] == [-5.0, 10.0]

    def test_impact_on_target_year_defaults_to_zero(self):
        actions, overview = TestActionFactory.mixed_impact_actions()

        derived = ActionEfficiencyService.derive(actions, overview, 2020, 2025)

        assert [d.impact_on_target_year for d in derived] == [0.0, 0.0]

    def test_multiplier_scales_efficiency(self):
        action = TestActionFactory.action("a")
        overview = TestActionFactory.overview(
            [TestActionFactory.overview_entry("a", {2030: 4.0}, {2030: 2.0}, 1000)],
        )

        (item,) = ActionEfficiencyService.derive([action], overview, 2030, 2030)

        assert item.cumulative_efficiency == pytest.approx(500.0)
        assert item.unit_adjustment_multiplier == 1000

    def test_no_multiplier_means_no_efficiency(self):
        action = TestActionFactory.action("a")
        overview = TestActionFactory.overview(
            [TestActionFactory.overview_entry("a", {2030: 4.0}, {2030: 2.0}, None)],
        )

        (item,) = ActionEfficiencyService.derive([action], overview, 2030, 2030)

        assert item.cumulative_cost == 2.0
        assert item.cumulative_efficiency is None

    def test_zero_impact_means_no_efficiency(self):
        action = TestActionFactory.action("a")
        overview = TestActionFactory.overview(
            [TestActionFactory.overview_entry("a", {2030: 0.0}, {2030: 2.0})],
        )

        (item,) = ActionEfficiencyService.derive([action], overview, 2030, 2030)

        assert item.cumulative_impact == 0.0
        assert item.cumulative_efficiency is None

    def test_action_missing_from_overview(self):
        action = TestActionFactory.action("other", {2030: 3.0})
        _, overview = TestActionFactory.mixed_impact_actions()

        (item,) = ActionEfficiencyService.derive([action], overview, 2020, 2030)

        assert item.impact_on_target_year == 3.0
        assert item.cumulative_impact is None
        assert item.cumulative_cost is None

    def test_without_overview(self):
        action = TestActionFactory.action("a", {2030: 3.0})

        (item,) = ActionEfficiencyService.derive([action], None, 2020, 2030)

        assert item.cumulative_efficiency is None

    def test_window_limits_sums(self):
        action = TestActionFactory.action("a")
        overview = TestActionFactory.overview(
            [
                TestActionFactory.overview_entry(
                    "a",
                    {2020: 1.0, 2025: 2.0, 2035: 4.0},
                    {2020: 10.0, 2025: 10.0, 2035: 10.0},
                ),
            ],
        )

        (item,) = ActionEfficiencyService.derive([action], overview, 2020, 2030)

        assert item.cumulative_impact == 3.0
        assert item.cumulative_cost == 20.0

    def test_reversed_window_raises(self):
        with pytest.raises(InvalidYearRangeError):
            ActionEfficiencyService.derive([], None, 2030, 2020)
