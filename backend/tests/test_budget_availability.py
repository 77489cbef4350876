"""
Unit tests for budget and availability matching.
"""

from config.settings import AvailabilityConfig
from matching import AvailabilityMatcher, BudgetMatcher
from tests.fixtures import create_test_project, create_test_talent


class TestBudgetMatcher:
    """Test cases for rate-vs-budget scoring."""

    def setup_method(self):
        self.matcher = BudgetMatcher()

    def test_rate_within_budget(self):
        """Test an overlapping rate range."""
        result = self.matcher.evaluate(create_test_talent(), create_test_project())

        assert result.is_within_budget is True
        assert result.budget_alignment == 100
        assert result.cost_efficiency == 75
        assert result.proposed_rate == 70
        # 75 cost efficiency * 1.2 experience * 0.92 reputation / 2
        assert result.value_score == 41
        assert "✓ Rate aligns with project budget" in result.recommendations

    def test_rate_well_above_budget(self):
        """Test a talent at 80-100/hr against a 50-70/hr budget."""
        talent = create_test_talent(hourlyRate={"min": 80, "max": 100})
        project = create_test_project(budget={"min": 50, "max": 70, "type": "hourly"})

        result = self.matcher.evaluate(talent, project)

        assert result.is_within_budget is False
        assert 20 <= result.budget_alignment <= 40
        assert result.budget_alignment == 40
        assert result.cost_efficiency == 30

    def test_rate_slightly_above_budget(self):
        talent = create_test_talent(hourlyRate={"min": 75, "max": 85})
        project = create_test_project(budget={"min": 50, "max": 70, "type": "hourly"})

        result = self.matcher.evaluate(talent, project)

        assert result.is_within_budget is False
        assert result.budget_alignment == 70

    def test_rate_far_above_budget(self):
        talent = create_test_talent(hourlyRate={"min": 150, "max": 200})
        project = create_test_project(budget={"min": 50, "max": 70, "type": "hourly"})

        result = self.matcher.evaluate(talent, project)

        assert result.budget_alignment == 20
        assert "Well above budget - unlikely to be affordable" in result.recommendations

    def test_rate_below_budget(self):
        """Test that a talent below budget is flagged as a value opportunity."""
        talent = create_test_talent(hourlyRate={"min": 20, "max": 30})

        result = self.matcher.evaluate(talent, create_test_project())

        assert result.is_within_budget is False
        assert result.budget_alignment == 80
        assert result.cost_efficiency == 90

    def test_value_score_is_capped(self):
        """Test value score with maximal experience and rating stays within range."""
        talent = create_test_talent(
            hourlyRate={"min": 20, "max": 30},
            experience={"totalYears": 30, "relevantYears": 10, "completedProjects": 50, "successRate": 99},
            reputation={"rating": 5, "reviewCount": 80, "responseTime": 1, "reliability": 99}
        )

        result = self.matcher.evaluate(talent, create_test_project())

        assert result.value_score == 90


class TestAvailabilityMatcher:
    """Test cases for start date, capacity and timeline scoring."""

    def setup_method(self):
        self.matcher = AvailabilityMatcher()

    def test_fully_available(self):
        """Test a talent who can start on time at full capacity."""
        result = self.matcher.evaluate(create_test_talent(), create_test_project())

        assert result.can_start_on_time is True
        assert result.has_capacity is True
        assert result.schedule_alignment == 100
        assert result.timeline_compatibility == 80

    def test_half_time_capacity(self):
        """Test that 20 hours/week earns half of the capacity credit."""
        talent = create_test_talent(availability={
            "hoursPerWeek": 20, "startDate": "2025-06-15", "workArrangement": "hybrid"
        })

        result = self.matcher.evaluate(talent, create_test_project())

        assert result.has_capacity is False
        # 50 on time + 15 of 30 capacity + 20 arrangement
        assert result.schedule_alignment == 85
        assert "Limited capacity: 20h/week" in result.recommendations

    def test_configurable_full_time_baseline(self):
        """Test that the full-time baseline comes from configuration."""
        talent = create_test_talent(availability={
            "hoursPerWeek": 20, "startDate": "2025-06-15", "workArrangement": "hybrid"
        })

        result = AvailabilityMatcher(AvailabilityConfig(full_time_hours=20)).evaluate(talent, create_test_project())

        assert result.has_capacity is True

    def test_start_delays(self):
        """Test delay banding for late starts."""
        expectations = {
            "2025-07-05": (90, "Minor delay: 4 days"),
            "2025-07-11": (75, "Moderate delay: 10 days"),
            "2025-08-01": (60, "Significant delay: 31 days"),
        }
        for start_date, (alignment, message) in expectations.items():
            talent = create_test_talent(availability={
                "hoursPerWeek": 40, "startDate": start_date, "workArrangement": "hybrid"
            })

            result = self.matcher.evaluate(talent, create_test_project())

            assert result.can_start_on_time is False
            assert result.schedule_alignment == alignment
            assert message in result.recommendations

    def test_arrangement_credit(self):
        """Test partial and mismatched arrangement credit."""
        remote_talent = create_test_talent(availability={
            "hoursPerWeek": 40, "startDate": "2025-06-15", "workArrangement": "remote"
        })
        onsite_talent = create_test_talent(availability={
            "hoursPerWeek": 40, "startDate": "2025-06-15", "workArrangement": "onsite"
        })
        remote_project = create_test_project(workArrangement="remote")

        assert self.matcher.evaluate(remote_talent, create_test_project()).schedule_alignment == 95
        assert self.matcher.evaluate(onsite_talent, remote_project).schedule_alignment == 85

    def test_urgent_timeline_uses_response_time(self):
        """Test timeline compatibility for urgent projects."""
        project = create_test_project(timeline={"startDate": "2025-07-01", "duration": 4, "isUrgent": True})
        expectations = {2: 90, 5: 70, 12: 40}
        for response_time, compatibility in expectations.items():
            talent = create_test_talent(reputation={
                "rating": 4.6, "reviewCount": 12, "responseTime": response_time, "reliability": 90
            })

            assert self.matcher.evaluate(talent, project).timeline_compatibility == compatibility
