"""
Tests for the scenario orchestration service.

This module tests dispatching scenario runs to simulators, contract
violations and run logging.
"""

import logging

import pytest

from whatif.models import (
    CareerChangeParameters,
    InvestmentStrategyParameters,
    MajorPurchaseParameters,
    ScenarioType,
)
from whatif.models.simulation import CareerChangeSimulator
from whatif.services.orchestration_service import (
    ScenarioOrchestrator,
    UnsupportedScenarioError,
    default_simulators,
)


@pytest.fixture
def career_parameters():
    return CareerChangeParameters(
        current_monthly_salary=50000, new_monthly_salary=80000, years_to_simulate=5
    )


class TestScenarioOrchestrator:
    """Test the ScenarioOrchestrator class."""

    def test_initialization(self):
        """Test orchestrator initialization."""
        orchestrator = ScenarioOrchestrator()
        assert orchestrator.logger is not None
        assert set(orchestrator.supported_types) == set(ScenarioType)

    def test_default_simulators_cover_every_type(self):
        simulators = default_simulators()
        for scenario_type, simulator in simulators.items():
            assert simulator.scenario_type == scenario_type

    def test_incomplete_registry_rejected(self):
        with pytest.raises(UnsupportedScenarioError, match="major_purchase"):
            ScenarioOrchestrator(
                {
                    ScenarioType.CAREER_CHANGE: CareerChangeSimulator(),
                }
            )

    @pytest.mark.parametrize(
        "parameters",
        [
            CareerChangeParameters(
                current_monthly_salary=50000,
                new_monthly_salary=80000,
                years_to_simulate=5,
            ),
            InvestmentStrategyParameters(
                monthly_contribution=10000,
                current_annual_rate_pct=5.5,
                new_annual_rate_pct=12.5,
                years_to_simulate=10,
            ),
            MajorPurchaseParameters(
                total_cost=5000000,
                down_payment=1000000,
                annual_interest_rate_pct=8.5,
                loan_term_years=20,
            ),
        ],
    )
    def test_run_parameters_dispatches_on_tag(self, snapshot, parameters):
        result = ScenarioOrchestrator().run_parameters(parameters, snapshot)
        assert result.scenario_type.value == parameters.scenario_type

    def test_run_accepts_type_value(self, snapshot, career_parameters):
        result = ScenarioOrchestrator().run("career_change", career_parameters, snapshot)
        assert result.scenario_type == ScenarioType.CAREER_CHANGE

    def test_unknown_type_rejected(self, snapshot, career_parameters):
        with pytest.raises(UnsupportedScenarioError, match="Unsupported scenario type"):
            ScenarioOrchestrator().run("early_retirement", career_parameters, snapshot)

    def test_mismatched_parameters_rejected(self, snapshot, career_parameters):
        with pytest.raises(UnsupportedScenarioError):
            ScenarioOrchestrator().run(
                ScenarioType.MAJOR_PURCHASE, career_parameters, snapshot
            )

    def test_runs_are_logged(self, snapshot, career_parameters, caplog):
        with caplog.at_level(logging.INFO):
            ScenarioOrchestrator().run_parameters(career_parameters, snapshot)

        assert "Starting career_change simulation" in caplog.text
        assert "Completed career_change simulation over 5 years" in caplog.text

    def test_repeated_runs_are_identical(self, snapshot, career_parameters):
        orchestrator = ScenarioOrchestrator()
        first = orchestrator.run_parameters(career_parameters, snapshot)
        second = orchestrator.run_parameters(career_parameters, snapshot)
        assert first == second
