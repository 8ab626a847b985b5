"""Services that run scenarios and describe their results."""

from whatif.services.narrative_service import (
    NarrativeGenerator,
    NarrativeInput,
    NarrativeService,
    ScenarioAnalysis,
    build_narrative_input,
    precheck,
)
from whatif.services.orchestration_service import (
    ScenarioOrchestrator,
    UnsupportedScenarioError,
    default_simulators,
)

__all__ = [
    "NarrativeGenerator",
    "NarrativeInput",
    "NarrativeService",
    "ScenarioAnalysis",
    "ScenarioOrchestrator",
    "UnsupportedScenarioError",
    "build_narrative_input",
    "default_simulators",
    "precheck",
]
