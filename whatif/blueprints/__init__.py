"""HTTP blueprints for the what-if planner."""
