"""HTTP surface for the agent swarm orchestration core."""
