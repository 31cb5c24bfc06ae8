"""Service Layer: load-mutate-save orchestration around the pure core."""
