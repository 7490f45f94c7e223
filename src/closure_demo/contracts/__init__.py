"""JSON-schema contracts for registry snapshots and seed documents."""
