"""Subject data-rights orchestrator: erasure eligibility, data export and erasure."""
