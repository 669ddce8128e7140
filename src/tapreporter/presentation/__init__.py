"""tapreporter presentation layer: integrations with test runners."""
