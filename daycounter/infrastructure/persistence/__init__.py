"""Event store adapters and backend selection."""
