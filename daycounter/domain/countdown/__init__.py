"""Countdown bounded context: events, date math and domain errors."""
