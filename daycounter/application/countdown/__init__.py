"""Countdown application services: repository, edit session, controller."""
