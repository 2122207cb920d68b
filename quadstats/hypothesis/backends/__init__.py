"""Hypothesis test backends."""
