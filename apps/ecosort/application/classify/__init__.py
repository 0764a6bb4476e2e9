"""Classify 유스케이스."""
