"""Ecosort Presentation Layer."""
