"""Ecosort 인프라 어댑터."""
