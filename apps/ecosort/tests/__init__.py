"""Ecosort 테스트."""
