"""Ecosort 도메인 레이어."""
