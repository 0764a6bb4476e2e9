"""Ecosort 애플리케이션 레이어."""
