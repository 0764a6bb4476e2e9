"""Ecosort - 폐기물 이미지 분류 서비스.

업로드 → 분류 → 추출 파이프라인.
"""
