"""Waste API - 폐기물 이미지 분류 및 재활용 센터 조회 서비스."""
