# scripts/__init__.py

"""
운영 보조 스크립트 패키지입니다. (`setup_tool.py`: 저장소 초기화 및 계정 생성)
"""
