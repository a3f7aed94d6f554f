"""
Core layer: 파일시스템 안전 모듈.

역할:
- 원자적 쓰기, 프로젝트 락, 설정 로드
"""

from .config import ScaffoldConfig, load_config
from .fileio import atomic_write_text, project_lock

__all__ = [
    # config
    "ScaffoldConfig",
    "load_config",
    # fileio
    "atomic_write_text",
    "project_lock",
]
