from .config import CodeIntelConfig

__all__ = ["CodeIntelConfig"]
