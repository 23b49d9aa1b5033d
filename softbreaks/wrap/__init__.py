from .fence import is_fence_line
from .line import wrap_line
from .prefix import detect_prefix

__all__ = ["detect_prefix", "is_fence_line", "wrap_line"]
