"""Qiniu object storage adapter."""

from .client import (
    MockQiniuStorage,
    QiniuStorage,
    RealQiniuStorage,
)

__all__ = ["QiniuStorage", "RealQiniuStorage", "MockQiniuStorage"]
