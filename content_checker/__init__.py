"""
content-checker - 双语内容库的 Markdown/MDX 发布前检查工具
"""

__version__ = "0.1.0"
