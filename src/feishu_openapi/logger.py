import os
import threading
from datetime import datetime
from enum import Enum

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel


class LogLevel(Enum):
    """日志级别"""
    DEBUG = 0
    INFO = 1
    SUCCESS = 2
    WARNING = 3
    ERROR = 4


_STYLE_MAP = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "blue",
    LogLevel.SUCCESS: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red bold",
}


class Logger:
    """
    日志记录器（线程安全）

    支持：
    - 彩色输出（rich）
    - 日志级别控制（FEISHU_LOG_LEVEL 环境变量）
    - 多线程安全
    """

    def __init__(self, name="FeishuOpenAPI", level=LogLevel.INFO, console: Console = None):
        self.name = name
        self.level = level
        self._lock = threading.Lock()
        # Log to stderr so CLI output on stdout stays clean
        self.console = console or Console(stderr=True)

        env_level = os.getenv("FEISHU_LOG_LEVEL", "").upper()
        if env_level in LogLevel.__members__:
            self.level = LogLevel[env_level]

    def set_level(self, level: LogLevel):
        """设置日志级别"""
        self.level = level

    def _should_log(self, level: LogLevel) -> bool:
        return level.value >= self.level.value

    def _log(self, level: LogLevel, icon, message):
        if not self._should_log(level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        style = _STYLE_MAP[level]
        with self._lock:
            self.console.print(
                f"[cyan][{timestamp}][/cyan] [{style}]{icon} {escape(str(message))}[/{style}]",
                markup=True,
                highlight=False,
            )

    def debug(self, message, icon="🔧"):
        """调试信息 - 仅在 DEBUG 模式显示"""
        self._log(LogLevel.DEBUG, icon, message)

    def info(self, message, icon="ℹ️ "):
        self._log(LogLevel.INFO, icon, message)

    def success(self, message, icon="✅"):
        self._log(LogLevel.SUCCESS, icon, message)

    def warning(self, message, icon="⚠️ "):
        self._log(LogLevel.WARNING, icon, message)

    def error(self, message, icon="❌"):
        self._log(LogLevel.ERROR, icon, message)

    def header(self, message, icon=""):
        """打印标题"""
        if not self._should_log(LogLevel.INFO):
            return

        with self._lock:
            title = f"{icon} {message}" if icon else message
            self.console.print(Panel(title, style="bold magenta", width=50))


def mask(secret: str, keep: int = 6) -> str:
    """Shorten a token/secret for log output: ``t-g104ab***``."""
    if not secret:
        return "<empty>"
    return f"{secret[:keep]}***"


# 全局日志实例
logger = Logger()
