import os
import threading
from contextlib import contextmanager
from datetime import datetime
from enum import Enum

from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn, TimeElapsedColumn
from rich.table import Table


class LogLevel(Enum):
    """日志级别"""
    DEBUG = 0
    INFO = 1
    SUCCESS = 2
    WARNING = 3
    ERROR = 4


# rich style per level
LEVEL_STYLES = {
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
    - 进度条显示
    - 表格汇总
    - 日志级别控制 (DOCMIRROR_LOG_LEVEL)
    """

    def __init__(self, name="DocMirror", level=LogLevel.INFO, console: Console = None):
        self.name = name
        self.level = level
        self._lock = threading.Lock()
        self.console = console or Console()

        # 从环境变量读取日志级别
        env_level = os.getenv("DOCMIRROR_LOG_LEVEL", "").upper()
        if env_level in LogLevel.__members__:
            self.level = LogLevel[env_level]

    def set_level(self, level: LogLevel):
        """设置日志级别"""
        self.level = level

    def _should_log(self, level: LogLevel) -> bool:
        return level.value >= self.level.value

    def _log(self, level: LogLevel, icon: str, message):
        if not self._should_log(level):
            return

        timestamp = datetime.now().strftime("%H:%M:%S")
        style = LEVEL_STYLES[level]
        with self._lock:
            self.console.print(f"[cyan][{timestamp}][/cyan] [{style}]{icon} {message}[/{style}]")

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

        title = f"{icon} {message}" if icon else message
        with self._lock:
            self.console.print(Panel(title, style="bold magenta", width=50))

    def rule(self, message=""):
        """打印分隔线"""
        if not self._should_log(LogLevel.INFO):
            return

        with self._lock:
            self.console.rule(message)

    @contextmanager
    def progress(self, total: int, description: str = "同步中"):
        """进度条上下文管理器

        Usage:
            with logger.progress(len(entries), "同步中") as update:
                for entry in entries:
                    process(entry)
                    update(1)
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=30),
            TaskProgressColumn(),
            TextColumn("•"),
            TimeElapsedColumn(),
            console=self.console,
            disable=not self._should_log(LogLevel.INFO),
        ) as progress:
            task = progress.add_task(description, total=total)

            def update(advance: int = 1):
                progress.update(task, advance=advance)

            yield update

    def summary_table(self, title: str, data: dict):
        """打印汇总表格

        Args:
            title: 表格标题
            data: 字典，key 为行名，value 为值
        """
        if not self._should_log(LogLevel.INFO):
            return

        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("状态", style="dim")
        table.add_column("数量", justify="right")

        for key, value in data.items():
            if "成功" in key or "✅" in key:
                table.add_row(key, f"[green]{value}[/green]")
            elif "失败" in key or "❌" in key:
                table.add_row(key, f"[red]{value}[/red]")
            elif "跳过" in key or "⚠️" in key:
                table.add_row(key, f"[yellow]{value}[/yellow]")
            else:
                table.add_row(key, str(value))

        with self._lock:
            self.console.print(table)


# 全局日志实例
logger = Logger()
