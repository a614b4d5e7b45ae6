"""
etchosts 异常类型
"""


class HostsError(Exception):
    """所有 etchosts 错误的基类"""


class HostsFileOpenError(HostsError):
    """加载时无法打开 hosts 文件（不存在或不可读）"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"无法打开 hosts 文件 {path}: {reason}")


class HostsParseError(HostsError):
    """
    解析 hosts 文件时遇到无法处理的行

    属性:
        line_number: 出错的行号（从 1 开始）
        line: 原始行内容
        reason: 错误原因
    """

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"第 {line_number} 行解析失败: {reason}: {line!r}")


class DuplicateHostnameError(HostsError):
    """创建条目时主机名已存在"""

    def __init__(self, hostname: str):
        self.hostname = hostname
        super().__init__(f"主机名已存在: {hostname}")


class HostnameNotFoundError(HostsError):
    """读取或更新时找不到主机名"""

    def __init__(self, hostname: str):
        self.hostname = hostname
        super().__init__(f"未找到主机名: {hostname}")


class HostsWriteError(HostsError):
    """写回 hosts 文件失败"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"写入 hosts 文件 {path} 失败: {reason}")


class HostsFileClosedError(HostsError):
    """hosts 文件已关闭后仍尝试写回"""


class InvalidCommandError(HostsError):
    """未知的编辑命令"""

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"无效的命令: {command}")
