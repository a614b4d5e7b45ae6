"""
hosts 编辑器模块，把编辑命令分发到 HostsFileManager
"""

import ipaddress
import logging
import sys
from typing import Optional, Union

from etchosts.config import Config
from etchosts.exceptions import InvalidCommandError
from etchosts.hosts_manager import HostsFileManager
from etchosts.models import HostEntry


class HostsEditor:
    """
    命令前端和 hosts 文件管理器之间的协调者

    负责：
    - 根据配置初始化日志和 hosts 文件管理器
    - 校验命令参数（主机名非空、地址合法）
    - 执行 create/read/update/delete 命令
    - 修改类命令执行后立即写回文件
    """

    COMMANDS = ('create', 'read', 'update', 'delete')

    def __init__(self, config: Config):
        """
        初始化 hosts 编辑器

        参数:
            config: 应用配置

        异常:
            ValueError: 如果配置无效
            HostsFileOpenError: 如果无法打开 hosts 文件
            HostsParseError: 如果 hosts 文件无法解析
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()
        self.hosts_manager = HostsFileManager(
            config.hosts_file_path,
            self.logger
        )

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('etchosts')
        logger.setLevel(self.config.log_level)

        # 避免重复的处理器
        if logger.handlers:
            return logger

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(self.config.log_level)

        # 格式: 时间戳 - 名称 - 级别 - 消息
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)

        logger.addHandler(handler)
        return logger

    def _build_entry(self, command: str, hostname: str, address: str, alias: str) -> HostEntry:
        if not address:
            raise ValueError(f"{command}: 地址不能为空")
        try:
            ip = ipaddress.ip_address(address)
        except ValueError:
            raise ValueError(f"{command}: 无法解析地址 {address!r}")
        return HostEntry(ip_address=ip, hostname=hostname, aliases=alias)

    def execute(
        self,
        command: str,
        hostname: str,
        address: str = "",
        alias: str = ""
    ) -> Union[HostEntry, bool, None]:
        """
        执行一条编辑命令

        参数:
            command: create、read、update 或 delete
            hostname: 主机名，不能为空
            address: IP 地址字符串，create/update 必填
            alias: 别名，多个别名以空白分隔

        返回:
            read 返回匹配的条目，delete 返回是否删除了条目，其余返回 None

        异常:
            InvalidCommandError: 如果命令未知
            ValueError: 如果主机名为空或地址无效
            DuplicateHostnameError: create 时主机名已存在
            HostnameNotFoundError: read/update 时主机名不存在
            HostsWriteError: 写回文件失败
        """
        if command not in self.COMMANDS:
            raise InvalidCommandError(command)
        if not hostname:
            raise ValueError("主机名不能为空")

        if command == 'read':
            return self.hosts_manager.read(hostname)

        result: Optional[bool] = None
        if command == 'create':
            entry = self._build_entry(command, hostname, address, alias)
            self.hosts_manager.create(entry)
            self.logger.info(f"已添加主机记录: {hostname} → {entry.ip_address}")
        elif command == 'update':
            entry = self._build_entry(command, hostname, address, alias)
            self.hosts_manager.update(entry)
            self.logger.info(f"已更新主机记录: {hostname} → {entry.ip_address}")
        else:
            result = self.hosts_manager.delete(hostname)
            if result:
                self.logger.info(f"已移除主机记录: {hostname}")
            else:
                self.logger.info(f"没有要移除的主机记录: {hostname}")

        self.hosts_manager.flush()
        return result

    def close(self) -> None:
        """关闭 hosts 文件"""
        self.hosts_manager.close()

    def __enter__(self) -> "HostsEditor":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
