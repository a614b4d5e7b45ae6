"""
Hosts 文件管理模块，支持增删改查和原子性写回
"""

import logging
import os
import stat
import tempfile
import threading
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union

from etchosts.config import DEFAULT_HOSTS_FILE
from etchosts.exceptions import (
    DuplicateHostnameError,
    HostnameNotFoundError,
    HostsFileClosedError,
    HostsWriteError,
)
from etchosts.models import HostEntry
from etchosts.parser import open_hosts_file, parse_hosts


class HostsFileManager:
    """
    管理 hosts 文件的内存副本及其写回

    构造时打开并解析 hosts 文件，之后所有增删改查只作用于内存中的有序条目列表，
    直到显式调用 flush() 才写回磁盘。查找总是返回第一个匹配的主机名。

    条目列表和锁都不对外暴露。写回使用原子性文件操作（临时文件 + 重命名）防止文件损坏。
    打开的文件句柄由调用方通过 close() 释放，也可以作为上下文管理器使用。
    """

    def __init__(
        self,
        hosts_path: Optional[Union[str, Path]] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        初始化 hosts 文件管理器并加载文件内容

        参数:
            hosts_path: hosts 文件路径，为空时使用 DEFAULT_HOSTS_FILE
            logger: 日志记录器实例，为空时使用 'etchosts' 记录器

        异常:
            HostsFileOpenError: 如果文件不存在或不可读
            HostsParseError: 如果文件中有无法解析的记录
        """
        self.hosts_path = Path(hosts_path or DEFAULT_HOSTS_FILE)
        self.logger = logger or logging.getLogger('etchosts')
        self._lock = threading.Lock()
        self._file = self._open()

        try:
            self._entries: List[HostEntry] = parse_hosts(self._file)
        except Exception:
            self._file.close()
            raise

        self.logger.debug(f"从 {self.hosts_path} 加载了 {len(self._entries)} 条记录")

    def _open(self):
        return open_hosts_file(self.hosts_path, self.logger)

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> None:
        """释放 hosts 文件句柄，重复调用无副作用"""
        if not self._file.closed:
            self._file.close()
            self.logger.debug(f"已关闭 hosts 文件: {self.hosts_path}")

    def __enter__(self) -> "HostsFileManager":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _find(self, hostname: str) -> Optional[int]:
        """返回第一个主机名匹配的条目下标，找不到返回 None"""
        for index, entry in enumerate(self._entries):
            if entry.hostname == hostname:
                return index
        return None

    def create(self, entry: HostEntry) -> None:
        """
        在末尾追加新条目

        参数:
            entry: 要添加的条目

        异常:
            DuplicateHostnameError: 如果主机名已存在
        """
        with self._lock:
            if self._find(entry.hostname) is not None:
                raise DuplicateHostnameError(entry.hostname)
            self._entries.append(entry)
        self.logger.debug(f"已添加条目: {entry}")

    def read(self, hostname: str) -> HostEntry:
        """
        返回第一个匹配主机名的条目

        异常:
            HostnameNotFoundError: 如果主机名不存在
        """
        with self._lock:
            index = self._find(hostname)
            if index is None:
                raise HostnameNotFoundError(hostname)
            return self._entries[index]

    def update(self, entry: HostEntry) -> None:
        """
        原位替换第一个匹配主机名的条目

        存在重复主机名时只替换第一个，条目位置保持不变。

        参数:
            entry: 新的条目值

        异常:
            HostnameNotFoundError: 如果主机名不存在
        """
        with self._lock:
            index = self._find(entry.hostname)
            if index is None:
                raise HostnameNotFoundError(entry.hostname)
            self._entries[index] = entry
        self.logger.debug(f"已更新条目: {entry}")

    def delete(self, hostname: str) -> bool:
        """
        删除第一个匹配主机名的条目

        主机名不存在时什么也不做。

        返回:
            是否删除了条目
        """
        with self._lock:
            index = self._find(hostname)
            if index is None:
                return False
            removed = self._entries.pop(index)
        self.logger.debug(f"已删除条目: {removed}")
        return True

    def entries(self) -> Tuple[HostEntry, ...]:
        """当前条目的快照"""
        with self._lock:
            return tuple(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, hostname: object) -> bool:
        with self._lock:
            return isinstance(hostname, str) and self._find(hostname) is not None

    def __iter__(self) -> Iterator[HostEntry]:
        return iter(self.entries())

    def __str__(self) -> str:
        return "".join(f"{entry}\n" for entry in self.entries())

    def flush(self) -> None:
        """
        原子性地把全部条目写回 hosts 文件

        先写入目标文件同目录下的临时文件，再用 os.replace 覆盖目标文件，
        目标文件不会处于部分写入状态。hosts_path 是符号链接时写入链接指向的文件，
        链接本身保持不变。原文件的权限位会保留。

        异常:
            HostsFileClosedError: 如果已经调用过 close()
            HostsWriteError: 如果文件系统操作失败
        """
        with self._lock:
            if self._file.closed:
                raise HostsFileClosedError(f"hosts 文件已关闭: {self.hosts_path}")

            target = Path(os.path.realpath(self.hosts_path))

            try:
                # 1. 写入临时文件（与真实目标同一目录）
                temp_fd, temp_path = tempfile.mkstemp(
                    dir=target.parent,
                    prefix='.hosts.tmp.',
                    text=True
                )
            except OSError as e:
                self.logger.error(f"创建临时文件失败: {e}")
                raise HostsWriteError(str(self.hosts_path), str(e)) from e

            new_file = None
            try:
                with os.fdopen(temp_fd, 'w', encoding='utf-8') as f:
                    for entry in self._entries:
                        f.write(entry.to_hosts_line() + '\n')
                    f.flush()
                    os.fsync(f.fileno())

                # 2. 保留原文件权限（mkstemp 默认 0600）
                mode = stat.S_IMODE(os.stat(target).st_mode)
                os.chmod(temp_path, mode)

                # 替换前打开，句柄随 inode 一起成为新的 hosts 文件
                new_file = open(temp_path, 'rb')

                # 3. 原子性替换（同一文件系统内有效）
                os.replace(temp_path, target)

            except Exception as e:
                # 出错时清理临时文件
                if new_file is not None:
                    new_file.close()
                if os.path.exists(temp_path):
                    os.unlink(temp_path)
                if isinstance(e, PermissionError):
                    self.logger.error(
                        f"写入 hosts 文件权限被拒绝: {target}. "
                        "请确保具有编辑该文件的权限。"
                    )
                else:
                    self.logger.error(f"更新 hosts 文件失败: {e}")
                if isinstance(e, OSError):
                    raise HostsWriteError(str(self.hosts_path), str(e)) from e
                raise

            self._file.close()
            self._file = new_file

            self.logger.info(f"已写入 {len(self._entries)} 条 host 记录到 {target}")
