"""
hosts 文件解析模块
"""

import ipaddress
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, List, Optional, Union

from etchosts.exceptions import HostsFileOpenError, HostsParseError
from etchosts.models import HostEntry

logger = logging.getLogger('etchosts')

COMMENT_PREFIX = "#"


def open_hosts_file(path: Union[str, Path], log: Optional[logging.Logger] = None) -> BinaryIO:
    """
    以二进制只读方式打开 hosts 文件

    参数:
        path: hosts 文件路径
        log: 日志记录器实例，为空时使用模块记录器

    返回:
        打开的文件对象，由调用方负责关闭

    异常:
        HostsFileOpenError: 文件不存在或不可读
    """
    try:
        return open(path, 'rb')
    except OSError as e:
        (log or logger).error(f"打开 hosts 文件失败: {path}: {e}")
        raise HostsFileOpenError(str(path), e.strerror or str(e)) from e


def parse_line(line: Union[str, bytes], line_number: int) -> Optional[HostEntry]:
    """
    解析单行 hosts 记录

    参数:
        line: 原始行，bytes 按 UTF-8 解码
        line_number: 行号（从 1 开始），用于错误信息

    返回:
        HostEntry；注释行或空行返回 None

    异常:
        HostsParseError: 不是有效的 UTF-8、地址非法或缺少主机名
    """
    if isinstance(line, bytes):
        try:
            line = line.decode('utf-8')
        except UnicodeDecodeError as e:
            raw = line.decode('utf-8', 'replace').rstrip('\r\n')
            raise HostsParseError(line_number, raw, f"不是有效的 UTF-8 文本 ({e.reason})") from e

    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    fields = []
    for token in stripped.split():
        # 行内注释，之后的内容全部忽略
        if token.startswith(COMMENT_PREFIX):
            break
        fields.append(token)

    try:
        address = ipaddress.ip_address(fields[0])
    except ValueError:
        raise HostsParseError(line_number, line.rstrip('\r\n'), f"无效的 IP 地址 {fields[0]!r}")

    if len(fields) < 2:
        raise HostsParseError(line_number, line.rstrip('\r\n'), "缺少主机名")

    return HostEntry(
        ip_address=address,
        hostname=fields[1],
        aliases=tuple(fields[2:])
    )


def parse_hosts(lines: Iterable[Union[str, bytes]]) -> List[HostEntry]:
    """
    按文件顺序把 hosts 文件内容解析为条目列表

    遇到第一条无法解析的记录时中止整个解析。

    参数:
        lines: 文件行序列（str，或按 UTF-8 解码的 bytes）

    返回:
        HostEntry 列表，顺序与文件一致

    异常:
        HostsParseError: 任意一行无法解码、地址非法或缺少主机名
    """
    entries: List[HostEntry] = []
    for line_number, line in enumerate(lines, start=1):
        entry = parse_line(line, line_number)
        if entry is not None:
            entries.append(entry)
    return entries


def load_hosts(path: Union[str, Path]) -> List[HostEntry]:
    """
    读取并解析 hosts 文件

    参数:
        path: hosts 文件路径

    返回:
        HostEntry 列表

    异常:
        HostsFileOpenError: 文件不存在或不可读
        HostsParseError: 文件内容无法解析
    """
    with open_hosts_file(path) as f:
        return parse_hosts(f)
