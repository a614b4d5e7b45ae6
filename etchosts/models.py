"""
etchosts 数据模型
"""

import ipaddress
from dataclasses import dataclass, field
from typing import Tuple, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _check_name(name: str, kind: str) -> None:
    """写回后必须能原样解析出来的名字才合法"""
    if not isinstance(name, str) or not name:
        raise ValueError(f"{kind}不能为空")
    if any(ch.isspace() for ch in name):
        raise ValueError(f"{kind}不能包含空白: {name!r}")
    if name.startswith("#"):
        raise ValueError(f"{kind}不能以 '#' 开头: {name!r}")
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        raise ValueError(f"{kind}无法以 UTF-8 编码: {name!r}")


@dataclass(frozen=True)
class HostEntry:
    """
    代表 hosts 文件中的单个条目

    属性:
        ip_address: IPv4 或 IPv6 地址，传入字符串时自动解析
        hostname: 规范主机名
        aliases: 别名元组，按文件中的顺序保存

    异常:
        ValueError: 如果 ip_address 不是合法的网络地址，或者主机名/别名
            为空、包含空白、以 '#' 开头或无法以 UTF-8 编码
    """

    ip_address: IPAddress
    hostname: str
    aliases: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.ip_address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
            object.__setattr__(self, 'ip_address', ipaddress.ip_address(self.ip_address))
        # 允许传入单个字符串或列表
        if isinstance(self.aliases, str):
            aliases = tuple(self.aliases.split())
        else:
            aliases = tuple(self.aliases)
        object.__setattr__(self, 'aliases', aliases)

        _check_name(self.hostname, "主机名")
        for alias in self.aliases:
            _check_name(alias, "别名")
    @property
    def alias(self) -> str:
        """首个别名，没有别名时为空字符串"""
        return self.aliases[0] if self.aliases else ""

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: <IP>\t<主机名>\t<别名...>

        没有别名时仍保留第二个制表符。

        返回:
            格式化的 hosts 文件行（不含换行符）
        """
        aliases = "\t".join(self.aliases)
        return f"{self.ip_address}\t{self.hostname}\t{aliases}"

    def __str__(self) -> str:
        return self.to_hosts_line()
