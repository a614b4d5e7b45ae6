"""
etchosts - 以增删改查方式编辑 /etc/hosts
"""

__version__ = "1.0.0"
__author__ = "etchosts Project"

from etchosts.app import HostsEditor
from etchosts.config import Config, DEFAULT_HOSTS_FILE
from etchosts.exceptions import (
    DuplicateHostnameError,
    HostnameNotFoundError,
    HostsError,
    HostsFileClosedError,
    HostsFileOpenError,
    HostsParseError,
    HostsWriteError,
    InvalidCommandError,
)
from etchosts.hosts_manager import HostsFileManager
from etchosts.models import HostEntry
from etchosts.parser import load_hosts, parse_hosts

__all__ = [
    "HostsEditor",
    "Config",
    "DEFAULT_HOSTS_FILE",
    "HostEntry",
    "HostsFileManager",
    "load_hosts",
    "parse_hosts",
    "HostsError",
    "HostsFileOpenError",
    "HostsParseError",
    "DuplicateHostnameError",
    "HostnameNotFoundError",
    "HostsWriteError",
    "HostsFileClosedError",
    "InvalidCommandError",
]
