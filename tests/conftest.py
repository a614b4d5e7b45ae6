import logging

import pytest

from etchosts import HostsFileManager

HOSTS_CONTENT = """
127.0.0.1 localhost localhost
53.53.68.8 pub sub
"""


@pytest.fixture
def hosts_file(tmp_path):
    """包含两条记录的临时 hosts 文件"""
    path = tmp_path / "hosts"
    path.write_text(HOSTS_CONTENT, encoding="utf-8")
    return path


@pytest.fixture
def logger():
    return logging.getLogger("etchosts.tests")


@pytest.fixture
def manager(hosts_file, logger):
    hosts = HostsFileManager(hosts_file, logger)
    yield hosts
    hosts.close()
