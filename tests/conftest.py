"""
Fixtures shared by the monit_status tests.
"""

import pytest

from monit_status.models import (
    ConnectionState,
    Credentials,
    HttpdListener,
    IcmpCheck,
    PlatformInfo,
    PortCheck,
    ProcessInfo,
    RuntimeInfo,
    ServerInfo,
    Service,
    ServiceGroup,
    ServiceType,
    StatusSnapshot,
    SystemStats,
    UnixSocketCheck,
)


@pytest.fixture
def server_info():
    """Server identity with a network listener."""
    return ServerInfo(
        id="f3b0c4b9a1d2e3f4",
        incarnation=1700000000,
        version="5.34.0",
        uptime=3600,
        poll=30,
        start_delay=0,
        localhostname="web01",
        controlfile="/etc/monitrc",
        httpd=HttpdListener(address="127.0.0.1", port=2812, ssl=False),
    )


@pytest.fixture
def runtime(server_info):
    """Runtime snapshot with the process engine enabled."""
    return RuntimeInfo(
        server=server_info,
        platform=PlatformInfo(
            name="Linux",
            release="6.1.0",
            version="#1 SMP",
            machine="x86_64",
            cpu=4,
            memory_bytes=8 * 1024 * 1024 * 1024,
            swap_bytes=2 * 1024 * 1024 * 1024,
        ),
        system=SystemStats(
            load_avg_1=0.5,
            load_avg_5=0.25,
            load_avg_15=0.125,
            cpu_user=12.34,
            cpu_system=5.0,
            cpu_wait=1.0,
            mem_percent=42.0,
            mem_bytes=4 * 1024 * 1024 * 1024,
            swap_percent=0.0,
            swap_bytes=0,
        ),
        process_engine=True,
    )


@pytest.fixture
def process_service():
    """A running process with one check of each transport."""
    return Service(
        name="nginx",
        type=ServiceType.PROCESS,
        collected_sec=1700000100,
        collected_usec=250,
        depends_on=["nginx_bin", "nginx_conf"],
        has_status=True,
        info=ProcessInfo(
            pid=1234,
            ppid=1,
            uid=0,
            euid=0,
            gid=0,
            uptime=600,
            threads=4,
            children=2,
            mem_percent=1.5,
            total_mem_percent=3.25,
            mem_bytes=2048,
            total_mem_bytes=1536,
            cpu_percent=0.5,
            total_cpu_percent=0.75,
        ),
        icmp=[IcmpCheck(type=8, is_available=ConnectionState.OK, response_ms=1.5)],
        ports=[
            PortCheck(
                hostname="localhost",
                port=80,
                request="[HTTP GET /]",
                protocol="HTTP",
                is_available=ConnectionState.OK,
                response_ms=12.345678,
            )
        ],
        sockets=[
            UnixSocketCheck(
                path="/run/nginx.sock",
                protocol="DEFAULT",
                is_available=ConnectionState.FAILED,
                response_ms=99.0,
            )
        ],
    )


@pytest.fixture
def snapshot(runtime, process_service):
    return StatusSnapshot(
        runtime=runtime,
        services=[process_service, Service(name="web01", type=ServiceType.SYSTEM, has_status=True)],
        groups=[ServiceGroup(name="www", members=["nginx", "web01"])],
    )


@pytest.fixture
def credentials_runtime(server_info, runtime):
    """Runtime whose server has collector credentials and a unix socket listener."""
    server = server_info.model_copy(
        update={
            "httpd": HttpdListener(unix_socket="/run/monit.sock"),
            "credentials": Credentials(username="monit", password='se"cret'),
        }
    )
    return runtime.model_copy(update={"server": server})
