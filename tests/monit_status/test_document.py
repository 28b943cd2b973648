"""
End-to-end tests for the document assembler.
"""

import json
import threading

import pytest

from monit_status.encoding.document import DocumentAssembler, render_event, render_status
from monit_status.exceptions import UnsupportedFormatVersion
from monit_status.models import (
    Event,
    EventId,
    FormatVersion,
    HttpdListener,
    MonitorState,
    ProcessInfo,
    Service,
    ServiceGroup,
    ServiceType,
)


def assemble(runtime, services=(), groups=(), event=None, version=2, client_ip=None):
    return json.loads(DocumentAssembler(runtime).assemble(services, groups, event, version, client_ip))


class TestHead:
    """Server and platform blocks."""

    def test_version_2_identity(self, runtime):
        monit = assemble(runtime, version=2)["monit"]
        assert monit["@id"] == "f3b0c4b9a1d2e3f4"
        assert monit["@incarnation"] == 1700000000
        assert monit["@version"] == "5.34.0"
        assert "id" not in monit["server"]
        assert "version" not in monit["server"]

    def test_version_1_identity(self, runtime):
        monit = assemble(runtime, version=1)["monit"]
        assert "@id" not in monit
        assert monit["server"]["id"] == "f3b0c4b9a1d2e3f4"
        assert monit["server"]["incarnation"] == 1700000000
        assert monit["server"]["version"] == "5.34.0"

    def test_server_fields(self, runtime):
        server = assemble(runtime)["monit"]["server"]
        assert server["uptime"] == 3600
        assert server["poll"] == 30
        assert server["startdelay"] == 0
        assert server["localhostname"] == "web01"
        assert server["controlfile"] == "/etc/monitrc"
        assert server["httpd"] == {"address": "127.0.0.1", "port": 2812, "ssl": 0}
        assert "credentials" not in server

    def test_httpd_falls_back_to_client_ip(self, runtime):
        server = runtime.server.model_copy(update={"httpd": HttpdListener(port=2812, ssl=True)})
        runtime = runtime.model_copy(update={"server": server})
        httpd = assemble(runtime, client_ip="10.0.0.7")["monit"]["server"]["httpd"]
        assert httpd == {"address": "10.0.0.7", "port": 2812, "ssl": 1}

    def test_httpd_without_address_or_client_ip(self, runtime):
        server = runtime.server.model_copy(update={"httpd": HttpdListener(port=2812)})
        runtime = runtime.model_copy(update={"server": server})
        assert assemble(runtime)["monit"]["server"]["httpd"]["address"] == ""

    def test_unix_socket_listener_and_credentials(self, credentials_runtime):
        server = assemble(credentials_runtime)["monit"]["server"]
        assert server["httpd"] == {"unixsocket": "/run/monit.sock"}
        assert server["credentials"] == {"username": "monit", "password": 'se"cret'}

    def test_no_httpd(self, runtime):
        server = runtime.server.model_copy(update={"httpd": None, "localhostname": None})
        runtime = runtime.model_copy(update={"server": server})
        server = assemble(runtime)["monit"]["server"]
        assert "httpd" not in server
        assert server["localhostname"] == ""

    def test_platform_in_kilobytes(self, runtime):
        platform = assemble(runtime)["monit"]["platform"]
        assert platform == {
            "name": "Linux",
            "release": "6.1.0",
            "version": "#1 SMP",
            "machine": "x86_64",
            "cpu": 4,
            "memory": 8 * 1024 * 1024,
            "swap": 2 * 1024 * 1024,
        }


class TestBody:
    def test_empty_version_2(self, runtime):
        monit = assemble(runtime, version=2)["monit"]
        assert monit["services"] == {"service": []}
        assert monit["servicegroups"] == {"servicegroup": []}
        assert "event" not in monit

    def test_empty_version_1(self, runtime):
        monit = assemble(runtime, version=1)["monit"]
        assert monit["service"] == []
        assert "services" not in monit
        assert "servicegroups" not in monit

    def test_groups_only_in_version_2(self, snapshot):
        v1 = json.loads(render_status(snapshot, 1))["monit"]
        v2 = json.loads(render_status(snapshot, 2))["monit"]
        assert "servicegroups" not in v1
        assert v2["servicegroups"]["servicegroup"] == [
            {"@name": "www", "service": ["nginx", "web01"]}
        ]

    def test_service_order_preserved(self, runtime):
        names = ["zeta", "alpha", "mid"]
        services = [Service(name=n, type=ServiceType.HOST) for n in names]
        monit = assemble(runtime, services)["monit"]
        assert [s["@name"] for s in monit["services"]["service"]] == names

    def test_accepts_generators(self, runtime):
        services = (Service(name=f"s{i}", type=ServiceType.HOST) for i in range(3))
        groups = (ServiceGroup(name=f"g{i}") for i in range(2))
        monit = assemble(runtime, services, groups)["monit"]
        assert len(monit["services"]["service"]) == 3
        assert len(monit["servicegroups"]["servicegroup"]) == 2

    def test_process_scenario_version_1(self, runtime):
        """One unmonitored process, no checks, no event."""
        service = Service(
            name="sshd",
            type=ServiceType.PROCESS,
            monitor=MonitorState.NOT,
            has_status=True,
            info=ProcessInfo(pid=812, ppid=1),
        )
        monit = assemble(runtime, [service], version=1)["monit"]
        assert len(monit["service"]) == 1
        entry = monit["service"][0]
        assert entry["pid"] == 812
        assert entry["monitor"] == 0
        assert entry["icmp"] == []
        assert entry["port"] == []
        assert entry["unix"] == []
        assert "event" not in monit


class TestEvent:
    def _event(self, token=None):
        return Event(
            collected_sec=1,
            source="nginx",
            type=ServiceType.PROCESS,
            id=EventId.CONNECTION,
            message="failed",
            token=token,
        )

    @pytest.mark.parametrize("version", [1, 2])
    def test_event_block_appended(self, snapshot, version):
        monit = json.loads(render_event(snapshot, self._event(token="t-1"), version))["monit"]
        assert monit["event"]["service"] == "nginx"
        assert monit["event"]["token"] == "t-1"
        assert list(monit)[-1] == "event"

    def test_empty_token_omitted(self, snapshot):
        monit = json.loads(render_event(snapshot, self._event(token=""), 2))["monit"]
        assert "token" not in monit["event"]

    def test_snapshot_event_rendered(self, snapshot):
        snapshot = snapshot.model_copy(update={"event": self._event()})
        assert "event" in json.loads(render_status(snapshot))["monit"]


class TestVersionEquivalence:
    """V1 and V2 carry the same values under different names."""

    def test_same_values(self, snapshot):
        v1 = json.loads(render_status(snapshot, 1))["monit"]
        v2 = json.loads(render_status(snapshot, 2))["monit"]

        assert v1["server"]["id"] == v2["@id"]
        assert v1["server"]["incarnation"] == v2["@incarnation"]
        assert v1["server"]["version"] == v2["@version"]
        for key in ("uptime", "poll", "startdelay", "localhostname", "controlfile", "httpd"):
            assert v1["server"][key] == v2["server"][key]
        assert v1["platform"] == v2["platform"]

        services_v1 = v1["service"]
        services_v2 = v2["services"]["service"]
        assert len(services_v1) == len(services_v2)
        for a, b in zip(services_v1, services_v2):
            assert a.pop("name") == b.pop("@name")
            assert a.pop("@type") == b.pop("type")
            assert a == b


class TestAssembler:
    def test_rejects_unknown_version(self, runtime):
        with pytest.raises(UnsupportedFormatVersion):
            DocumentAssembler(runtime).assemble([], version=3)

    def test_default_version_is_2(self, runtime):
        assert "@id" in json.loads(DocumentAssembler(runtime).assemble([]))["monit"]

    def test_negotiates_string_version(self, runtime):
        assert "@id" not in assemble(runtime, version="1")["monit"]

    def test_version_1_key_layout(self, runtime):
        text = DocumentAssembler(runtime).assemble([], version=FormatVersion.V1)
        assert text.startswith('{"monit":{"server":{"id":"f3b0c4b9a1d2e3f4","incarnation":')
        assert text.endswith('"service":[]}}')

    def test_concurrent_renders(self, snapshot):
        expected = render_status(snapshot, 2)
        results = []

        def worker():
            results.append(render_status(snapshot, 2))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == [expected] * 8
