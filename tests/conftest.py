from types import SimpleNamespace

import psutil
import pytest


def fake_conn(lip, lport, rip=None, rport=None, status="ESTABLISHED"):
    return SimpleNamespace(
        laddr=SimpleNamespace(ip=lip, port=lport),
        raddr=SimpleNamespace(ip=rip, port=rport) if rip is not None else (),
        status=status,
    )


class FakeProc:
    def __init__(self, pid, name, conns=(), name_exc=None, conns_exc=None):
        self.pid = pid
        self._name = name
        self._conns = list(conns)
        self._name_exc = name_exc
        self._conns_exc = conns_exc

    def name(self):
        if self._name_exc:
            raise self._name_exc
        return self._name

    def net_connections(self, kind="inet"):
        if self._conns_exc:
            raise self._conns_exc
        return list(self._conns)


@pytest.fixture
def procs():
    return [
        FakeProc(100, "myapp", [fake_conn("127.0.0.1", 49911, "127.0.0.1", 42488)]),
        FakeProc(200, "MyApp-worker", [
            fake_conn("10.0.0.5", 22, "10.0.0.9", 51000),
            fake_conn("0.0.0.0", 8080, status="LISTEN"),
        ]),
        FakeProc(300, "sshd", [fake_conn("10.0.0.5", 22, "10.0.0.7", 40000)]),
        FakeProc(400, "ghost", name_exc=psutil.NoSuchProcess(400)),
        FakeProc(500, "myapp-locked", [fake_conn("1.1.1.1", 1, "2.2.2.2", 2)],
                 conns_exc=psutil.AccessDenied(500)),
    ]
