import pytest

from sigcluster.clustering.types import ClusterParams, SignatureRecord


@pytest.fixture
def default_params():
    return ClusterParams(threshold=4, bands=8, band_bits=8, min_cluster=1, samples=2)


@pytest.fixture
def dissimilar_records():
    return [
        SignatureRecord(sig="alpha", count=1, sample="alpha raw"),
        SignatureRecord(sig="bravo", count=1, sample="bravo raw"),
        SignatureRecord(sig="charlie", count=1, sample="charlie raw"),
    ]


@pytest.fixture
def log_signature_records():
    return [
        SignatureRecord(sig="connection refused host <IP> port <NUM>", count=40),
        SignatureRecord(sig="connection refused host <IP> port <NUM> retry", count=7),
        SignatureRecord(sig="disk quota exceeded for user <ID>", count=12),
        SignatureRecord(sig="disk quota exceeded for group <ID>", count=3),
        SignatureRecord(sig="timeout waiting for lock <HEX>", count=5),
        SignatureRecord(sig="user <ID> logged in from <IP>", count=90),
        SignatureRecord(sig="user <ID> logged out", count=88),
        SignatureRecord(sig="segfault at <HEX> ip <HEX> sp <HEX>", count=1),
    ]


@pytest.fixture
def write_lines(tmp_path):
    def _write(name, lines):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
