from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import NotRequired, TypedDict

from ..errors import ClusterConfigError
from .simhash import FINGERPRINT_BITS


class SampleDict(TypedDict):
    ts: NotRequired[str]
    raw: NotRequired[str]


class ClusterDict(TypedDict):
    count: int
    repr: str
    first_ts: NotRequired[str]
    last_ts: NotRequired[str]
    samples: NotRequired[list[SampleDict]]


@dataclass(frozen=True)
class SignatureRecord:
    sig: str
    count: int = 1
    first_ts: str = ""
    last_ts: str = ""
    sample_ts: str = ""
    sample: str = ""


@dataclass(frozen=True)
class FingerprintedRecord:
    record: SignatureRecord
    fingerprint: int


@dataclass(frozen=True)
class Sample:
    ts: str
    raw: str

    def to_dict(self) -> SampleDict:
        out: SampleDict = {}
        if self.ts:
            out["ts"] = self.ts
        if self.raw:
            out["raw"] = self.raw
        return out


@dataclass(frozen=True)
class Cluster:
    count: int
    representative: str
    first_ts: str = ""
    last_ts: str = ""
    samples: tuple[Sample, ...] = field(default_factory=tuple)

    def to_dict(self) -> ClusterDict:
        out: ClusterDict = {"count": self.count, "repr": self.representative}
        if self.first_ts:
            out["first_ts"] = self.first_ts
        if self.last_ts:
            out["last_ts"] = self.last_ts
        if self.samples:
            out["samples"] = [sample.to_dict() for sample in self.samples]
        return out


@dataclass(frozen=True)
class ClusterParams:
    """Knobs for one clustering pass.

    ``bands * band_bits`` must cover the fingerprint exactly; everything else
    is clamped into range by :meth:`normalized` instead of being rejected.
    """

    threshold: int = 4
    bands: int = 8
    band_bits: int = 8
    min_cluster: int = 2
    samples: int = 2

    def validate(self) -> None:
        if self.bands <= 0 or self.band_bits <= 0:
            raise ClusterConfigError("bands and band-bits must be > 0")
        product = self.bands * self.band_bits
        if product != FINGERPRINT_BITS:
            raise ClusterConfigError(
                f"bands*band-bits must equal {FINGERPRINT_BITS} (got {product})"
            )

    def normalized(self) -> ClusterParams:
        return replace(
            self,
            threshold=max(self.threshold, 0),
            min_cluster=max(self.min_cluster, 1),
            samples=max(self.samples, 0),
        )
