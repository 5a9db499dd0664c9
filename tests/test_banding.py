from sigcluster.clustering.banding import (
    band_value,
    bucket_key,
    build_buckets,
    candidate_pairs,
)


def test_band_value_slices_low_bits_first():
    fp = 0xAABBCCDDEEFF0011
    assert band_value(fp, 0, 8) == 0x11
    assert band_value(fp, 1, 8) == 0x00
    assert band_value(fp, 7, 8) == 0xAA
    assert band_value(fp, 1, 16) == 0xEEFF


def test_band_value_full_width_band():
    fp = 0xFFFF0000FFFF0000
    assert band_value(fp, 0, 64) == fp


def test_bucket_key_combines_band_and_value():
    assert bucket_key(3, 0x11, 8) == 0x311
    assert bucket_key(0, 0x11, 8) != bucket_key(1, 0x11, 8)


def test_build_buckets_identical_fingerprints_share_every_band():
    buckets = build_buckets([0x1234, 0x1234], 8, 8)
    assert len(buckets) == 8
    assert all(indices == [0, 1] for indices in buckets.values())


def test_build_buckets_lists_each_index_once_per_band():
    buckets = build_buckets([0, 2**64 - 1, 0x0F], 4, 16)
    for indices in buckets.values():
        assert len(indices) == len(set(indices))
    assert sum(len(indices) for indices in buckets.values()) == 3 * 4


def test_candidate_pairs_skips_singleton_buckets():
    buckets = {1: [0], 2: [1, 2, 3], 3: [4]}
    assert list(candidate_pairs(buckets)) == [(1, 2), (1, 3), (2, 3)]


def test_candidate_pairs_repeats_pairs_shared_by_several_bands():
    buckets = build_buckets([0x1234, 0x1234], 2, 32)
    assert list(candidate_pairs(buckets)) == [(0, 1), (0, 1)]
