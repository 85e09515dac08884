import pytest

from channelcore.names import (
    UnknownMobError,
    job_name_to_id,
    map_name_to_id,
    mob_name_to_ids,
    resolve_job_id,
    resolve_map_id,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("henesys", 100000000),
        ("lith", 104000000),
        ("orbis", 200000000),
        ("guild", 200000301),
    ],
)
def test_map_name_to_id_known(name, expected):
    assert map_name_to_id(name) == expected


def test_map_name_to_id_unknown_defaults_to_gm_map():
    assert map_name_to_id("nowhere") == map_name_to_id("gm")
    assert map_name_to_id("nowhere") == 180000000


def test_map_name_lookup_is_case_sensitive():
    assert map_name_to_id("Henesys") == map_name_to_id("gm")


def test_job_name_to_id_beginner_and_unknown_agree():
    assert job_name_to_id("Beginner") == job_name_to_id("NotAJob")


def test_job_ids_follow_branch_structure():
    # Advancements stay within the hundred of their first job.
    for first, later in [("Warrior", "Crusader"), ("Magician", "Priest"),
                         ("Bowman", "Sniper"), ("Thief", "Hermit")]:
        assert job_name_to_id(later) // 100 == job_name_to_id(first) // 100
        assert job_name_to_id(later) > job_name_to_id(first)


def test_mob_name_to_ids_single():
    assert mob_name_to_ids("balrog") == [8130100]


def test_mob_name_to_ids_zakum_ends_with_body():
    ids = mob_name_to_ids("zakum")
    assert ids[-1] == 8800000
    assert ids[:-1] == list(range(8800003, 8800011))


def test_mob_name_to_ids_returns_fresh_list():
    ids = mob_name_to_ids("pap")
    ids.append(1)
    assert mob_name_to_ids("pap") == [8500001]


def test_mob_name_to_ids_unknown_raises():
    with pytest.raises(UnknownMobError):
        mob_name_to_ids("slime")


@pytest.mark.parametrize("text", ["100000000", "60000", "+60000"])
def test_resolve_map_id_numeric(text):
    assert resolve_map_id(text) == int(text)


@pytest.mark.parametrize("name", ["henesys", "ludi", "unknown", "1 2", "12a", ""])
def test_resolve_map_id_falls_back_to_name(name):
    assert resolve_map_id(name) == map_name_to_id(name)


def test_resolve_map_id_truncates_to_32_bits():
    assert resolve_map_id(str(2**32 + 100000000)) == 100000000


def test_resolve_map_id_out_of_64_bit_range_uses_name_lookup():
    assert resolve_map_id(str(2**70)) == map_name_to_id("gm")


@pytest.mark.parametrize("text", ["110", "-5", "510"])
def test_resolve_job_id_numeric(text):
    assert resolve_job_id(text) == int(text)


@pytest.mark.parametrize("name", ["Fighter", "Hermit", "SuperGm", "Nobody"])
def test_resolve_job_id_name(name):
    assert resolve_job_id(name) == job_name_to_id(name)


def test_resolve_job_id_truncates_to_16_bits():
    assert resolve_job_id(str(2**16 + 110)) == 110


def test_resolve_accepts_integers():
    assert resolve_map_id(101000000) == 101000000
    assert resolve_job_id(2**16 + 230) == 230