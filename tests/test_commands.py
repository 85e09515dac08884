import pytest

from channelcore.commands import (
    CommandError,
    GmCommand,
    decode_packet_hex,
    parse_gm_command,
    parse_rate,
    parse_target_amount,
)


def test_parse_command_after_slash():
    cmd = parse_gm_command("!/rate exp 2")
    assert cmd == GmCommand("rate", ("exp", "2"))


def test_parse_command_without_slash():
    cmd = parse_gm_command("warp henesys")
    assert cmd.name == "warp"
    assert cmd.args == ("henesys",)


def test_parse_command_keeps_empty_pieces():
    cmd = parse_gm_command("/notice hello  world")
    assert cmd.args == ("hello", "", "world")
    assert cmd.text == "hello  world"


def test_parse_empty_message():
    cmd = parse_gm_command("")
    assert cmd.name == ""
    assert cmd.args == ()


def test_parse_rate_valid():
    assert parse_rate(["exp", "2.5"]) == ("exp", 2.5)
    assert parse_rate(["mesos", "3"]) == ("mesos", 3.0)


def test_parse_rate_missing_arguments():
    with pytest.raises(CommandError, match="Command structure"):
        parse_rate(["exp"])


def test_parse_rate_unknown_mode():
    with pytest.raises(CommandError, match="Choose between"):
        parse_rate(["meso", "2"])


@pytest.mark.parametrize("value", ["abc", "", " 2", "1_0"])
def test_parse_rate_bad_number(value):
    with pytest.raises(CommandError, match="should be a number"):
        parse_rate(["drop", value])


def test_parse_rate_out_of_single_precision_range():
    with pytest.raises(CommandError):
        parse_rate(["exp", "1e300"])


def test_target_amount_self():
    assert parse_target_amount(["100"]) == (None, 100)


def test_target_amount_named():
    assert parse_target_amount(["bob", "-50"]) == ("bob", -50)


@pytest.mark.parametrize("args", [[], ["a", "b", "c"]])
def test_target_amount_other_counts(args):
    assert parse_target_amount(args) == (None, None)


@pytest.mark.parametrize("args", [["x"], ["bob", "1.5"], ["99999999999999999999"]])
def test_target_amount_invalid(args):
    with pytest.raises(CommandError):
        parse_target_amount(args)


def test_decode_packet_hex_prefixes_header():
    assert decode_packet_hex("0102ff") == b"\x00\x00\x00\x00\x01\x02\xff"


def test_decode_packet_hex_empty():
    assert decode_packet_hex("") == bytes(4)


@pytest.mark.parametrize("text", ["abc", "zz", "01 02"])
def test_decode_packet_hex_invalid(text):
    with pytest.raises(CommandError):
        decode_packet_hex(text)