import pytest

from mocap_bvh.core.channels import Channel, parse_channels
from mocap_bvh.core.errors import (
    ChannelCountMismatch,
    GrammarError,
    NumericParseError,
    UnknownChannelName,
)
from mocap_bvh.core.reader import Line


def line(text):
    return Line(7, text)


def test_parses_channels_in_declared_order():
    channels = parse_channels(
        line("  CHANNELS 6 Xposition Yposition Zposition Zrotation Xrotation Yrotation")
    )
    assert channels == (
        Channel.XPOSITION,
        Channel.YPOSITION,
        Channel.ZPOSITION,
        Channel.ZROTATION,
        Channel.XROTATION,
        Channel.YROTATION,
    )


def test_zero_channels():
    assert parse_channels(line("CHANNELS 0")) == ()


def test_count_larger_than_names():
    with pytest.raises(ChannelCountMismatch) as info:
        parse_channels(line("CHANNELS 3 Xposition Yposition"))
    assert info.value.expected == 3
    assert info.value.actual == 2
    assert info.value.line_number == 7


def test_count_smaller_than_names():
    with pytest.raises(ChannelCountMismatch):
        parse_channels(line("CHANNELS 1 Xposition Yposition"))


def test_missing_keyword():
    with pytest.raises(GrammarError):
        parse_channels(line("OFFSET 0 0 0"))


def test_misspelled_channel_name():
    with pytest.raises(UnknownChannelName) as info:
        parse_channels(line("CHANNELS 3 Wposition Yposition Zposition"))
    assert "Wposition" in str(info.value)


def test_channel_names_are_case_sensitive():
    with pytest.raises(UnknownChannelName):
        parse_channels(line("CHANNELS 1 xrotation"))


def test_non_numeric_count():
    with pytest.raises(NumericParseError):
        parse_channels(line("CHANNELS three Xposition Yposition Zposition"))


def test_channel_properties():
    assert Channel.XPOSITION.is_position
    assert not Channel.XPOSITION.is_rotation
    assert Channel.ZROTATION.is_rotation
    assert Channel.ZROTATION.axis == "Z"
