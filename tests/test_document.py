import pytest

from mocap_bvh import Channel, parse


@pytest.fixture
def document(branched_text):
    return parse(branched_text)


def test_summary_string(sample_text):
    assert str(parse(sample_text)) == "2nodes, 9channels, 2frames, 0.07seconds"


def test_timing(document):
    assert document.frame_time == pytest.approx(0.04)
    assert document.frame_rate == pytest.approx(25.0)
    assert document.duration == pytest.approx(0.12)


def test_joint_names(document):
    assert document.joint_names() == ["Hips", "LeftUpLeg", "LeftLeg", "RightUpLeg", "Spine"]


def test_find(document):
    assert document.find("LeftLeg").name == "LeftLeg"
    assert document.find("Head") is None


def test_channel_layout(document):
    layout = document.channel_layout()
    assert len(layout) == 16
    assert layout[0] == ("Hips", Channel.XPOSITION)
    assert layout[6] == ("LeftUpLeg", Channel.ZROTATION)
    assert layout[-1] == ("Spine", Channel.YROTATION)


def test_channel_slice(document):
    assert document.channel_slice("Hips") == slice(0, 6)
    assert document.channel_slice("RightUpLeg") == slice(12, 15)
    with pytest.raises(KeyError):
        document.channel_slice("Head")


def test_curve_lookup(document):
    curve = document.curve("LeftLeg", Channel.XROTATION)
    assert curve.joint == "LeftLeg"
    assert list(curve.keys) == [8.0, 8.0, 8.0]
    with pytest.raises(KeyError):
        document.curve("Spine", Channel.XROTATION)


def test_joint_values(document):
    values = document.joint_values("Hips", 1)
    assert values[Channel.XPOSITION] == 1.0
    assert values[Channel.YPOSITION] == 91.0
    assert list(values) == [
        Channel.XPOSITION,
        Channel.YPOSITION,
        Channel.ZPOSITION,
        Channel.ZROTATION,
        Channel.XROTATION,
        Channel.YROTATION,
    ]


def test_sample(document):
    frame = document.sample(2)
    assert set(frame) == {"Hips", "LeftUpLeg", "LeftLeg", "RightUpLeg", "Spine"}
    assert frame["Spine"] == {Channel.YROTATION: 15.0}


@pytest.mark.parametrize("frame", [-1, 3])
def test_frame_out_of_range(document, frame):
    with pytest.raises(IndexError):
        document.sample(frame)


def test_to_array(document):
    array = document.to_array()
    assert array.shape == (3, 16)
    assert array[2, 1] == 92.0
