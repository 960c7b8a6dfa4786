import pytest

SAMPLE_BVH = """HIERARCHY
ROOT Hips
{
  OFFSET 0.0 0.0 0.0
  CHANNELS 6 Xposition Yposition Zposition Zrotation Xrotation Yrotation
  JOINT Spine
  {
    OFFSET 0.0 5.2 0.0
    CHANNELS 3 Zrotation Xrotation Yrotation
    End Site
    {
      OFFSET 0.0 4.0 0.0
    }
  }
}
MOTION
Frames: 2
Frame Time: 0.0333333
1.0 2.0 3.0 10.0 20.0 30.0 -1.5 0.5 90.0
1.5 2.5 3.5 11.0 21.0 31.0 -2.5 1.5 45.0
"""

BRANCHED_BVH = """HIERARCHY
ROOT Hips
{
\tOFFSET 0 0 0
\tCHANNELS 6 Xposition Yposition Zposition Zrotation Xrotation Yrotation
\tJOINT LeftUpLeg
\t{
\t\tOFFSET 10 0 0
\t\tCHANNELS 3 Zrotation Xrotation Yrotation
\t\tJOINT LeftLeg
\t\t{
\t\t\tOFFSET 0 -45 0
\t\t\tCHANNELS 3 Zrotation Xrotation Yrotation
\t\t\tEnd Site
\t\t\t{
\t\t\t\tOFFSET 0 -40 0
\t\t\t}
\t\t}
\t}
\tJOINT RightUpLeg
\t{
\t\tOFFSET -10 0 0
\t\tCHANNELS 3 Zrotation Xrotation Yrotation
\t\tEnd Site
\t\t{
\t\t\tOFFSET 0 -45 0
\t\t}
\t}
\tJOINT Spine
\t{
\t\tOFFSET 0 10 0
\t\tCHANNELS 1 Yrotation
\t\tEnd Site
\t\t{
\t\t\tOFFSET 0 10 0
\t\t}
\t}
}
MOTION
Frames: 3
Frame Time: 0.04
0 90 0 1 2 3 4 5 6 7 8 9 10 11 12 13
1 91 1 1 2 3 4 5 6 7 8 9 10 11 12 14
2 92 2 1 2 3 4 5 6 7 8 9 10 11 12 15
"""


@pytest.fixture
def sample_text():
    return SAMPLE_BVH


@pytest.fixture
def branched_text():
    return BRANCHED_BVH


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.bvh"
    path.write_text(SAMPLE_BVH, encoding="utf-8")
    return path
