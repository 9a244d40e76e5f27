from lunge_coach import landmarks as lmk
from lunge_coach.frame_analysis import Posture, Side, analyze_frame, classify_posture


def test_knee_angles_and_active_side(make_frame):
    reading = analyze_frame(make_frame(left=95, right=160))
    assert reading.left_knee_angle == 95
    assert reading.right_knee_angle == 160
    assert reading.active_side is Side.LEFT
    assert reading.active_knee_angle == 95
    assert reading.is_good_lunge
    assert not reading.is_deep_lunge


def test_right_side_active_when_more_bent(make_frame):
    reading = analyze_frame(make_frame(left=150, right=86))
    assert reading.active_side is Side.RIGHT
    assert reading.active_knee_angle == 86
    assert reading.is_deep_lunge


def test_tie_goes_to_right(make_frame):
    reading = analyze_frame(make_frame(left=120, right=120))
    assert reading.active_side is Side.RIGHT


def test_trunk_lean_uses_active_side_only(make_frame):
    frame = make_frame(left=95, right=170, lean=40)
    reading = analyze_frame(frame)
    assert reading.trunk_lean_angle == 40

    # knock out the inactive side's shoulder: lean is unaffected
    points = list(frame)
    points[lmk.RIGHT_SHOULDER] = None
    reading = analyze_frame(lmk.LandmarkFrame(points))
    assert reading.trunk_lean_angle == 40


def test_posture_thresholds():
    assert classify_posture(31) is Posture.LEANING_FORWARD
    assert classify_posture(30) is Posture.NORMAL
    assert classify_posture(10) is Posture.NORMAL
    assert classify_posture(9) is Posture.UPRIGHT


def test_posture_feedback(make_frame):
    reading = analyze_frame(make_frame(left=95, right=170, lean=35))
    assert reading.posture is Posture.LEANING_FORWARD
    assert reading.posture_feedback == "Back leaning too far forward!"

    reading = analyze_frame(make_frame(left=95, right=170, lean=5))
    assert reading.posture is Posture.UPRIGHT


def test_missing_knee_gives_zero_angle(make_frame):
    reading = analyze_frame(make_frame(left=170, right=170, missing=(lmk.LEFT_KNEE,)))
    assert reading.left_knee_angle == 0
    assert reading.active_side is Side.LEFT
    assert reading.is_good_lunge


def test_as_dict_is_plain(make_frame):
    out = analyze_frame(make_frame(left=95, right=160, lean=20)).as_dict()
    assert out["active_side"] == "left"
    assert out["posture"] == "normal"
    assert out["is_good_lunge"] is True
    assert out["trunk_lean_angle"] == 20
