"""Standard lower/upper body marker set and its default topology."""

from __future__ import annotations

from enum import Enum

from mocap_engine.core.types import Joint, Topology


class MarkerIds(str, Enum):
    """Standard marker identifiers."""

    # Foot
    RMMA = "RMMA"
    LMMA = "LMMA"
    RLMA = "RLMA"
    LLMA = "LLMA"
    RFOO = "RFOO"
    LFOO = "LFOO"
    RTOE = "RTOE"
    LTOE = "LTOE"
    RBTO = "RBTO"
    LBTO = "LBTO"
    RHEE = "RHEE"
    LHEE = "LHEE"

    # Ankle
    RAJC = "RAJC"
    LAJC = "LAJC"

    # Upper body
    RSAP = "RSAP"
    LSAP = "LSAP"
    RUM = "RUM"
    LUM = "LUM"
    RRM = "RRM"
    LRM = "LRM"
    RUS = "RUS"
    LUS = "LUS"
    C7T1 = "C7T1"
    RHEAD = "RHEAD"
    LHEAD = "LHEAD"

    # Pelvis and hip
    RASI = "RASI"
    LASI = "LASI"
    RPSI = "RPSI"
    LPSI = "LPSI"
    RHJC = "RHJC"
    LHJC = "LHJC"
    RTRO = "RTRO"
    LTRO = "LTRO"

    # Thigh and knee
    RTHI = "RTHI"
    LTHI = "LTHI"
    RLFC = "RLFC"
    LLFC = "LLFC"
    RMFC = "RMFC"
    LMFC = "LMFC"
    RKJC = "RKJC"
    LKJC = "LKJC"

    # Shank
    RSHA = "RSHA"
    LSHA = "LSHA"
    RTT = "RTT"
    LTT = "LTT"


class BodySegment(Enum):
    """Body segment a marker is attached to."""

    HEAD = "Head"
    NECK = "Neck"
    SHOULDER = "Shoulder"
    ELBOW = "Elbow"
    WRIST = "Wrist"
    PELVIS = "Pelvis"
    HIP = "Hip"
    THIGH = "Thigh"
    KNEE = "Knee"
    SHANK = "Shank"
    ANKLE = "Ankle"
    FOOT = "Foot"


M = MarkerIds
S = BodySegment

# (full name, segment) per marker
MARKER_INFO: dict[MarkerIds, tuple[str, BodySegment]] = {
    M.RMMA: ("Right medial malleolus", S.FOOT),
    M.LMMA: ("Left medial malleolus", S.FOOT),
    M.RLMA: ("Right lateral malleolus", S.FOOT),
    M.LLMA: ("Left lateral malleolus", S.FOOT),
    M.RFOO: ("Right navicular tuberosity", S.FOOT),
    M.LFOO: ("Left navicular tuberosity", S.FOOT),
    M.RTOE: ("Right tuberosity of 5th metatarsal bone", S.FOOT),
    M.LTOE: ("Left tuberosity of 5th metatarsal bone", S.FOOT),
    M.RBTO: ("Right foot big toe", S.FOOT),
    M.LBTO: ("Left foot big toe", S.FOOT),
    M.RHEE: ("Right heel", S.FOOT),
    M.LHEE: ("Left heel", S.FOOT),
    M.RAJC: ("Right ankle joint center", S.ANKLE),
    M.LAJC: ("Left ankle joint center", S.ANKLE),
    M.RSAP: ("Right shoulder acromial process", S.SHOULDER),
    M.LSAP: ("Left shoulder acromial process", S.SHOULDER),
    M.RUM: ("Right humerus medial epicondyle", S.ELBOW),
    M.LUM: ("Left humerus medial epicondyle", S.ELBOW),
    M.RRM: ("Right humerus lateral epicondyle", S.ELBOW),
    M.LRM: ("Left humerus lateral epicondyle", S.ELBOW),
    M.RUS: ("Right ulnar styloid", S.WRIST),
    M.LUS: ("Left ulnar styloid", S.WRIST),
    M.C7T1: ("C7 and T1 junction", S.NECK),
    M.RHEAD: ("Right ear channel", S.HEAD),
    M.LHEAD: ("Left ear channel", S.HEAD),
    M.RASI: ("Right anterior superior iliac spine", S.PELVIS),
    M.LASI: ("Left anterior superior iliac spine", S.PELVIS),
    M.RPSI: ("Right posterior superior iliac spine", S.PELVIS),
    M.LPSI: ("Left posterior superior iliac spine", S.PELVIS),
    M.RHJC: ("Right hip joint center", S.HIP),
    M.LHJC: ("Left hip joint center", S.HIP),
    M.RTRO: ("Right greater trochanter", S.HIP),
    M.LTRO: ("Left greater trochanter", S.HIP),
    M.RTHI: ("Right thigh wand marker", S.THIGH),
    M.LTHI: ("Left thigh wand marker", S.THIGH),
    M.RLFC: ("Right lateral femoral epicondyle center", S.THIGH),
    M.LLFC: ("Left lateral femoral epicondyle center", S.THIGH),
    M.RMFC: ("Right medial femoral epicondyle center", S.THIGH),
    M.LMFC: ("Left medial femoral epicondyle center", S.THIGH),
    M.RKJC: ("Right knee joint center", S.KNEE),
    M.LKJC: ("Left knee joint center", S.KNEE),
    M.RSHA: ("Right head of fibula", S.SHANK),
    M.LSHA: ("Left head of fibula", S.SHANK),
    M.RTT: ("Right tibia tuberosity", S.SHANK),
    M.LTT: ("Left tibia tuberosity", S.SHANK),
}

# (start, end, name); lengths start uncalibrated
_DEFAULT_JOINTS: list[tuple[MarkerIds, MarkerIds, str]] = [
    # Head
    (M.LHEAD, M.RHEAD, "Head Width"),
    (M.LHEAD, M.C7T1, "Left Head to Neck"),
    (M.RHEAD, M.C7T1, "Right Head to Neck"),
    # Shoulders
    (M.C7T1, M.LSAP, "Neck to Left Shoulder"),
    (M.C7T1, M.RSAP, "Neck to Right Shoulder"),
    # Arms
    (M.LSAP, M.LUM, "Left Upper Arm"),
    (M.RSAP, M.RUM, "Right Upper Arm"),
    (M.LUM, M.LRM, "Left Elbow Width"),
    (M.RUM, M.RRM, "Right Elbow Width"),
    (M.LUM, M.LUS, "Left Forearm"),
    (M.RUM, M.RUS, "Right Forearm"),
    # Torso
    (M.LSAP, M.LASI, "Left Trunk"),
    (M.RSAP, M.RASI, "Right Trunk"),
    # Pelvis
    (M.LASI, M.RASI, "ASIS Width"),
    (M.LPSI, M.RPSI, "PSIS Width"),
    (M.LASI, M.LPSI, "Left Pelvis Length"),
    (M.RASI, M.RPSI, "Right Pelvis Length"),
    # Hip
    (M.LASI, M.LHJC, "Left Hip Joint"),
    (M.RASI, M.RHJC, "Right Hip Joint"),
    (M.LHJC, M.LTRO, "Left Hip to Trochanter"),
    (M.RHJC, M.RTRO, "Right Hip to Trochanter"),
    # Thigh
    (M.LHJC, M.LTHI, "Left Thigh Upper"),
    (M.RHJC, M.RTHI, "Right Thigh Upper"),
    (M.LTHI, M.LKJC, "Left Thigh Lower"),
    (M.RTHI, M.RKJC, "Right Thigh Lower"),
    (M.LLFC, M.LMFC, "Left Knee Width"),
    (M.RLFC, M.RMFC, "Right Knee Width"),
    # Shank
    (M.LKJC, M.LSHA, "Left Shank Upper"),
    (M.RKJC, M.RSHA, "Right Shank Upper"),
    (M.LSHA, M.LTT, "Left Shank Middle"),
    (M.RSHA, M.RTT, "Right Shank Middle"),
    (M.LTT, M.LAJC, "Left Shank Lower"),
    (M.RTT, M.RAJC, "Right Shank Lower"),
    # Ankle
    (M.LAJC, M.LLMA, "Left Ankle Lateral"),
    (M.RAJC, M.RLMA, "Right Ankle Lateral"),
    (M.LAJC, M.LMMA, "Left Ankle Medial"),
    (M.RAJC, M.RMMA, "Right Ankle Medial"),
    # Foot
    (M.LMMA, M.LLMA, "Left Ankle Width"),
    (M.RMMA, M.RLMA, "Right Ankle Width"),
    (M.LAJC, M.LHEE, "Left Foot Back"),
    (M.RAJC, M.RHEE, "Right Foot Back"),
    (M.LHEE, M.LFOO, "Left Foot Middle"),
    (M.RHEE, M.RFOO, "Right Foot Middle"),
    (M.LFOO, M.LTOE, "Left Foot Front"),
    (M.RFOO, M.RTOE, "Right Foot Front"),
    (M.LTOE, M.LBTO, "Left Foot Toe"),
    (M.RTOE, M.RBTO, "Right Foot Toe"),
]


def marker_name(marker_id: str) -> str | None:
    """Full anatomical name for a standard marker id."""
    try:
        return MARKER_INFO[MarkerIds(marker_id)][0]
    except ValueError:
        return None


def marker_segment(marker_id: str) -> BodySegment | None:
    """Body segment for a standard marker id."""
    try:
        return MARKER_INFO[MarkerIds(marker_id)][1]
    except ValueError:
        return None


def default_topology() -> Topology:
    """The standard joint set with all lengths uncalibrated (0)."""
    return Topology(
        tuple(Joint(start.value, end.value, 0.0, name) for start, end, name in _DEFAULT_JOINTS)
    )
