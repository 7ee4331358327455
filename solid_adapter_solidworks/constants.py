"""SolidWorks enumeration values (from the swconst type library).

Late-bound COM through win32com does not expose the swconst enums, so the
values used by the macros are mirrored here.
"""


class SwDocumentTypes:
    """swDocumentTypes_e"""

    NONE = 0
    PART = 1
    ASSEMBLY = 2
    DRAWING = 3


class SwOpenDocOptions:
    """swOpenDocOptions_e"""

    SILENT = 1
    READ_ONLY = 2


class SwSaveAsVersion:
    """swSaveAsVersion_e"""

    CURRENT_VERSION = 0


class SwSaveAsOptions:
    """swSaveAsOptions_e"""

    SILENT = 1
    COPY = 2


class SwBodyType:
    """swBodyType_e"""

    ALL = -1
    SOLID = 0
    SHEET = 1


class SwSelectType:
    """swSelectType_e (subset used for ray selection)"""

    EDGES = 1
    FACES = 2
    VERTICES = 3
    DATUM_PLANES = 4
    DATUM_AXES = 5
    BODY_FEATURES = 22


class SwSelectOption:
    """swSelectOption_e"""

    DEFAULT = 0


class SwEndConditions:
    """swEndConditions_e"""

    BLIND = 0
    THROUGH_ALL = 1


class SwCreateFeatureBodyOpts:
    """swCreateFeatureBodyOpts_e"""

    CHECK = 1
    SIMPLIFY = 2


class SwFeatureNameID:
    """swFeatureNameID_e"""

    FILLET = 2


class SwSimpleFilletType:
    """swSimpleFilletType_e"""

    CONST_RADIUS = 0


class SwFeatureChamferOption:
    """swFeatureChamferOption_e (bit flags)"""

    FLIP_DIRECTION = 1
    KEEP_FEATURE = 2
    TANGENT_PROPAGATION = 4


class SwChamferType:
    """swChamferType_e"""

    ANGLE_DISTANCE = 1
    DISTANCE_DISTANCE = 2
    VERTEX = 3


class SwUserPreferenceToggle:
    """swUserPreferenceToggle_e"""

    SKETCH_INFER_FROM_MODEL = 74


class SwUserPreferenceIntegerValue:
    """swUserPreferenceIntegerValue_e"""

    UNIT_SYSTEM = 427


class SwUnitSystem:
    """swUnitSystem_e"""

    CGS = 1
    MKS = 2
    IPS = 3
    CUSTOM = 4
    MMGS = 5


class SwUserPreferenceOption:
    """swUserPreferenceOption_e"""

    DEFAULT = 0


ISOMETRIC_VIEW = "*Isometric"
