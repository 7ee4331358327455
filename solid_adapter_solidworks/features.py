"""Feature creation helpers.

Each ``create_*`` method works on the current selection: sketch-based
features enter a sketch on the selected plane or face, run the sketch action,
leave the sketch and call the native feature API with the most common
parameter set. The created feature is returned; a null result raises
OperationError.

SolidWorks does not hand back features for some operations (InsertAxis2
returns a bool). For those, the new feature is found by comparing feature
names before and after the call.
"""

import logging
import math
from typing import Any, Callable

from solid_canonical import FeatureNotFoundError, check, check_not_none

from .com import as_list
from .constants import (
    SwChamferType,
    SwEndConditions,
    SwFeatureChamferOption,
    SwFeatureNameID,
    SwSimpleFilletType,
)
from .sketching import SketchAction, run_in_sketch

logger = logging.getLogger(__name__)

FULL_TURN = 2 * math.pi


def feature_names(feature_manager: Any) -> set[str]:
    return {f.Name for f in as_list(feature_manager.GetFeatures(False))}


def execute_and_get_new_feature(feature_manager: Any, create_action: Callable[[], Any]) -> Any:
    """
    Run ``create_action`` and return the feature it added.

    Args:
        feature_manager: IFeatureManager of the document
        create_action: Callable that creates exactly one feature

    Returns:
        The first feature whose name did not exist before the action

    Raises:
        FeatureNotFoundError: If no new feature appeared
    """
    names_before = feature_names(feature_manager)

    create_action()

    for feature in as_list(feature_manager.GetFeatures(False)):
        if feature.Name not in names_before:
            logger.debug("Detected new feature '%s'", feature.Name)
            return feature

    raise FeatureNotFoundError(
        "No new feature found after the operation. It may not have created anything."
    )


class FeatureMixin:
    """Feature methods for PartModel. Expects ``_doc``, ``planes`` and selection methods."""

    _doc: Any

    @property
    def feature_manager(self) -> Any:
        return self._doc.FeatureManager

    def create_boss_extrusion(self, depth: float, sketch_action: SketchAction) -> Any:
        """Blind boss extrusion of a sketch drawn on the current selection."""
        run_in_sketch(self._doc, sketch_action)
        feature = self.feature_manager.FeatureExtrusion3(
            True, False, False,
            SwEndConditions.BLIND, 0,
            depth, 0,
            False, False, False, False,
            0, 0,
            False, False, False, False,
            True, True, True,
            0, 0, False,
        )
        return check_not_none(feature, "Creating boss extrusion failed!")

    def _feature_cut(self, end_condition: int, depth: float) -> Any:
        return self.feature_manager.FeatureCut4(
            True,               # Sd: single direction
            False,              # Flip: cut inside the profile
            False,              # Dir
            end_condition,      # T1
            end_condition,      # T2 (unused with a single direction)
            depth,              # D1
            0,                  # D2
            False, False,       # Dchk1, Dchk2: no draft
            False, False,       # Ddir1, Ddir2
            0, 0,               # Dang1, Dang2
            False, False,       # OffsetReverse1, OffsetReverse2
            False, False,       # TranslateSurface1, TranslateSurface2
            False,              # NormalCut (sheet metal only)
            False,              # UseFeatScope: affect all bodies
            True,               # UseAutoSelect
            False,              # AssemblyFeatureScope
            False,              # AutoSelectComponents
            False,              # PropagateFeatureToParts
            0,                  # T0: start at the sketch plane
            0,                  # StartOffset
            False,              # FlipStartOffset
            False,              # OptimizeGeometry
        )

    def create_cut_through_all(self, sketch_action: SketchAction) -> Any:
        """Through-all extruded cut of a sketch drawn on the current selection."""
        run_in_sketch(self._doc, sketch_action)
        feature = self._feature_cut(SwEndConditions.THROUGH_ALL, 0)
        return check_not_none(feature, "Creating through-all cut failed!")

    def create_cut_extrusion(self, depth: float, sketch_action: SketchAction) -> Any:
        """Blind extruded cut of the given depth (meters)."""
        run_in_sketch(self._doc, sketch_action)
        feature = self._feature_cut(SwEndConditions.BLIND, depth)
        return check_not_none(feature, "Creating extruded cut failed!")

    def create_reference_axis(self, planes: tuple[str, str] = ("top", "right")) -> Any:
        """
        Reference axis at the intersection of two planes.

        The default, Top and Right, gives the global Z axis. Planes are given
        by alias ("XY", "Top", ...) or name.
        """
        first, second = planes

        def insert_axis():
            self.select_plane(first, append=False)
            self.select_plane(second, append=True)
            check(self._doc.InsertAxis2(True), "Creating a reference axis from plane intersection failed!")

        return execute_and_get_new_feature(self.feature_manager, insert_axis)

    def _revolve(self, sketch_action: SketchAction, is_cut: bool) -> Any:
        run_in_sketch(self._doc, sketch_action)
        feature = self.feature_manager.FeatureRevolve2(
            True,                       # SingleDir
            True,                       # IsSolid
            False,                      # IsThin
            is_cut,                     # IsCut
            False,                      # ReverseDir
            False,                      # BothDirectionUpToSameEntity
            SwEndConditions.BLIND,      # Dir1Type: given angle
            SwEndConditions.BLIND,      # Dir2Type
            FULL_TURN,                  # Dir1Angle
            0,                          # Dir2Angle
            False, False,               # OffsetReverse1, OffsetReverse2
            0, 0,                       # OffsetDistance1, OffsetDistance2
            0, 0, 0,                    # ThinType, ThinThickness1, ThinThickness2
            True,                       # Merge
            False,                      # UseFeatScope
            True,                       # UseAutoSelect
        )
        kind = "revolve cut" if is_cut else "revolve boss"
        return check_not_none(feature, f"Creating {kind} failed!")

    def create_revolve_boss(self, sketch_action: SketchAction) -> Any:
        """
        360 degree revolve boss. The first centerline drawn by the sketch
        action is the axis.
        """
        return self._revolve(sketch_action, is_cut=False)

    def create_revolve_cut(self, sketch_action: SketchAction) -> Any:
        """360 degree revolve cut around the first centerline of the sketch."""
        return self._revolve(sketch_action, is_cut=True)

    def create_circular_pattern(self, instance_count: int) -> Any:
        """
        Equally spaced 360 degree feature pattern.

        Select the axis with mark 1 and the seed features with mark 4 first.
        """
        feature = self.feature_manager.FeatureCircularPattern4(
            instance_count,     # Number of instances, seed included
            FULL_TURN,          # Total angle
            False,              # FlipDirection
            "",                 # DName
            False,              # GeometryPattern: pattern features
            True,               # EqualSpacing
            False,              # VaryInstance
        )
        return check_not_none(feature, "Creating circular pattern failed!")

    def create_constant_radius_fillet(self, radius: float) -> Any:
        """Constant radius fillet on the selected edges, faces or features."""
        fm = self.feature_manager
        fillet_def = fm.CreateDefinition(SwFeatureNameID.FILLET)
        fillet_def.Initialize(SwSimpleFilletType.CONST_RADIUS)
        fillet_def.DefaultRadius = radius
        fillet_def.PropagateToTangentFaces = True
        return check_not_none(fm.CreateFeature(fillet_def), "Creating constant radius fillet failed!")

    def create_angle_distance_chamfer(self, distance: float, angle_degrees: float) -> Any:
        """Angle-distance chamfer on the selected edges."""
        feature = self.feature_manager.InsertFeatureChamfer(
            SwFeatureChamferOption.TANGENT_PROPAGATION,
            SwChamferType.ANGLE_DISTANCE,
            distance,
            math.radians(angle_degrees),
            0,          # OtherDist
            0, 0, 0,    # Vertex chamfer distances
        )
        return check_not_none(feature, "Creating angle-distance chamfer failed!")
