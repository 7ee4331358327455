"""Parametric flange macros.

Each macro builds a new part from scratch with the fluent PartModel API.
Dimensions are given in millimeters and converted to meters, the unit of
every SolidWorks API call regardless of the document unit system.

The flange axis is the global Z axis. Profiles are sketched on the Right
plane (YZ), where sketch X points along global -Z and sketch Y along global Y.
"""

import logging
import math

from solid_canonical import PlaneNames, Point3D, check_not_none

from .connection import SolidWorksSession
from .constants import SwUnitSystem
from .geometry import (
    LazyRef,
    find_conical_face_by_boundary_circle,
    find_cylindrical_face_by_radius,
    find_planar_face,
    get_intersection_edge,
)
from .model import PartModel
from .runs import MacroRun

logger = logging.getLogger(__name__)

MM = 0.001


def mm(value: float) -> float:
    """Millimeters to meters."""
    return value * MM


def neck_profile(
    bore_radius: float,
    outer_radius: float,
    thickness: float,
    neck_radius: float,
    total_length: float,
    chamfer_angle: float,
) -> list[Point3D]:
    """
    Closed half cross-section of a neck flange in the YZ plane (meters).

    The neck ends in a chamfer of ``chamfer_angle`` degrees down to the bore.
    """
    chamfer_dz = (neck_radius - bore_radius) * math.tan(math.radians(chamfer_angle))
    return [
        Point3D(0, bore_radius, 0.0),                       # Bore, back face
        Point3D(0, outer_radius, 0.0),                      # Disk, back face
        Point3D(0, outer_radius, thickness),                # Disk, front face
        Point3D(0, neck_radius, thickness),                 # Neck root
        Point3D(0, neck_radius, total_length - chamfer_dz), # Chamfer start
        Point3D(0, bore_radius, total_length),              # Chamfer end
    ]


class _PartMacro(MacroRun):
    """Macro that models a new part in MMGS units."""

    def __init__(self, session: SolidWorksSession, planes: PlaneNames | None = None):
        super().__init__(session)
        self.planes = planes or PlaneNames()

    def new_model(self) -> PartModel:
        model = PartModel.new(self.session, self.planes)
        print(f"New part '{model.title}' created.")
        model.set_unit_system(SwUnitSystem.MMGS)
        print("Document units set to MMGS (millimeter, gram, second).")
        return model


class DrawWeldNeckFlange(_PartMacro):
    """Weld neck flange as a single revolved profile."""

    flange_diameter = 200.0     # D
    thickness = 25.0            # C
    total_length = 90.0         # H
    neck_diameter = 110.0       # A1
    bore_diameter = 80.0        # B1
    neck_chamfer_angle = 50.0

    def run(self) -> PartModel:
        model = self.new_model()
        print("\n--- Modeling: weld neck flange ---")

        points = neck_profile(
            bore_radius=mm(self.bore_diameter / 2),
            outer_radius=mm(self.flange_diameter / 2),
            thickness=mm(self.thickness),
            neck_radius=mm(self.neck_diameter / 2),
            total_length=mm(self.total_length),
            chamfer_angle=self.neck_chamfer_angle,
        )
        axis_end = mm(self.total_length + 10)

        def profile(sm):
            # The first centerline is the revolve axis
            sm.CreateCenterLine(-mm(10), 0, 0, axis_end, 0, 0)
            model.draw_contour(sm, points)

        model.select_plane("right").create_revolve_boss(profile)
        model.clear_selection()
        print("Revolve feature created.")

        model.finish()
        print("\nWeld neck flange done!")
        return model


class DrawComplexFlange(_PartMacro):
    """Flat flange with a through bore and water-line grooves on the front face."""

    outer_diameter = 150.0
    thickness = 25.0
    bore_diameter = 60.0
    waterline_start_diameter = 65.0
    waterline_end_diameter = 80.0
    waterline_spacing = 2.0
    groove_depth = 0.5

    def run(self) -> PartModel:
        model = self.new_model()
        groove_width = self.waterline_spacing / 2

        print("\n--- Step 1: flange disk ---")
        model.select_plane("front").create_boss_extrusion(
            mm(self.thickness),
            lambda sm: sm.CreateCircleByRadius(0, 0, 0, mm(self.outer_diameter / 2)),
        )
        model.clear_selection()

        # A point between bore and rim on the front face
        face_x = (self.bore_diameter + self.outer_diameter) / 4
        model.select_face_by_point(mm(face_x), 0, mm(self.thickness)).create_cut_through_all(
            lambda sm: sm.CreateCircleByRadius(0, 0, 0, mm(self.bore_diameter / 2))
        )
        model.clear_selection()
        print("Center bore cut.")

        print("\n--- Step 2: reference axis ---")
        axis = model.create_reference_axis()
        model.clear_selection()
        print(f"Reference axis '{axis.Name}' created.")

        print("\n--- Step 3: water-line grooves ---")
        count = int((self.waterline_end_diameter - self.waterline_start_diameter) / 2 / self.waterline_spacing)
        z_start = mm(self.thickness)
        z_end = mm(self.thickness - self.groove_depth)

        def grooves(sm):
            sm.CreateCenterLine(-mm(self.outer_diameter), 0, 0, mm(self.outer_diameter), 0, 0)
            for i in range(count + 1):
                radius = self.waterline_start_diameter / 2 + i * self.waterline_spacing
                print(f"Water line {i + 1}/{count + 1}, radius {radius} mm")
                # Sketch X is global -Z on the Right plane
                rect = sm.CreateCornerRectangle(
                    -z_start, mm(radius), 0, -z_end, mm(radius + groove_width), 0
                )
                check_not_none(rect, f"Creating water line rectangle {i + 1} failed")

        model.select_object(axis, append=False).select_plane("right", append=True)
        model.create_revolve_cut(grooves)
        model.clear_selection()
        print("All water-line grooves created.")

        model.finish()
        print("\nFlange with water lines done!")
        return model


class DrawFlange(_PartMacro):
    """
    Neck flange with water-line grooves, a bolt circle, a neck fillet and
    edge chamfers.
    """

    outer_radius = 100.0        # R
    thickness = 25.0            # C
    total_length = 90.0         # H
    neck_radius = 55.0          # R1
    bore_radius = 40.0          # R2
    neck_chamfer_angle = 50.0

    waterline_start_radius = 45.0
    waterline_end_radius = 65.0
    waterline_spacing = 2.0
    groove_depth = 0.5

    bolt_circle_radius = 80.0
    bolt_hole_radius = 9.0
    bolt_hole_count = 8

    neck_fillet_radius = 5.0
    chamfer_distance = 1.0

    def run(self) -> PartModel:
        model = self.new_model()
        print("\n--- Modeling: neck flange with water lines and bolt holes ---")
        axis_start, axis_end = -mm(10), mm(self.total_length + 10)

        print("\n--- Step 1: revolved body ---")
        points = neck_profile(
            bore_radius=mm(self.bore_radius),
            outer_radius=mm(self.outer_radius),
            thickness=mm(self.thickness),
            neck_radius=mm(self.neck_radius),
            total_length=mm(self.total_length),
            chamfer_angle=self.neck_chamfer_angle,
        )

        def profile(sm):
            sm.CreateCenterLine(axis_start, 0, 0, axis_end, 0, 0)
            model.draw_contour(sm, points)

        model.select_plane("right").create_revolve_boss(profile)
        model.clear_selection()
        print("Flange body created.")

        print("\n--- Step 2: water-line grooves ---")
        groove_width = self.waterline_spacing / 2
        count = int((self.waterline_end_radius - self.waterline_start_radius) / self.waterline_spacing)

        def grooves(sm):
            sm.CreateCenterLine(axis_start, 0, 0, axis_end, 0, 0)
            for i in range(count + 1):
                radius = self.waterline_start_radius + i * self.waterline_spacing
                print(f"Water line {i + 1}/{count + 1}, radius {radius} mm")
                # Cut into the back face: sketch X 0 is global Z 0
                rect = sm.CreateCornerRectangle(
                    0, mm(radius), 0, -mm(self.groove_depth), mm(radius + groove_width), 0
                )
                check_not_none(rect, f"Creating water line rectangle {i + 1} failed")

        model.select_plane("right").create_revolve_cut(grooves)
        model.clear_selection()
        print("All water-line grooves created.")

        print("\n--- Step 3: seed bolt hole ---")
        # Ray from outside the part hits the back face of the disk
        disk_mid = mm((self.outer_radius + self.bore_radius) / 2)
        seed = model.select_by_ray((0, disk_mid, -mm(10)), (0, 0, 1)).create_cut_through_all(
            lambda sm: sm.CreateCircleByRadius(0, mm(self.bolt_circle_radius), 0, mm(self.bolt_hole_radius))
        )
        model.clear_selection()
        print("Seed bolt hole cut.")

        print("\n--- Step 4: bolt hole pattern ---")
        # Bore face as the pattern axis
        model.select_by_ray((0, 0, mm(self.total_length / 2)), (1, 0, 0), mark=1)
        model.select_feature(seed, mark=4)
        model.create_circular_pattern(self.bolt_hole_count)
        model.clear_selection()
        print(f"Circular pattern of {self.bolt_hole_count} bolt holes created.")

        print("\n--- Step 5: fillet and chamfers ---")
        self._finish_edges(model)

        model.finish()
        print("\nNeck flange done!")
        return model

    def _finish_edges(self, model: PartModel) -> None:
        main_body = LazyRef(model.main_body)

        neck_plane = LazyRef(lambda: check_not_none(
            find_planar_face(main_body.value, Point3D(0, 0, 1), Point3D(0, 0, mm(self.thickness))),
            "Flange front face not found.",
        ))
        outer_cylinder = LazyRef(lambda: check_not_none(
            find_cylindrical_face_by_radius(main_body.value, mm(self.outer_radius)),
            "Flange outer cylinder not found.",
        ))
        neck_cylinder = LazyRef(lambda: check_not_none(
            find_cylindrical_face_by_radius(main_body.value, mm(self.neck_radius)),
            "Neck cylinder not found.",
        ))
        bore = LazyRef(lambda: check_not_none(
            find_cylindrical_face_by_radius(main_body.value, mm(self.bore_radius)),
            "Bore cylinder not found.",
        ))
        bore_end = LazyRef(lambda: check_not_none(
            find_conical_face_by_boundary_circle(
                main_body.value, mm(self.bore_radius), Point3D(0, 0, mm(self.total_length))
            ),
            "Conical face at the bore end not found.",
        ))

        outer_edge = LazyRef(lambda: check_not_none(
            get_intersection_edge(outer_cylinder.value, neck_plane.value),
            "Outer rim edge not found.",
        ))
        neck_edge = LazyRef(lambda: check_not_none(
            get_intersection_edge(neck_cylinder.value, neck_plane.value),
            "Neck root edge not found.",
        ))
        bore_edge = LazyRef(lambda: check_not_none(
            get_intersection_edge(bore.value, bore_end.value),
            "Bore end edge not found.",
        ))

        print(f"Adding R{self.neck_fillet_radius} fillet at the neck root...")
        model.select_object(neck_edge.value).create_constant_radius_fillet(mm(self.neck_fillet_radius))
        model.clear_selection()

        print(f"Adding {self.chamfer_distance}x45° chamfer on the outer rim...")
        model.select_object(outer_edge.value).create_angle_distance_chamfer(mm(self.chamfer_distance), 45.0)
        model.clear_selection()

        print(f"Adding {self.chamfer_distance}x45° chamfer at the bore end...")
        model.select_object(bore_edge.value).create_angle_distance_chamfer(mm(self.chamfer_distance), 45.0)
        model.clear_selection()
