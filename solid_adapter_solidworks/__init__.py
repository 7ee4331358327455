"""SolidWorks macros over COM automation.

Simplifies large multi-body parts by keeping their most significant bodies,
imports big STEP files silently, and provides a fluent part modeling API
(selection, sketches, features) used by the parametric flange macros.

Example usage (on Windows with SolidWorks installed):

    from solid_adapter_solidworks import PartModel, SolidWorksSession, SimplifyPartRun
    from solid_canonical import RetryPolicy

    session = SolidWorksSession()          # attaches to a running SolidWorks
    SimplifyPartRun(
        session,
        r"D:\\Projects\\plant.stp.temp.SLDPRT",
        keep_count=3000,
        save_policy=RetryPolicy(max_attempts=5),
    ).run()

    # Fluent modeling
    model = PartModel.new(session)
    model.select_plane("Front").create_boss_extrusion(
        0.025, lambda sm: sm.CreateCircleByRadius(0, 0, 0, 0.075)
    )

Requirements:
    - Windows operating system
    - SolidWorks installed
    - pywin32 package (pip install pywin32)

From the command line: ``python -m solid_adapter_solidworks --help``.
"""

from .com import SOLIDWORKS_AVAILABLE
from .connection import (
    SolidWorksConnectionError,
    SolidWorksSession,
    get_solidworks_application,
)
from .bodies import SolidWorksBody, get_solid_bodies
from .documents import save_as, save_with_retry
from .features import execute_and_get_new_feature
from .geometry import (
    LazyRef,
    find_conical_face_by_boundary_circle,
    find_cylindrical_face_by_radius,
    find_planar_face,
    get_first_body,
    get_intersection_edge,
)
from .sketching import draw_contour, run_in_sketch
from .model import PartModel
from .simplify import simplify_part_by_copy_to_new
from .importer import StpSilentImporter
from .runs import ImportStpRun, MacroRun, SimplifyPartRun
from .flanges import DrawComplexFlange, DrawFlange, DrawWeldNeckFlange

__all__ = [
    "SOLIDWORKS_AVAILABLE",
    "SolidWorksConnectionError",
    "SolidWorksSession",
    "get_solidworks_application",
    "SolidWorksBody",
    "get_solid_bodies",
    "save_as",
    "save_with_retry",
    "execute_and_get_new_feature",
    "LazyRef",
    "find_conical_face_by_boundary_circle",
    "find_cylindrical_face_by_radius",
    "find_planar_face",
    "get_first_body",
    "get_intersection_edge",
    "draw_contour",
    "run_in_sketch",
    "PartModel",
    "simplify_part_by_copy_to_new",
    "StpSilentImporter",
    "MacroRun",
    "SimplifyPartRun",
    "ImportStpRun",
    "DrawFlange",
    "DrawComplexFlange",
    "DrawWeldNeckFlange",
]
