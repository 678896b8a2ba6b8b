"""VMD scene-setup script for viewing XYZ trajectories.

The script switches on two lights, uses an orthographic projection, draws
particles as blue VDW spheres and outlines the simulation box in white.
Three-dimensional boxes are also rotated to an oblique view.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from particlemc.core.particles import Box
from particlemc.utils.exceptions import ExportError

logger = logging.getLogger(__name__)

DEFAULT_VMD_PATH = "vmd.tcl"

_HEADER = (
    "light 0 on",
    "light 1 on",
    "light 2 off",
    "light 3 off",
    "axes location off",
    "stage location off",
    "display projection orthographic",
    "mol modstyle 0 0 VDW 1 30",
    'set sel [atomselect top "name X"]',
    "atomselect0 set radius 0.4",
    "color Name X blue",
    "display depthcue off",
)

# (start, end) corners of the twelve box edges.
_EDGES = (
    ("$minx $miny $minz", "$maxx $miny $minz"),
    ("$minx $miny $minz", "$minx $maxy $minz"),
    ("$minx $miny $minz", "$minx $miny $maxz"),
    ("$maxx $miny $minz", "$maxx $maxy $minz"),
    ("$maxx $miny $minz", "$maxx $miny $maxz"),
    ("$minx $maxy $minz", "$maxx $maxy $minz"),
    ("$minx $maxy $minz", "$minx $maxy $maxz"),
    ("$minx $miny $maxz", "$maxx $miny $maxz"),
    ("$minx $miny $maxz", "$minx $maxy $maxz"),
    ("$maxx $maxy $maxz", "$maxx $maxy $minz"),
    ("$maxx $maxy $maxz", "$minx $maxy $maxz"),
    ("$maxx $maxy $maxz", "$maxx $miny $maxz"),
)

_ROTATION = (
    "rotate x by -60",
    "rotate y by -30",
    "rotate z by -15",
)


def format_vmd_script(box_size: Sequence[float] | Box) -> str:
    """Render the VMD script for a 2D or 3D box.

    Raises:
        InvalidGeometryError: If the box does not have 2 or 3 positive sides.
    """
    box = box_size if isinstance(box_size, Box) else Box.from_sequence(box_size)
    size = box.size

    lines = list(_HEADER)
    lines += [
        "set minx 0",
        f"set maxx {size[0]:5.4f}",
        "set miny 0",
        f"set maxy {size[1]:5.4f}",
        "set minz 0",
        f"set maxz {size[2]:5.4f}" if box.dimension == 3 else "set maxz 0",
    ]
    lines += ["draw materials off", "draw color white"]
    lines += [f'draw line "{start}" "{end}"' for start, end in _EDGES]
    if box.dimension == 3:
        lines += _ROTATION

    return "".join(line + "\n" for line in lines)


def write_vmd_script(box_size: Sequence[float] | Box, path: str | Path = DEFAULT_VMD_PATH) -> Path:
    """Write the VMD script, replacing any existing file.

    Raises:
        ExportError: If the file cannot be opened or written.
    """
    script = format_vmd_script(box_size)
    target = Path(path)
    try:
        target.write_text(script)
    except OSError as exc:
        raise ExportError(f"cannot write VMD script to {target}: {exc}") from exc

    logger.debug("Wrote VMD script to %s", target)
    return target
