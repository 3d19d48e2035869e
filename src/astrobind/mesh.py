'''Export and plotting of local inclination analysis meshes'''

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from .aerodynamics import get_vehicle_mesh, interior_cells
from .binding import BoundObject
from .config import config

logger = logging.getLogger(__name__)


def _native_analysis(analysis):
    """Engine object behind a bound analysis (or the argument itself)."""
    if isinstance(analysis, BoundObject):
        return type(analysis)._registry.to_native(analysis)
    return analysis


def local_inclination_mesh_to_dataframe(
        analysis,
        independent_variable_indices: Optional[Sequence[int]] = None) -> pd.DataFrame:
    """
    Export the panels of a local inclination analysis to a DataFrame.

    Parameters:
        analysis: HypersonicLocalInclinationAnalysis (bound or engine object)
        independent_variable_indices: Grid indices (Mach number, angle of attack,
            sideslip angle) of the pressure coefficients to include. The analysis
            must have been created with save_pressure_coefficients=True.

    Returns:
        DataFrame with one row per panel and columns part, x, y, z, nx, ny, nz
        (and pressure_coefficient if indices were given)
    """
    native = _native_analysis(analysis)
    cells = interior_cells(native)

    pressure_coefficients = None
    if independent_variable_indices is not None:
        pressure_coefficients = native.getPressureCoefficientList(
            list(independent_variable_indices))
        if len(pressure_coefficients) != len(cells):
            raise ValueError(
                f"Pressure coefficients cover {len(pressure_coefficients)} parts, "
                f"mesh has {len(cells)}"
            )

    frames = []
    for part, (points, normals) in enumerate(cells):
        n_lines, n_points = points.shape[:2]
        flat_points = points.reshape(-1, 3)
        flat_normals = normals.reshape(-1, 3)
        data = {
            'part': np.full(len(flat_points), part, dtype=int),
            'x': flat_points[:, 0],
            'y': flat_points[:, 1],
            'z': flat_points[:, 2],
            'nx': flat_normals[:, 0],
            'ny': flat_normals[:, 1],
            'nz': flat_normals[:, 2],
        }
        if pressure_coefficients is not None:
            part_coefficients = np.asarray(pressure_coefficients[part], dtype=float)
            if flat_points.size and (part_coefficients.ndim != 2
                                     or part_coefficients.shape[0] < n_lines
                                     or part_coefficients.shape[1] < n_points):
                raise ValueError(
                    f"Pressure coefficients of part {part} (shape {part_coefficients.shape}) "
                    f"do not cover its {n_lines}x{n_points} panels"
                )
            data['pressure_coefficient'] = (
                part_coefficients[:n_lines, :n_points].reshape(-1)
                if flat_points.size else np.empty(0)
            )
        frames.append(pd.DataFrame(data))

    columns = ['part', 'x', 'y', 'z', 'nx', 'ny', 'nz']
    if pressure_coefficients is not None:
        columns.append('pressure_coefficient')
    if not frames:
        return pd.DataFrame(columns=columns)
    return pd.concat(frames, ignore_index=True)[columns]


def save_local_inclination_mesh(
        analysis,
        file_path: Union[str, Path],
        independent_variable_indices: Optional[Sequence[int]] = None) -> Path:
    """
    Save the panels of a local inclination analysis to a CSV file.

    Parameters:
        analysis: HypersonicLocalInclinationAnalysis (bound or engine object)
        file_path: Output CSV path; parent directories are created
        independent_variable_indices: See local_inclination_mesh_to_dataframe

    Returns:
        Path of the written file
    """
    frame = local_inclination_mesh_to_dataframe(analysis, independent_variable_indices)
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(path, index=False)
    logger.info("Saved %d mesh panels to %s", len(frame), path)
    return path


def plot_local_inclination_mesh(
        analysis,
        show_normals: bool = True,
        point_color: Optional[str] = None,
        normal_color: Optional[str] = None,
        normal_scale: Optional[float] = None,
        marker_size: Optional[int] = None) -> go.Figure:
    """
    Create 3D plot of the panels of a local inclination analysis.

    Parameters:
        analysis: HypersonicLocalInclinationAnalysis (bound or engine object)
        show_normals: Whether to draw panel surface normals as cones (default: True)
        point_color: Color of panel points (default: config.DEFAULT_POINT_COLOR)
        normal_color: Color of normals (default: config.DEFAULT_NORMAL_COLOR)
        normal_scale: Cone size scaling (default: config.DEFAULT_NORMAL_SCALE)
        marker_size: Size of panel markers (default: config.DEFAULT_MARKER_SIZE)

    Returns:
        Plotly Figure object
    """
    point_color = point_color or config.DEFAULT_POINT_COLOR
    normal_color = normal_color or config.DEFAULT_NORMAL_COLOR
    normal_scale = normal_scale if normal_scale is not None else config.DEFAULT_NORMAL_SCALE
    marker_size = marker_size if marker_size is not None else config.DEFAULT_MARKER_SIZE

    points, normals = get_vehicle_mesh(_native_analysis(analysis))
    if not points:
        raise ValueError("Local inclination mesh has no panels to plot")
    points = np.array(points)
    normals = np.array(normals)

    fig = go.Figure()

    fig.add_trace(go.Scatter3d(
        x=points[:, 0],
        y=points[:, 1],
        z=points[:, 2],
        mode='markers',
        marker=dict(size=marker_size, color=point_color),
        name='Panel points',
        hovertemplate='x: %{x:.4f}<br>y: %{y:.4f}<br>z: %{z:.4f}<extra></extra>'
    ))

    if show_normals:
        fig.add_trace(go.Cone(
            x=points[:, 0],
            y=points[:, 1],
            z=points[:, 2],
            u=normals[:, 0],
            v=normals[:, 1],
            w=normals[:, 2],
            anchor='tail',
            sizemode='absolute',
            sizeref=normal_scale,
            colorscale=[[0, normal_color], [1, normal_color]],
            showscale=False,
            name='Surface normals'
        ))

    fig.update_layout(
        scene=dict(
            xaxis_title='X [m]',
            yaxis_title='Y [m]',
            zaxis_title='Z [m]',
            aspectmode='data'
        ),
        title='Local Inclination Mesh',
        showlegend=True
    )

    return fig
