from .types import (
    BeachlineError,
    Edge,
    EmptyQueueError,
    Event,
    InvalidInputError,
    Point,
    VoronoiError,
)
from .config import SweepOptions, get_sweep_options, set_sweep_options
from .events import EventQueue, TombstoneList
from .beachline import Arc, Beachline
from .engine import SweepStats, VoronoiDiagram, VoronoiEngine, compute_diagram, compute_edges
from .utils import coerce_points, edges_to_array, points_to_array, random_sites
from .svg import render_svg
from .crosscheck import CrossCheckResult, crosscheck_vertices

__all__ = [
    'Arc',
    'Beachline',
    'BeachlineError',
    'CrossCheckResult',
    'Edge',
    'EmptyQueueError',
    'Event',
    'EventQueue',
    'InvalidInputError',
    'Point',
    'SweepOptions',
    'SweepStats',
    'TombstoneList',
    'VoronoiDiagram',
    'VoronoiEngine',
    'VoronoiError',
    'coerce_points',
    'compute_diagram',
    'compute_edges',
    'crosscheck_vertices',
    'edges_to_array',
    'get_sweep_options',
    'points_to_array',
    'random_sites',
    'render_svg',
    'set_sweep_options',
]
