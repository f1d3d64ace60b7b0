"""Core geometry pipeline for TextTango.

This module contains the stages that turn two strings into one solid:

- Outline extraction (cleanup, winding, even-odd cross-sections)
- Character solids and per-position intersection
- Layout, supports, bridges and the base plate
- Final assembly and floating-island filtering

Solids are opaque handles of an injected SolidKernel; ManifoldKernel is
the production implementation.

Key functions:
- signed_area: Calculate polygon area using shoelace formula
- point_in_polygon: Test if point is inside polygon
- build_cross_section: Clean and wind loops into a CrossSection

Key classes:
- GenerationPipeline: Runs a full generation
- RegenerationScheduler: Debounced, stale-safe regeneration
- SolidKernel / ManifoldKernel: Boolean solid kernel interface and adapter
"""

from texttango.core.assembler import Assembler
from texttango.core.base import BaseSynthesizer
from texttango.core.bridge import BridgeSynthesizer
from texttango.core.character import CharacterSolidBuilder, PairIntersector
from texttango.core.geometry import (
    ellipse,
    is_counter_clockwise,
    point_in_polygon,
    rounded_rectangle,
    signed_area,
)
from texttango.core.kernel import ManifoldKernel, SolidKernel, get_kernel
from texttango.core.layout import LayoutEngine
from texttango.core.outline import FontService, OutlineExtractor, build_cross_section
from texttango.core.pipeline import GenerationPipeline, GenerationResult
from texttango.core.scheduler import RegenerationScheduler
from texttango.core.support import SupportSynthesizer

__all__ = [
    # Stages
    "Assembler",
    "BaseSynthesizer",
    "BridgeSynthesizer",
    "CharacterSolidBuilder",
    "LayoutEngine",
    "OutlineExtractor",
    "PairIntersector",
    "SupportSynthesizer",
    # Orchestration
    "GenerationPipeline",
    "GenerationResult",
    "RegenerationScheduler",
    # Interfaces
    "FontService",
    "ManifoldKernel",
    "SolidKernel",
    "get_kernel",
    # Geometry functions
    "build_cross_section",
    "ellipse",
    "is_counter_clockwise",
    "point_in_polygon",
    "rounded_rectangle",
    "signed_area",
]
