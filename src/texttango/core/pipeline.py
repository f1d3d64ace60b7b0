"""Generation pipeline orchestration.

This module coordinates a full generation run: per-position intersection,
bridging, layout, supports, the base plate and the final assembly.

Key components:
- GenerationResult: Mesh and run metadata
- GenerationPipeline: Main orchestrator class
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import reduce

import structlog

from texttango.config import BaseSpec, PairConfig, TextSettings, sync_pair_configs
from texttango.core.assembler import Assembler
from texttango.core.base import BaseSynthesizer
from texttango.core.bridge import BridgeSynthesizer
from texttango.core.character import CharacterSolidBuilder, PairIntersector
from texttango.core.kernel import SolidKernel, get_kernel
from texttango.core.layout import LayoutEngine
from texttango.core.outline import FontService, OutlineExtractor
from texttango.core.support import SupportSynthesizer
from texttango.domain import BoundingBox, MeshData, PairSolid
from texttango.exceptions import AssemblyError, KernelOperationError, NoPrintableGeometryError
from texttango.utils.logging import GenerationLogger, GenerationStats

ProgressCallback = Callable[[int, int, str, bool], None]


@dataclass
class GenerationResult:
    """Output of one generation run.

    Attributes:
        mesh: Non-indexed triangle mesh centered on the origin
        bounds: Bounding box of mesh
        compute_time: Wall-clock seconds spent generating
        stats: Per-run counters
        token: Request token that produced this result
    """

    mesh: MeshData
    bounds: BoundingBox
    compute_time: float
    stats: GenerationStats
    token: int = 0


@dataclass
class _Stages:
    intersector: PairIntersector
    layout: LayoutEngine
    supports: SupportSynthesizer
    bridges: BridgeSynthesizer
    base: BaseSynthesizer
    assembler: Assembler


def pair_lift(pair: PairConfig, base: BaseSpec) -> float:
    """Y offset that gives a pair its own embed depth.

    A pair with an embed_depth override is lowered by the difference to the
    global embed depth, so its penetration into the base equals the
    override. Without a base or an override the pair stays at Y=0.
    """
    if not base.enabled or pair.embed_depth is None:
        return 0.0
    return base.embed_depth - pair.embed_depth


def prepare_settings(settings: TextSettings) -> TextSettings:
    """Snapshot and validate settings for a run.

    Returns a deep copy whose pair_configs match the current texts, so later
    edits to the caller's settings cannot leak into the run.

    Raises:
        ConfigurationError: If the settings cannot produce printable geometry
        NoPrintableGeometryError: If both texts are blank
    """
    snapshot = settings.model_copy(deep=True)
    padded1, padded2 = snapshot.padded_texts()
    expected = list(zip(padded1, padded2))
    actual = [(pair.char1, pair.char2) for pair in snapshot.pair_configs]
    if actual != expected:
        snapshot = sync_pair_configs(snapshot)

    snapshot.validate_for_generation()
    return snapshot


class GenerationPipeline:
    """Turns TextSettings into a printable mesh.

    The font service and the kernel are injected; without a kernel the
    shared ManifoldKernel is used.

    Example:
        fonts = FontLibrary()
        pipeline = GenerationPipeline(fonts)
        result = pipeline.generate(TextSettings(text1="YES", text2="NO", font="font.ttf"))
    """

    def __init__(
        self,
        fonts: FontService,
        kernel: SolidKernel | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            fonts: Source of character outlines
            kernel: Boolean solid kernel (default: shared ManifoldKernel)
            logger: structlog logger (default: "texttango")
        """
        self.fonts = fonts
        self._kernel = kernel
        self.logger = logger if logger is not None else structlog.get_logger("texttango")

    @property
    def kernel(self) -> SolidKernel:
        """The solid kernel, initialized on first use."""
        if self._kernel is None:
            self._kernel = get_kernel()
        return self._kernel

    def _stages(self, settings: TextSettings, events: GenerationLogger) -> _Stages:
        kernel = self.kernel
        geometry = settings.geometry
        extractor = OutlineExtractor(self.fonts, geometry)
        builder = CharacterSolidBuilder(kernel, geometry.extrusion_factor)
        return _Stages(
            intersector=PairIntersector(extractor, builder, events, geometry.degenerate_epsilon),
            layout=LayoutEngine(
                kernel, settings.font_size, settings.spacing, geometry.space_advance_factor
            ),
            supports=SupportSynthesizer(kernel, geometry.support_segments),
            bridges=BridgeSynthesizer(kernel, geometry),
            base=BaseSynthesizer(kernel, geometry),
            assembler=Assembler(kernel, events, geometry.island_touch_tolerance),
        )

    def generate(
        self,
        settings: TextSettings,
        progress_callback: ProgressCallback | None = None,
        token: int = 0,
    ) -> GenerationResult:
        """Run the full pipeline.

        Args:
            settings: Generation settings (not modified)
            progress_callback: Optional callback(completed, total, pair_label, success)
                called after each position
            token: Request token echoed in the result

        Returns:
            GenerationResult with the final mesh

        Raises:
            ConfigurationError: If settings are invalid
            FontLoadError: If a font cannot be loaded
            NoPrintableGeometryError: If no position produced geometry
            AssemblyError: If the base or the final union fails
        """
        start_time = time.time()
        snapshot = prepare_settings(settings)

        events = GenerationLogger(self.logger)
        events.stats.start_time = start_time
        events.log_generation_start(snapshot.text1, snapshot.text2, snapshot.position_count)

        stages = self._stages(snapshot, events)
        total = len(snapshot.pair_configs)
        emitted = 0

        for index, pair in enumerate(snapshot.pair_configs):
            success = self._generate_position(index, pair, snapshot, stages, events)
            emitted += int(success)
            if progress_callback is not None:
                progress_callback(index + 1, total, f"{pair.char1}/{pair.char2}", success)

        if emitted == 0:
            raise NoPrintableGeometryError(snapshot.text1, snapshot.text2)

        assembler = stages.assembler
        if snapshot.base.enabled:
            kernel = self.kernel
            try:
                letters = reduce(
                    BoundingBox.union, (kernel.bounding_box(part) for part in assembler.parts)
                )
            except KernelOperationError as e:
                raise AssemblyError("base", str(e)) from e
            assembler.add(stages.base.build(snapshot.base, letters))

        mesh = assembler.assemble(filter_islands=snapshot.base.enabled)

        events.stats.end_time = time.time()
        compute_time = events.stats.end_time - start_time
        events.log_generation_complete(mesh.triangle_count, compute_time * 1000)

        return GenerationResult(
            mesh=mesh,
            bounds=mesh.bounding_box(),
            compute_time=compute_time,
            stats=events.stats,
            token=token,
        )

    def _generate_position(
        self,
        index: int,
        pair: PairConfig,
        settings: TextSettings,
        stages: _Stages,
        events: GenerationLogger,
    ) -> bool:
        """Build and place every part for one position.

        Kernel failures skip the failing part and are recorded in the stats.

        Returns:
            True if the position emitted geometry
        """
        try:
            pair_solid = stages.intersector.build(index, pair, settings)
        except KernelOperationError as e:
            events.log_part_error("pair", index, e)
            pair_solid = None

        if pair_solid is None:
            events.log_space(index)
            stages.layout.advance_empty()
            return False

        if pair.bridge.enabled and pair.bridge.auto:
            self._auto_bridge(pair_solid, stages.bridges, events)

        try:
            placed = stages.layout.place(pair_solid, pair.transform, pair_lift(pair, settings.base))
        except KernelOperationError as e:
            events.log_part_error("layout", index, e)
            stages.layout.advance_empty()
            return False

        stages.assembler.add(placed.solid)
        events.log_pair_complete(index, pair_solid.label, placed.bounds.width, placed.bounds.height)

        if pair.support.enabled:
            anchor = stages.supports.anchor_y(settings.base)
            try:
                stages.assembler.add(stages.supports.build(placed, pair.support, anchor))
                events.log_support(index, anchor, anchor + pair.support.height)
            except KernelOperationError as e:
                events.log_part_error("support", index, e)

        if pair.bridge.enabled and not pair.bridge.auto:
            try:
                stages.assembler.add(stages.bridges.manual_bridge(placed, pair.bridge))
                events.log_bridges(index, 1, manual=True)
            except KernelOperationError as e:
                events.log_part_error("bridge", index, e)

        return True

    def _auto_bridge(
        self, pair_solid: PairSolid, bridges: BridgeSynthesizer, events: GenerationLogger
    ) -> None:
        try:
            solid, count = bridges.auto_bridge(pair_solid.solid)
            if count:
                bounds = self.kernel.bounding_box(solid)
        except KernelOperationError as e:
            events.log_part_error("bridge", pair_solid.index, e)
            return

        if count:
            pair_solid.solid = solid
            pair_solid.bounds = bounds
            pair_solid.bridges_added = count
        events.log_bridges(pair_solid.index, count)
