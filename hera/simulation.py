"""
Run driver for the kinematic explorer.

Each tick asks the generator for a fixed batch of events, appends them to a
bounded display buffer (oldest evicted first) and updates the run totals.
A slot whose sampling was exhausted is skipped; the next tick simply tries
again.
"""
from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass, asdict
from typing import Callable, Deque, Dict, List, Optional, Union

import numpy as np

from .beams import BeamConfig, RunMode
from .config import GeneratorConfig, SimulationConfig
from .cross_sections import CrossSection
from .event_generator import generate_event
from .events import PhysicsEvent
from .unweighting import UnweightingController


logger = logging.getLogger(__name__)


@dataclass
class RunStats:
    total_events: int = 0
    isr_events: int = 0
    exhausted: int = 0
    integrated_luminosity: float = 0.0  # pb^-1
    ticks: int = 0

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


class SimulationRun:

    def __init__(self,
                 mode: Union[str, RunMode, BeamConfig] = RunMode.ALL,
                 allow_isr: bool = True,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 config: Optional[SimulationConfig] = None,
                 generator_config: Optional[GeneratorConfig] = None,
                 cross_section: Optional[CrossSection] = None,
                 clock: Callable[[], float] = time.time):
        self.mode = RunMode.parse(mode)
        self.allow_isr = allow_isr
        self.rng = rng or np.random.default_rng(seed)
        self.config = config or SimulationConfig()
        self.generator_config = generator_config
        self.cross_section = cross_section
        self.clock = clock

        self.events: Deque[PhysicsEvent] = deque(maxlen=self.config.buffer_size)
        self.stats = RunStats()
        self.controller = UnweightingController()
        self.last_event: Optional[PhysicsEvent] = None

    # -------------------- Controls --------------------

    def set_mode(self, mode: Union[str, RunMode, BeamConfig]):
        self.mode = RunMode.parse(mode)

    def set_allow_isr(self, allow_isr: bool):
        self.allow_isr = allow_isr

    def reset(self):
        """Clear the display buffer and all run totals."""
        self.events.clear()
        self.stats = RunStats()
        self.controller.reset()
        self.last_event = None

    # -------------------- Generation --------------------

    def tick(self) -> List[PhysicsEvent]:
        """Generate one batch and fold it into the buffer and the stats."""
        batch_size = self.config.batch_size
        first_id = self.stats.total_events

        new_events = []
        for i in range(batch_size):
            event = generate_event(
                first_id + i,
                self.mode,
                allow_isr=self.allow_isr,
                rng=self.rng,
                cross_section=self.cross_section,
                config=self.generator_config,
                unweighting_controller=self.controller,
                clock=self.clock,
            )
            if event is None:
                self.stats.exhausted += 1
                continue
            new_events.append(event)

        self.events.extend(new_events)
        if new_events:
            self.last_event = new_events[-1]

        # Ids advance by the full batch even when a slot was skipped
        self.stats.total_events += batch_size
        self.stats.isr_events += sum(1 for e in new_events if e.is_isr)
        self.stats.integrated_luminosity += self.config.luminosity_per_tick
        self.stats.ticks += 1
        return new_events

    def run(self, ticks: int) -> RunStats:
        for _ in range(ticks):
            self.tick()
        logger.info(
            f"Run: {self.stats.ticks} ticks, {self.stats.total_events} events "
            f"({self.stats.isr_events} ISR, {self.stats.exhausted} exhausted), "
            f"L = {self.stats.integrated_luminosity:.2f} pb^-1"
        )
        return self.stats

    # -------------------- Views --------------------

    def events_by_category(self) -> Dict[str, List[PhysicsEvent]]:
        """Split the buffer into non-ISR events per beam and all ISR events."""
        groups: Dict[str, List[PhysicsEvent]] = {beam.value: [] for beam in BeamConfig}
        groups["ISR"] = []
        for event in self.events:
            if event.is_isr:
                groups["ISR"].append(event)
            else:
                groups[event.beam.value].append(event)
        return groups

    def __len__(self) -> int:
        return len(self.events)
