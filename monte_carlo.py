#!/usr/bin/env python3
"""
Monte Carlo driver script for the HERA ISR explorer

Examples:
    python monte_carlo.py --mode ALL --events 1000
    python monte_carlo.py --mode HER --events 500 --seed 42 --no-isr
"""

import argparse
import logging
from collections import Counter

import numpy as np

from hera import BeamConfig, RunMode, compute_limit, generate_batch, estimate_w_max
from hera.config import GeneratorConfig
from hera.cross_sections import get_cross_section, list_registered_models, DEFAULT_MODEL
from hera.kinematics import momentum_transfer, scattered_electron, scattered_electron_angle
from hera.validation import validate_events


def print_event_stats(events):
    beams = Counter(e.beam.value for e in events)
    n = len(events)
    isr = [e for e in events if e.is_isr]

    print("\n📊 Event Statistics")
    print("=" * 60)
    print(f"Accepted events              : {n}")
    print("\nEvents by beam:")
    for beam in BeamConfig:
        count = beams.get(beam.value, 0)
        share = count / n if n else 0.0
        print(f"  • {beam.value:4s} (Ep = {beam.proton_energy:6.1f} GeV): {count:6d} events ({share:.1%})")

    if n:
        print("\nKinematics:")
        print(f"  <y>        = {np.mean([e.y for e in events]):.4f}")
        print(f"  <log10 Q2> = {np.mean(np.log10([e.Q2 for e in events])):.3f}")
        print(f"  <log10 x>  = {np.mean(np.log10([e.x for e in events])):.3f}")
        print(f"  <W>        = {np.mean(np.sqrt([e.W2 for e in events])):.1f} GeV")

        electrons = [scattered_electron(e) for e in events]
        theta = np.degrees([scattered_electron_angle(e.electron_energy, e.Q2, e.y) for e in events])
        print("\nScattered electron:")
        print(f"  <E'>       = {np.mean([k.E for k in electrons]):.2f} GeV")
        print(f"  <theta>    = {np.mean(theta):.1f} deg (from proton direction)")

        # Q2 rebuilt from q = k - k' must match the generated value
        closure = max(abs(-momentum_transfer(e).mass2 - e.Q2) / e.Q2 for e in events)
        print(f"  Q2 closure = {closure:.1e} (max relative)")
    if isr:
        print(f"\nISR events: {len(isr)} ({len(isr) / n:.1%}), "
              f"<E_gamma> = {np.mean([e.E_gamma for e in isr]):.2f} GeV, "
              f"<sqrt(s)> = {np.mean(np.sqrt([e.s for e in isr])):.1f} GeV")
    print("=" * 60 + "\n")


def print_limits():
    print("\n📈 Kinematic limits (y = 1)")
    print("=" * 60)
    limits = {beam: compute_limit(beam) for beam in BeamConfig}
    print(f"{'x':>10s}" + "".join(f"{beam.value + ' Q2':>16s}" for beam in BeamConfig))
    for i, point in enumerate(limits[BeamConfig.HER]):
        row = "".join(f"{limits[beam][i].Q2:16.3f}" for beam in BeamConfig)
        print(f"{point.x:10.3e}{row}")
    print("=" * 60 + "\n")


def build_parser():
    return argparse.ArgumentParser(
        description="HERA DIS Monte Carlo Event Generator with toy ISR",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  python monte_carlo.py --mode ALL --events 1000
  python monte_carlo.py --mode LER --events 500 --seed 42
  python monte_carlo.py --mode HER --events 100 --no-isr --verbose --validate"""
    )


def main(argv=None):
    parser = build_parser()
    parser.add_argument("--mode", default="ALL", help="Beam mode: HER, MER, LER or ALL (default ALL)")
    parser.add_argument("--events", type=int, default=10, help="Number of events (default 10)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (optional)")
    parser.add_argument("--no-isr", action="store_true", help="Disable initial state radiation")
    parser.add_argument("--model", default=DEFAULT_MODEL,
                        help=f"Cross-section model {sorted(list_registered_models())} (default {DEFAULT_MODEL})")
    parser.add_argument("--verbose", action="store_true", help="Show progress output")
    parser.add_argument("--stats", action="store_true", help="Print event statistics after generation")
    parser.add_argument("--limits", action="store_true", help="Print the y = 1 kinematic limits")
    parser.add_argument("--validate", action="store_true", help="Check kinematic invariants of every event")
    parser.add_argument("--wmax", action="store_true", help="Estimate the largest MC weight for the mode")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        mode = RunMode.parse(args.mode)
        cross_section = get_cross_section(args.model)
        config = GeneratorConfig.from_env()
    except ValueError as e:
        parser.error(str(e))
    if args.events < 0:
        parser.error("--events must be non-negative")

    allow_isr = not args.no_isr

    print("\n" + "=" * 60)
    print("🔥 HERA DIS Monte Carlo Event Generator")
    print("=" * 60)
    print(f"Beam Mode        : {mode.value}")
    print(f"ISR              : {'enabled' if allow_isr else 'disabled'}")
    print(f"Number of Events : {args.events}")
    print(f"Random Seed      : {args.seed if args.seed is not None else 'None'}")
    print(f"Cross Section    : {cross_section.name}")
    print("=" * 60 + "\n")

    rng = np.random.default_rng(args.seed)
    results = generate_batch(
        args.events,
        mode,
        allow_isr=allow_isr,
        rng=rng,
        cross_section=cross_section,
        config=config,
    )
    events = results["events"]

    print("\n" + "=" * 60)
    print("✅ Generation Complete")
    print("=" * 60)
    print(f"Accepted events   : {results['success']}/{results['total']}")
    print(f"Exhausted slots   : {results['exhausted']}")
    print(f"ISR events        : {results['isr']}")
    print(f"Accept efficiency : {results['efficiency']:.2%}")
    if events:
        print(f"Event ID range    : {events[0].id} - {events[-1].id}")
        if len(events) <= 20:
            for e in events:
                print(f"  {e}")
    else:
        print("No events generated.")
    print("=" * 60 + "\n")

    if args.validate:
        summary = validate_events(events, config=config)
        print(f"🔍 Invariant checks: {summary['consistent']}/{summary['total']} consistent "
              f"({summary['violations']} violations)\n")

    if args.wmax:
        w_max = estimate_w_max(mode, rng=rng, allow_isr=allow_isr, cross_section=cross_section, config=config)
        print(f"⚖️  Estimated w_max = {w_max:.3f}\n")

    if args.limits:
        print_limits()

    if args.stats and events:
        print_event_stats(events)

    return results


if __name__ == "__main__":
    main()
