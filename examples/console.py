"""Console run -- populate a field and print the census every few steps.

Demonstrates:
- Seeding a Simulator for a reproducible run
- Watching deaths through the on_death hook
- Reading the census and the chronicle afterwards

Run: python examples/console.py --steps 500 --seed 42
"""
from __future__ import annotations

import argparse
from collections import Counter

from tick_wild import Simulator


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="tick-wild console run")
    p.add_argument("--steps", type=int, default=500, help="Steps to simulate (default: 500)")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--depth", type=int, default=80, help="Field rows (default: 80)")
    p.add_argument("--width", type=int, default=120, help="Field columns (default: 120)")
    p.add_argument("--every", type=int, default=50, help="Print census every N steps (default: 50)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    sim = Simulator(depth=args.depth, width=args.width, seed=args.seed)
    sim.populate()

    causes: Counter[str] = Counter()
    sim.on_death(lambda s, animal: causes.update([animal.death_cause.value]))

    print(f"=== tick-wild  seed={sim.seed}  field={args.depth}x{args.width} ===\n")
    print(f"  step {0:>5}  |  {sim.census()}")
    for _ in range(args.steps):
        if not sim.is_viable():
            break
        sim.step()
        if sim.step_number % args.every == 0:
            print(f"  step {sim.step_number:>5}  |  {sim.census()}")

    print(f"\nStopped at step {sim.step_number}.")
    print("Deaths by cause:", ", ".join(f"{c}={n}" for c, n in sorted(causes.items())))
    print(f"Births recorded: {len(sim.chronicle.query(kind='birth'))}")


if __name__ == "__main__":
    main()
