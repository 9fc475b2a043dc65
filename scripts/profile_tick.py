#!/usr/bin/env python3
"""
Tick throughput and memory profile.

Times tick() on the default 128x64 universe (or a custom size) and tracks
process memory across runs to catch leaks from the per-tick buffer swap.
"""

import gc
import json
import os
import sys
import time
from typing import Dict

import psutil

# Add repository root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lifegrid import Universe


def measure_memory_mb() -> float:
    """Get current process memory usage in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def profile_ticks(width: int, height: int, ticks: int, cycles: int) -> Dict:
    """Run `cycles` batches of `ticks` ticks and collect timing and memory."""
    universe = Universe(width, height)
    baseline_mb = measure_memory_mb()

    cycle_stats = []
    for cycle in range(cycles):
        start = time.perf_counter()
        for _ in range(ticks):
            universe.tick()
        elapsed = time.perf_counter() - start

        gc.collect()
        memory_mb = measure_memory_mb()
        cycle_stats.append({
            "cycle": cycle,
            "ms_per_tick": elapsed * 1000 / ticks,
            "memory_mb": memory_mb,
            "alive": universe.count_alive(),
        })
        print(f"Cycle {cycle}: {elapsed * 1000 / ticks:.3f} ms/tick, "
              f"{memory_mb:.1f} MB, {universe.count_alive()} alive")

    return {
        "width": width,
        "height": height,
        "ticks_per_cycle": ticks,
        "baseline_memory_mb": baseline_mb,
        "memory_growth_mb": cycle_stats[-1]["memory_mb"] - baseline_mb if cycle_stats else 0.0,
        "mean_ms_per_tick": sum(c["ms_per_tick"] for c in cycle_stats) / max(len(cycle_stats), 1),
        "final_generation": universe.generation,
        "cycles": cycle_stats,
    }


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Profile universe tick throughput and memory")
    parser.add_argument("--width", type=int, default=128, help="Grid width (cells)")
    parser.add_argument("--height", type=int, default=64, help="Grid height (cells)")
    parser.add_argument("--ticks", type=int, default=200, help="Ticks per cycle")
    parser.add_argument("--cycles", type=int, default=10, help="Number of profiling cycles")
    parser.add_argument("--max-growth-mb", type=float, default=20.0, help="Fail if memory grows more than this")
    parser.add_argument("--output", type=str, default=None, help="Write JSON results to this file")
    args = parser.parse_args()

    results = profile_ticks(args.width, args.height, args.ticks, args.cycles)

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(results, f, indent=2)
        print(f"Results saved to: {args.output}")

    print(f"Mean tick time: {results['mean_ms_per_tick']:.3f} ms")
    if results["memory_growth_mb"] > args.max_growth_mb:
        print(f"Memory grew {results['memory_growth_mb']:.1f} MB (limit {args.max_growth_mb} MB)")
        sys.exit(1)
    print(f"Memory growth {results['memory_growth_mb']:.1f} MB within {args.max_growth_mb} MB")
