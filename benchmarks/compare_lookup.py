#!/usr/bin/env python3
"""
Benchmark attribute name classification.

Measures:
- classify() over every known name
- classify() over names that miss (custom, case-mismatched, empty)
- PropertyBag construction for a typical element
- A linear scan over the known names, as a baseline

Run after `SVGATTRS_USE_MYPYC=1 pip install -e .` to measure the compiled lookup.
"""

import sys
import time

from svgattrs import PropertyBag, all_attributes, classify

KNOWN_NAMES = [attr.spelling for attr in all_attributes()]

MISSING_NAMES = ["", "Fill", "data-custom", "onclick", " fill", "inkscape:label", "xmlns", "sodipodi:type"]

ELEMENT_ATTRS = [
    "id", "rect1",
    "x", "10",
    "y", "20",
    "width", "100",
    "height", "50",
    "fill", "#ff0000",
    "stroke", "black",
    "stroke-width", "2",
    "data-custom", "1",
    "inkscape:label", "box",
]


def check_compiled_modules():
    """Check whether the lookup module is compiled with mypyc."""
    from svgattrs import lookup

    module_file = getattr(lookup, "__file__", "") or ""
    return module_file.endswith((".so", ".pyd"))


def linear_classify(name):
    for attr in all_attributes():
        if attr.spelling == name:
            return attr
    return None


def benchmark(func, names, iterations):
    start = time.perf_counter()
    for _ in range(iterations):
        for name in names:
            func(name)
    end = time.perf_counter()
    return end - start


def benchmark_property_bag(iterations):
    start = time.perf_counter()
    for _ in range(iterations):
        PropertyBag(ELEMENT_ATTRS)
    end = time.perf_counter()
    return end - start


def run_benchmarks(iterations):
    print("=" * 70)
    print("svgattrs classification benchmark")
    print("=" * 70)

    if check_compiled_modules():
        print("\n✓ svgattrs.lookup is compiled")
    else:
        print("\n✗ svgattrs.lookup is pure Python")

    lookups = iterations * len(KNOWN_NAMES)

    print("\n" + "-" * 70)
    print(f"Benchmark 1: classify() hits ({len(KNOWN_NAMES)} names)")
    print("-" * 70)
    time_hits = benchmark(classify, KNOWN_NAMES, iterations)
    print(f"Time: {time_hits:.4f}s for {lookups:,} lookups")
    print(f"Rate: {lookups / time_hits:,.0f} lookups/second")

    misses = iterations * len(MISSING_NAMES)

    print("\n" + "-" * 70)
    print("Benchmark 2: classify() misses")
    print("-" * 70)
    time_misses = benchmark(classify, MISSING_NAMES, iterations)
    print(f"Time: {time_misses:.4f}s for {misses:,} lookups")
    print(f"Rate: {misses / time_misses:,.0f} lookups/second")

    print("\n" + "-" * 70)
    print("Benchmark 3: linear scan baseline (hits)")
    print("-" * 70)
    scan_iterations = max(1, iterations // 10)
    time_scan = benchmark(linear_classify, KNOWN_NAMES, scan_iterations)
    scans = scan_iterations * len(KNOWN_NAMES)
    print(f"Time: {time_scan:.4f}s for {scans:,} lookups")
    print(f"Rate: {scans / time_scan:,.0f} lookups/second")
    print(f"Speedup of classify(): {(time_scan / scans) / (time_hits / lookups):.1f}x")

    print("\n" + "-" * 70)
    print("Benchmark 4: PropertyBag for a 10-attribute element")
    print("-" * 70)
    time_bag = benchmark_property_bag(iterations)
    print(f"Time: {time_bag:.4f}s for {iterations:,} elements")
    print(f"Rate: {iterations / time_bag:,.0f} elements/second")

    print("\n" + "=" * 70)

    return {
        "hits": time_hits,
        "misses": time_misses,
        "scan": time_scan,
        "property_bag": time_bag,
    }


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark svgattrs attribute classification")
    parser.add_argument(
        "--iterations",
        type=int,
        default=10000,
        help="Passes over each name list (default: 10000)",
    )
    args = parser.parse_args()

    if args.iterations < 1:
        print("ERROR: --iterations must be at least 1", file=sys.stderr)
        sys.exit(1)

    run_benchmarks(args.iterations)


if __name__ == "__main__":
    main()
