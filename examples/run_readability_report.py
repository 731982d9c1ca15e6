"""
Tiny helper script to sanity check the readability pipeline on two samples.
"""

from __future__ import annotations

from readability_score import analyze_text, build_report
from readability_score.reporting import format_report


def main() -> None:
    samples = [
        "The cat sat on the mat. It was raining outside, but the cat was warm and happy.",
        "Quantum entanglement is a physical phenomenon that occurs when particles share proximity in ways such that their states cannot be described independently.",
    ]

    for sample in samples:
        analysis = analyze_text(sample)
        print("-" * 40)
        print(sample)
        print(analysis.metrics)
        for line in format_report(build_report(analysis, "all")):
            print(line)


if __name__ == "__main__":
    main()
