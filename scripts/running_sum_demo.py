#!/usr/bin/env python3
"""
Running Sum Witness
===================
Runs the running-sum transducer over 1, 2, 3, ... both directly and
through its causal-function rendering, and checks the outputs agree.

INVARIANTS:
1. One output per input
2. Both interpretations commit the same outputs
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from causal_streams import (
    Stream, TraceCollector, running_sum, interpret_transducer, interpret_causal,
    transducer_to_causal, streams_bisimilar,
)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Running-sum transducer vs. causal function")
    parser.add_argument("-n", "--count", type=int, default=10, help="outputs to print")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    naturals = Stream.iterate(lambda k: k + 1, 1)
    trace = TraceCollector("transducer")
    direct = interpret_transducer(running_sum(), naturals, trace=trace)
    via_causal = interpret_causal(transducer_to_causal(running_sum()), naturals)

    print(f"[*] transducer: {list(direct.take(args.count))}")
    print(f"[*] causal:     {list(via_causal.take(args.count))}")
    print(f"[*] steps committed: {trace.entry_count}")

    report = streams_bisimilar(direct, via_causal, depth=args.count)
    if not report:
        print(f"[!] MISMATCH: {report.counterexample.error.message}")
        return 1
    print("[*] outputs agree")
    return 0


if __name__ == "__main__":
    sys.exit(main())
