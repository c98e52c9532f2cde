"""
Linked list algorithm visualizer - command line entry point

Usage:
    llviz reverse 10 20 30
    llviz find-middle 10 20 30 40 --step 4
    llviz remove-nth 10 20 30 -n 1 --render matplotlib --output remove.gif
    llviz reverse 1 2 3 --render manim --quality high
    llviz reverse 1 2 3 4 5 --profile
"""

import argparse
import cProfile
import io
import logging
import pstats
import sys

from .algorithms import FIND_MIDDLE, REMOVE_NTH_FROM_END, REVERSE_LIST, run_algorithm
from .config import DEBUG, VISUALIZER_CONFIG
from .profiling_helpers import print_summary, timed_csv
from .steps import take_snapshot
from .text_view import format_step, format_steps

log = logging.getLogger(__name__)

COMMANDS = {
    "reverse": REVERSE_LIST,
    "find-middle": FIND_MIDDLE,
    "remove-nth": REMOVE_NTH_FROM_END,
}

QUALITY = {"low": "low_quality", "high": "high_quality"}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="llviz",
        description="Replay linked list algorithms step by step.",
    )
    parser.add_argument("algorithm", choices=sorted(COMMANDS), help="Algorithm to run")
    parser.add_argument("values", nargs="*", help="Node values, head first")
    parser.add_argument("-n", type=int, default=None,
                        help="Position from the end to remove (remove-nth only)")
    parser.add_argument("--render", choices=("text", "matplotlib", "manim"), default="text")
    parser.add_argument("--step", type=int, default=None,
                        help="Print only this 1-based step (text mode)")
    parser.add_argument("--output", default=None,
                        help="Save the matplotlib animation here instead of showing it")
    parser.add_argument("--quality", choices=sorted(QUALITY), default=None,
                        help="manim render quality")
    parser.add_argument("--profile", action="store_true",
                        help="Profile step generation, log its timing to CSV and print both")
    return parser


def setup_logging():
    logging.basicConfig(
        filename=VISUALIZER_CONFIG["log_file"],
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def profile_generation(name, nodes, params, top=30):
    pr = cProfile.Profile()
    pr.enable()
    steps = run_algorithm(name, nodes, *params)
    pr.disable()

    s = io.StringIO()
    pstats.Stats(pr, stream=s).sort_stats("cumtime").print_stats(top)
    print(s.getvalue())
    return steps


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging()

    name = COMMANDS[args.algorithm]
    params = ()
    if name == REMOVE_NTH_FROM_END:
        if args.n is None:
            parser.error("remove-nth needs -n")
        params = (args.n,)
    elif args.n is not None:
        parser.error(f"-n only applies to remove-nth, not {args.algorithm}")
    if args.output and args.render != "matplotlib":
        parser.error("--output only applies to --render matplotlib")
    if not args.values:
        parser.error("Cannot run algorithm on an empty list.")

    nodes = take_snapshot(args.values)
    log.info("cli: %s on %d values", name, len(nodes))
    if args.profile:
        steps = timed_csv(profile_generation, name, nodes, params)
        print_summary()
    else:
        steps = run_algorithm(name, nodes, *params)

    if args.render == "text":
        if args.step is not None:
            if not 1 <= args.step <= len(steps):
                parser.error(f"--step must be between 1 and {len(steps)}")
            print(format_step(steps[args.step - 1], args.step - 1, len(steps)))
        else:
            print(format_steps(steps))
    elif args.render == "matplotlib":
        from .matplotlib_view import save_animation, show_steps
        if args.output:
            save_animation(steps, args.output, title=name)
            print(f"Saved {len(steps)} frames to {args.output}")
        else:
            show_steps(steps, title=name)
    else:
        from .manim_view import render_steps
        quality = QUALITY[args.quality] if args.quality else None
        print(render_steps(steps, title=name, quality=quality))
    return 0


if __name__ == "__main__":
    sys.exit(main())
