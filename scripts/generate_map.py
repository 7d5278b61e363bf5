"""Print a generated act map (and optionally its encounters) as JSON.

Usage:
    uv run python scripts/generate_map.py --seed 1ABCD --act 1 [--ascension 20] [--encounters]
"""

from __future__ import annotations

import argparse
import json
import logging

from sts_seedmap.dungeon.encounters import encounters_for_map
from sts_seedmap.dungeon.map_gen import generate_map


def parse_seed(raw: str, force_text: bool) -> int | str:
    """Numeric-looking seeds are integers unless text is forced."""
    if force_text:
        return raw
    try:
        return int(raw)
    except ValueError:
        return raw


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate a deterministic act map")
    parser.add_argument("--seed", type=str, required=True, help="Integer or text seed")
    parser.add_argument("--text-seed", action="store_true", help="Always hash --seed as text")
    parser.add_argument("--act", type=int, default=1, help="Act number (1-3)")
    parser.add_argument("--ascension", type=int, default=0, help="Ascension level")
    parser.add_argument("--encounters", action="store_true", help="Include monster encounters")
    parser.add_argument("--verbose", action="store_true", help="Log generation details")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    seed = parse_seed(args.seed, args.text_seed)
    act_map = generate_map(seed, args.act, args.ascension)

    output = act_map.model_dump(mode="json")
    if args.encounters:
        found = encounters_for_map(seed, act_map, args.ascension)
        output["encounters"] = {str(idx): enc for idx, enc in found.items()}

    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
