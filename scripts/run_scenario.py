"""CLI for running scripted elevator scenarios defined in JSON files."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Optional

from controller import Scenario, ScenarioResult, run_scenario


def load_scenario(path: Path) -> Scenario:
    return Scenario.model_validate(json.loads(path.read_text()))


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def summarize(result: ScenarioResult) -> Dict:
    return {
        "scenario": result.name,
        "description": result.description,
        "accepted": result.accepted_count,
        "rejected": result.rejected_count,
        "final_state": result.final_state,
        "trace": [asdict(entry) for entry in result.trace],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("scenario", type=Path, help="Path to a JSON scenario file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the operation trace as JSON",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every transition")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    scenario = load_scenario(args.scenario)
    if scenario.name is None:
        scenario.name = args.scenario.stem
    results = summarize(run_scenario(scenario))

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Operations: {results['accepted']} accepted, {results['rejected']} rejected")
    print("Final state:")
    for key, value in results["final_state"].items():
        print(f"  {key}: {value}")
    if args.output:
        print(f"Saved trace to {args.output}")


if __name__ == "__main__":
    main()
