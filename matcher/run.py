"""
Command-line runner for the opposite-opinion matcher.

Usage:
    python -m matcher.run --config configs/config.yaml

The runner performs the following steps:
1. Load and validate configuration
2. Load participants from the responses file
3. Build the scoring strategy
4. Run greedy matching
5. Build the match report
6. Save pairings and report as JSON
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def run_matching(
    config_path: str,
    data_path: Optional[str] = None,
    strategy: Optional[str] = None,
    output_dir: Optional[str] = None
) -> Dict[str, Any]:
    """
    Run one matching pass end to end.

    Args:
        config_path: Path to the configuration YAML file
        data_path: If provided, read responses from here instead of config default
        strategy: If provided, override scoring.strategy from the config
        output_dir: If provided, write artifacts to this directory instead of config default

    Returns:
        Dictionary with the pairings, the report and paths to artifacts
    """
    from .configs import load_config, validate_config, get_config_value
    from .data_loading import load_participants
    from .scoring import create_strategy_from_config
    from .matching import GreedyMatcher
    from .evaluation import create_match_report

    logger.info("=" * 60)
    logger.info("OPPOSITE-OPINION MATCHING")
    logger.info("=" * 60)

    config = load_config(config_path)
    if strategy is not None:
        config.setdefault("scoring", {})["strategy"] = strategy

    issues = validate_config(config)
    if issues:
        for issue in issues:
            logger.warning(f"Config issue: {issue}")

    setup_logging(get_config_value(config, "global.log_level", "INFO"))

    # =========================================================================
    # 1. Load participants
    # =========================================================================
    effective_data_path = data_path or get_config_value(config, "data.path")
    if effective_data_path is None:
        raise ValueError("No responses file given (set data.path or pass --data)")

    participants = load_participants(
        effective_data_path,
        id_column=get_config_value(config, "data.id_column", "participant_id"),
        delimiter=get_config_value(config, "data.delimiter", ",")
    )

    # =========================================================================
    # 2. Match
    # =========================================================================
    scorer = create_strategy_from_config(config)
    matcher = GreedyMatcher(
        scorer,
        reject_duplicate_ids=get_config_value(config, "matching.reject_duplicate_ids", True)
    )
    pairings = matcher.find_matches(participants)

    report = create_match_report(
        scorer,
        participants,
        pairings,
        include_candidates=get_config_value(config, "matching.include_candidate_stats", True)
    )
    report.additional_metrics["matcher"] = matcher.to_dict()
    logger.info("\n" + report.summary())

    # =========================================================================
    # 3. Save artifacts
    # =========================================================================
    effective_output_dir = Path(
        output_dir or get_config_value(config, "global.output_dir", "artifacts")
    )
    effective_output_dir.mkdir(parents=True, exist_ok=True)

    matches_path = effective_output_dir / "matches.json"
    with open(matches_path, "w") as f:
        json.dump({
            "created_at": datetime.now().isoformat(),
            "strategy": scorer.to_dict(),
            "pairings": [p.to_dict() for p in pairings]
        }, f, indent=2)
    logger.info(f"Saved {len(pairings)} pairings to {matches_path}")

    report_path = effective_output_dir / "report.json"
    report.save(str(report_path))

    return {
        "success": True,
        "pairings": pairings,
        "report": report,
        "artifacts": {
            "matches": str(matches_path),
            "report": str(report_path)
        }
    }


def main(argv=None):
    """Main entry point for the runner."""
    parser = argparse.ArgumentParser(
        description="Pair survey participants with their most opposite counterpart"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--data",
        type=str,
        default=None,
        help="Responses CSV file (overrides config)"
    )
    parser.add_argument(
        "--strategy",
        type=str,
        default=None,
        choices=["simple_difference", "euclidean", "weighted", "polarization"],
        help="Scoring strategy (overrides config)"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory for artifacts (overrides config)"
    )

    args = parser.parse_args(argv)

    try:
        run_matching(
            args.config,
            data_path=args.data,
            strategy=args.strategy,
            output_dir=args.output_dir
        )
        logger.info("\nMatching completed successfully!")
        return 0
    except Exception as e:
        logger.exception(f"Matching failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
