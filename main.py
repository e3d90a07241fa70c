import argparse
import json
import logging
import sys

from writescore.app_context import AppContext
from writescore.config_loader import ScoringContext, load_config
from writescore.exceptions import ScoringError
from writescore.scorer.composite import recommend_stage

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def read_text(path: str | None) -> str:
    """Read the writing sample from a file, or stdin when no path is given."""
    if not path or path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main():
    parser = argparse.ArgumentParser(description="WriteScore content quality scorer")
    parser.add_argument('--config', type=str, default='config.yaml',
                        help='Path to the YAML config (default: config.yaml)')
    parser.add_argument('--file', type=str, default=None,
                        help='Text file to score (default: read stdin)')
    parser.add_argument('--role-type', type=str, default=None,
                        help='Role the sample was written for, e.g. content_writing')
    parser.add_argument('--no-cache', action='store_true',
                        help='Skip the score cache entirely')
    parser.add_argument('--no-llm', action='store_true',
                        help='Skip the qualitative LLM review')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
        text = read_text(args.file)
    except (ScoringError, OSError) as e:
        logger.error(f"Could not start: {e}")
        return 1

    context = config.scorer.context
    if args.role_type:
        context = ScoringContext(
            role_type=args.role_type,
            shortlist_threshold=context.shortlist_threshold
        )

    app = AppContext.build(config, use_cache=not args.no_cache, use_llm=not args.no_llm)
    try:
        scores = app.scoring_service.score(text, context=context)
    except ScoringError as e:
        logger.error(f"Scoring failed: {e}")
        return 1
    finally:
        app.close()

    output = scores.model_dump(mode="json")
    output['stage'] = recommend_stage(scores.composite_score, context.shortlist_threshold)
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
