# run_sampler.py
# Usage: python run_sampler.py [preset-id-or-json-path] [output-dir] [seed]
import logging
import sys
from pathlib import Path

from pds_engine.core.config import SamplerError, list_presets, load_config
from pds_engine.runner import export_result, run_sampling
from pds_engine.setup_logging import setup_logging

logger = logging.getLogger(__name__)

ARTIFACTS_ROOT = Path(__file__).resolve().parent / "artifacts"


def main(argv: list[str]) -> int:
    setup_logging()

    source = argv[1] if len(argv) > 1 else "default"
    out_dir = Path(argv[2]) if len(argv) > 2 else None
    overrides = {}
    if len(argv) > 3:
        try:
            overrides["seed"] = int(argv[3])
        except ValueError:
            logger.error("Seed must be an integer, got '%s'", argv[3])
            return 1

    try:
        config = load_config(source, overrides)
        result = run_sampling(config)
        if out_dir is None:
            out_dir = ARTIFACTS_ROOT / config.id.replace("/", "_") / str(config.seed)
        paths = export_result(result, config, str(out_dir))
    except SamplerError as e:
        logger.error("Sampling failed: %s", e)
        logger.info("Available presets: %s", ", ".join(list_presets()))
        return 1

    for kind, path in paths.items():
        logger.info("  %s -> %s", kind, path)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
