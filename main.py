import argparse
import json
import logging
import os
import sys
from pathlib import Path

import yaml

from src.domain.entities.tracking_config import TrackingConfiguration
from src.domain.entities.training_config import TrainingConfiguration
from src.infrastructure.cli.argument_parser import apply_overrides, build_parser
from src.infrastructure.config.config_loader import ConfigLoader
from src.infrastructure.di.container import Container

TRACKING_PREFIX = "wandb-"


def setup_logging() -> None:
    level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _loader(args) -> ConfigLoader:
    config_path = Path(args.config)
    # The default config is optional; an explicitly named one must exist
    if not config_path.exists() and args.config == "config.yaml":
        return ConfigLoader(None)
    return ConfigLoader(config_path)


def _effective_configs(args):
    loader = _loader(args)
    training_cfg = apply_overrides(loader.load_training_config(), args)
    tracking_cfg = apply_overrides(loader.load_tracking_config(), args, prefix=TRACKING_PREFIX)
    docs_cfg = loader.load_docs_config()

    docs_dir = getattr(args, "docs_dir", None)
    if docs_dir:
        docs_cfg = docs_cfg.model_copy(update={"root": docs_dir})
    elif loader.config_path is not None and not Path(docs_cfg.root).is_absolute():
        # docs root in the YAML is relative to the config file
        docs_cfg = docs_cfg.model_copy(update={"root": str(loader.config_path.parent / docs_cfg.root)})
    return training_cfg, tracking_cfg, docs_cfg


def _cmd_check(args) -> int:
    _, _, docs_cfg = _effective_configs(args)
    container = Container()
    container.register_configs(docs_config=docs_cfg)
    report = container.get_integrity_service().check()

    if args.format == "json":
        print(json.dumps(report.to_dict(), indent=2))
    else:
        for issue in report.issues:
            print(issue.format())
        print(f"Checked {report.documents_checked} document(s): "
              f"{len(report.errors)} error(s), {len(report.warnings)} warning(s)")

    if not report.ok:
        return 1
    if args.strict and report.warnings:
        return 1
    return 0


def _cmd_train(args) -> int:
    training_cfg, tracking_cfg, _ = _effective_configs(args)

    container = Container()
    container.register_configs(training_config=training_cfg, tracking_config=tracking_cfg)
    training_service = container.get_training_service()

    training_service.validate_configuration(training_cfg)
    result = training_service.train(training_cfg)

    # Minimal reporting
    print("Training complete.")
    print("Final train loss:", f"{result.final_train_loss:.6f}")
    print("Best val loss:", f"{result.best_val_loss:.6f}")
    print("Total steps:", result.total_steps)
    return 0


def _cmd_config(args) -> int:
    training_cfg, tracking_cfg, docs_cfg = _effective_configs(args)
    print(yaml.safe_dump({
        "training": training_cfg.to_dict(),
        "tracking": tracking_cfg.to_dict(),
        "docs": docs_cfg.model_dump(),
    }, sort_keys=False), end="")
    return 0


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Python conventions tutorials: docs checks and examples")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Check documentation integrity")
    check.add_argument("--config", default="config.yaml", help="Path to YAML config")
    check.add_argument("--docs-dir", default=None, help="Documentation directory (overrides config)")
    check.add_argument("--format", choices=["text", "json"], default="text", help="Report format")
    check.add_argument("--strict", action="store_true", help="Fail on warnings too")
    check.set_defaults(handler=_cmd_check)

    for name, handler, help_text in (
        ("train", _cmd_train, "Run the example training with experiment tracking"),
        ("config", _cmd_config, "Print the effective configuration"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--config", default="config.yaml", help="Path to YAML config")
        build_parser(TrainingConfiguration, sub)
        build_parser(TrackingConfiguration, sub, prefix=TRACKING_PREFIX)
        sub.set_defaults(handler=handler)
    return parser


def main(argv=None):
    setup_logging()
    parser = build_cli()

    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(argv)

    try:
        return args.handler(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
